"""Test city lookup and candidate selection."""

import json
from unittest.mock import patch

import pytest
import requests

from conftest import make_response
from meteograma.errors import (
    DeserializationError,
    InvalidSelectionError,
    NetworkError,
    NoResultsError,
)
from meteograma.lookup import CityLookupClient, search_cities, select_city
from meteograma.schemas import CityRecord, MeteogramConfig


def test_search_cities_request(config, sample_cities_data):
    """Test that the query is sent as the term parameter."""
    client = CityLookupClient(config)
    response = make_response(json.dumps(sample_cities_data))
    with patch("requests.get", return_value=response) as mock_get:
        client.search_cities("sao paulo")

    mock_get.assert_called_once()
    args, kwargs = mock_get.call_args
    assert args[0] == "https://tempo.cptec.inpe.br/autocomplete"
    assert kwargs["params"] == {"term": "sao paulo"}
    assert kwargs["headers"]["User-Agent"] == config.service.user_agent
    assert kwargs["timeout"] is None


def test_search_cities_copies_fields_verbatim(config, sample_cities_data):
    """Test that every array element becomes a CityRecord, in order."""
    client = CityLookupClient(config)
    with patch("requests.get", return_value=make_response(json.dumps(sample_cities_data))):
        cities = client.search_cities("sao paulo")

    assert len(cities) == len(sample_cities_data)
    for city, item in zip(cities, sample_cities_data):
        assert isinstance(city, CityRecord)
        assert city.model_dump() == item


def test_search_cities_empty_result(config):
    """Test that an empty array is a valid, empty result."""
    with patch("requests.get", return_value=make_response("[]")):
        assert CityLookupClient(config).search_cities("xyzzy") == []


def test_search_cities_parses_body_on_error_status(config, sample_cities_data):
    """Test that a non-2xx status does not stop the body from being used."""
    response = make_response(json.dumps(sample_cities_data), status_code=500)
    with patch("requests.get", return_value=response):
        cities = CityLookupClient(config).search_cities("sao paulo")
    assert len(cities) == 2


@pytest.mark.parametrize(
    "body",
    [
        "<html>Service Unavailable</html>",
        '{"id": "1", "label": "x", "value": "x", "custom": "cidade/1"}',
        '[{"id": "1", "label": "x", "value": "x"}]',
        '[{"id": 1, "label": "x", "value": "x", "custom": "cidade/1"}]',
        '[{"id": "1", "label": null, "value": "x", "custom": "cidade/1"}]',
    ],
)
def test_search_cities_bad_shape(config, body):
    """Test that malformed responses raise DeserializationError."""
    with patch("requests.get", return_value=make_response(body)):
        with pytest.raises(DeserializationError):
            CityLookupClient(config).search_cities("x")


@pytest.mark.parametrize(
    "error",
    [
        requests.ConnectionError("connection refused"),
        requests.Timeout("timed out"),
        requests.exceptions.SSLError("bad certificate"),
    ],
)
def test_search_cities_network_error(config, error):
    """Test that transport failures raise NetworkError."""
    with patch("requests.get", side_effect=error):
        with pytest.raises(NetworkError) as exc_info:
            CityLookupClient(config).search_cities("x")
    assert exc_info.value.__cause__ is error


def test_search_cities_uses_configured_service(sample_cities_data):
    config = MeteogramConfig.model_validate(
        {"service": {"base_url": "http://localhost:8000/", "timeout": 5, "user_agent": "ua"}}
    )
    with patch("requests.get", return_value=make_response("[]")) as mock_get:
        search_cities("recife", config)

    args, kwargs = mock_get.call_args
    assert args[0] == "http://localhost:8000/autocomplete"
    assert kwargs["timeout"] == 5
    assert kwargs["headers"] == {"User-Agent": "ua"}


def test_select_city_valid(sample_cities):
    assert select_city(sample_cities, "0") is sample_cities[0]
    assert select_city(sample_cities, " 1\n") is sample_cities[1]


def test_select_city_empty_list():
    """Test that an empty candidate list is rejected before parsing the token."""
    with pytest.raises(NoResultsError):
        select_city([], "0")


@pytest.mark.parametrize("token", ["2", "10", "-1", "abc", "", "1.0", "1_0", "١"])
def test_select_city_invalid(sample_cities, token):
    """Test out-of-range, negative and non-numeric selections."""
    with pytest.raises(InvalidSelectionError):
        select_city(sample_cities, token)


def test_select_city_huge_index(sample_cities):
    """Test that an index too long for int() is still a selection error."""
    with pytest.raises(InvalidSelectionError):
        select_city(sample_cities, "9" * 5000)


def test_search_cities_decodes_utf8_body(config):
    """Test that a UTF-8 body without charset keeps its non-ASCII characters."""
    body = '[{"id": "1", "label": "Goiânia", "value": "Goiânia", "custom": "cidade/1"}]'
    response = make_response(
        text=body.encode("utf-8").decode("iso-8859-1"),
        content=body.encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )
    with patch("requests.get", return_value=response):
        cities = CityLookupClient(config).search_cities("goiania")

    assert cities[0].label == "Goiânia"

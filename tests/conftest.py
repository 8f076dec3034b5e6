"""Test fixtures for the meteograma package."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

from meteograma.schemas import CityRecord, MeteogramConfig

FIXTURES = Path(__file__).parent / "fixtures"


def make_response(text="", content=None, status_code=200, headers=None):
    """Build a stand-in for requests.Response."""
    if content is None:
        content = text.encode("utf-8")
    return Mock(
        text=text,
        content=content,
        status_code=status_code,
        headers=headers or {},
        apparent_encoding="utf-8",
    )


class RecordingOpener:
    """Opener that remembers what it was asked to open."""

    def __init__(self, error=None):
        self.opened = []
        self.error = error

    def open(self, path):
        if self.error is not None:
            raise self.error
        self.opened.append(path)


@pytest.fixture
def sample_cities_data():
    """Sample autocomplete API response data."""
    return [
        {
            "id": "244",
            "label": "S%C3%A3o+Paulo%2FSP",
            "value": "S%C3%A3o+Paulo%2FSP",
            "custom": "cidade/244/saopaulo-sp",
        },
        {
            "id": "5515",
            "label": "S%C3%A3o+Paulo+de+Oliven%C3%A7a%2FAM",
            "value": "S%C3%A3o+Paulo+de+Oliven%C3%A7a%2FAM",
            "custom": "cidade/5515/saopaulodeolivenca-am",
        },
    ]


@pytest.fixture
def sample_cities(sample_cities_data):
    return [CityRecord.model_validate(item) for item in sample_cities_data]


@pytest.fixture
def city():
    return CityRecord(id="123", label="Cidade+Teste", value="Cidade+Teste", custom="cidade/123")


@pytest.fixture
def config():
    return MeteogramConfig()


@pytest.fixture
def sample_config_data(tmp_path):
    """Sample configuration data."""
    return {
        "service": {
            "base_url": "https://tempo.example.br/",
            "autocomplete_path": "autocomplete",
            "timeout": 15,
            "user_agent": "meteograma-tests",
        },
        "output": {"temp_dir": str(tmp_path / "scratch"), "temp_filename": "chart.png"},
    }


@pytest.fixture
def config_file(tmp_path, sample_config_data):
    """Creates a temporary config.json file."""
    config_path = tmp_path / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(sample_config_data, f, indent=2)
    return config_path


@pytest.fixture
def forecast_html():
    """Saved CPTEC forecast page with a meteogram."""
    return (FIXTURES / "forecast_page.html").read_text(encoding="utf-8")


@pytest.fixture
def forecast_html_without_meteogram():
    return (FIXTURES / "forecast_page_no_meteogram.html").read_text(encoding="utf-8")


@pytest.fixture
def recording_opener():
    return RecordingOpener()

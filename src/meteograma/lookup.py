"""City lookup against the autocomplete endpoint, and candidate selection."""

import logging
import re
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from .errors import DeserializationError, InvalidSelectionError, NoResultsError
from .http import http_get
from .schemas import CityRecord, MeteogramConfig, format_city_label

logger = logging.getLogger(__name__)

_CITY_LIST = TypeAdapter(List[CityRecord])
_INDEX_TOKEN = re.compile(r"\d+", re.ASCII)


class CityLookupClient:
    """Client for the service's city autocomplete endpoint."""

    def __init__(self, config: Optional[MeteogramConfig] = None):
        self.config = config or MeteogramConfig()

    def search_cities(self, query: str) -> List[CityRecord]:
        """
        Look up cities matching a free-text query.

        Returns:
            Candidates in the order the service returned them. May be empty.

        Raises:
            NetworkError: If the request fails.
            DeserializationError: If the body is not a JSON array of city objects.
        """
        service = self.config.service
        logger.info(f"Searching cities matching {query!r}")
        response = http_get(service.autocomplete_url, service, params={"term": query})

        try:
            cities = _CITY_LIST.validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(f"Unexpected autocomplete response: {e}") from e

        logger.debug(f"Lookup returned {len(cities)} candidates")
        return cities


def search_cities(query: str, config: Optional[MeteogramConfig] = None) -> List[CityRecord]:
    """Shortcut for ``CityLookupClient(config).search_cities(query)``."""
    return CityLookupClient(config).search_cities(query)


def select_city(cities: Sequence[CityRecord], token: str) -> CityRecord:
    """
    Pick a candidate by the zero-based index typed by the user.

    Raises:
        NoResultsError: If there is nothing to choose from.
        InvalidSelectionError: If the token is not a non-negative integer within range.
    """
    if not cities:
        raise NoResultsError("No cities matched the query")

    token = token.strip()
    if not _INDEX_TOKEN.fullmatch(token):
        raise InvalidSelectionError(f"Not a valid index: {token!r}")

    try:
        index = int(token)
    except ValueError as e:
        # More digits than int() will convert
        raise InvalidSelectionError(f"Index out of range (0-{len(cities) - 1})") from e
    if index >= len(cities):
        raise InvalidSelectionError(f"Index {index} out of range (0-{len(cities) - 1})")

    city = cities[index]
    logger.debug(f"Selected {format_city_label(city)} ({city.custom})")
    return city


__all__ = [
    "CityLookupClient",
    "search_cities",
    "select_city",
    "format_city_label",
]

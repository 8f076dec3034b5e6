"""Forecast page and meteogram retrieval."""

import logging
from typing import Optional
from urllib.parse import urljoin

from .errors import MeteogramNotFoundError
from .http import http_get, response_text
from .schemas import CityRecord, MeteogramConfig
from .scrape import locate_meteogram_url

logger = logging.getLogger(__name__)


class ForecastPageFetcher:
    """Downloads a city's forecast page."""

    def __init__(self, config: Optional[MeteogramConfig] = None):
        self.config = config or MeteogramConfig()

    def forecast_url(self, city: CityRecord) -> str:
        """Build the forecast page URL; ``city.custom`` is appended as-is."""
        return f"{self.config.service.base_url}/{city.custom}"

    def fetch_forecast_page(self, city: CityRecord) -> str:
        """
        Fetch the forecast page HTML.

        Raises:
            NetworkError: If the request fails.
        """
        url = self.forecast_url(city)
        logger.info(f"Fetching forecast page {url}")
        return response_text(http_get(url, self.config.service))


class AssetFetcher:
    """Downloads arbitrary binary assets."""

    def __init__(self, config: Optional[MeteogramConfig] = None):
        self.config = config or MeteogramConfig()

    def fetch_asset(self, url: str) -> bytes:
        """
        Fetch the raw bytes at ``url``. Content type and size are not checked.

        Raises:
            NetworkError: If the request fails.
        """
        logger.info(f"Downloading {url}")
        data = http_get(url, self.config.service).content
        logger.debug(f"Downloaded {len(data)} bytes")
        return data


class MeteogramPipeline:
    """Forecast page -> meteogram URL -> image bytes."""

    def __init__(self, config: Optional[MeteogramConfig] = None):
        self.config = config or MeteogramConfig()
        self.pages = ForecastPageFetcher(self.config)
        self.assets = AssetFetcher(self.config)

    def fetch_meteogram(self, city: CityRecord) -> bytes:
        """
        Download the meteogram image for a city.

        A relative image URL is resolved against the forecast page URL.

        Raises:
            NetworkError: If either request fails.
            MeteogramNotFoundError: If the page has no meteogram image.
        """
        page = self.pages.fetch_forecast_page(city)

        src = locate_meteogram_url(page)
        if src is None:
            raise MeteogramNotFoundError(
                f"Could not find meteogram URL in {self.pages.forecast_url(city)}"
            )

        url = urljoin(self.pages.forecast_url(city), src)
        if url != src:
            logger.debug(f"Resolved meteogram URL {src!r} to {url}")
        return self.assets.fetch_asset(url)


def fetch_meteogram(city: CityRecord, config: Optional[MeteogramConfig] = None) -> bytes:
    """Shortcut for ``MeteogramPipeline(config).fetch_meteogram(city)``."""
    return MeteogramPipeline(config).fetch_meteogram(city)

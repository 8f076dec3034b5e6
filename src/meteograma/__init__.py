"""Fetch CPTEC/INPE meteograms for Brazilian cities."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("meteograma")
except PackageNotFoundError:
    # Not installed, running from a source checkout
    __version__ = "0.0.0"

from .cli import main
from .config import load_config
from .errors import (
    DeserializationError,
    InvalidSelectionError,
    LaunchError,
    MeteogramError,
    MeteogramNotFoundError,
    NetworkError,
    NoResultsError,
    OutputIOError,
)
from .forecast import AssetFetcher, ForecastPageFetcher, MeteogramPipeline, fetch_meteogram
from .lookup import CityLookupClient, format_city_label, search_cities, select_city
from .schemas import CityRecord, MeteogramConfig
from .scrape import locate_meteogram_url
from .sink import Opener, OutputSink, SystemOpener

__all__ = [
    "main",
    "load_config",
    "CityRecord",
    "MeteogramConfig",
    "CityLookupClient",
    "search_cities",
    "select_city",
    "format_city_label",
    "ForecastPageFetcher",
    "AssetFetcher",
    "MeteogramPipeline",
    "fetch_meteogram",
    "locate_meteogram_url",
    "Opener",
    "OutputSink",
    "SystemOpener",
    "MeteogramError",
    "NetworkError",
    "DeserializationError",
    "NoResultsError",
    "InvalidSelectionError",
    "MeteogramNotFoundError",
    "OutputIOError",
    "LaunchError",
    "__version__",
]

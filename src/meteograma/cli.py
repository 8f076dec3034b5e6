"""Command-line interface for the meteogram fetcher."""

import argparse
import logging
import sys
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from . import __version__
from .config import load_config
from .errors import InvalidSelectionError, MeteogramError, NoResultsError
from .forecast import MeteogramPipeline
from .logging import configure_logging
from .lookup import CityLookupClient, select_city
from .schemas import CityRecord, MeteogramConfig, format_city_label
from .sink import OutputSink, SystemOpener

logger = logging.getLogger(__name__)

PROMPT = "Digite o número da cidade desejada: "


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Download the CPTEC/INPE meteogram for a city and save or open it."
    )
    parser.add_argument("query", help="City name, or part of it, to search for")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Save the meteogram to this file instead of opening it",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.json (default: ./config.json if present, else built-in defaults)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument("--version", action="version", version=f"meteograma {__version__}")
    return parser.parse_args(argv)


def prompt_for_city(
    cities: Sequence[CityRecord], input_fn: Optional[Callable[[str], str]] = None
) -> CityRecord:
    """List the candidates on stdout and read the chosen index from the user."""
    if not cities:
        raise NoResultsError("No cities matched the query")
    input_fn = input_fn or input

    for i, city in enumerate(cities):
        print(f"[{i:2}] {format_city_label(city)}")
    print()

    try:
        token = input_fn(PROMPT)
    except EOFError as e:
        raise InvalidSelectionError("No selection entered") from e
    return select_city(cities, token)


def build_sink(config: MeteogramConfig) -> OutputSink:
    temp_dir = config.output.temp_dir or Path(tempfile.gettempdir())
    return OutputSink(temp_dir, SystemOpener(), temp_filename=config.output.temp_filename)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)

    try:
        # dictConfig raises ValueError when the log file cannot be opened
        configure_logging(args.verbose, args.log_file)
        config = load_config(args.config)

        cities = CityLookupClient(config).search_cities(args.query)
        city = prompt_for_city(cities)

        meteogram = MeteogramPipeline(config).fetch_meteogram(city)
        path = build_sink(config).deliver(meteogram, args.output)
        logger.info(f"Meteogram for {format_city_label(city)}: {path}")
        return 0

    except (MeteogramError, ValueError, FileNotFoundError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        if args.verbose:
            logger.exception("Detailed error:")
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

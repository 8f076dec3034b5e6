"""Configuration management for the meteogram fetcher."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .schemas import MeteogramConfig

logger = logging.getLogger(__name__)


def find_config_file() -> Optional[Path]:
    """
    Search for config.json in the current directory.

    Returns:
        Path to config.json if found, None otherwise.
    """
    path = Path.cwd() / "config.json"
    if path.exists():
        return path
    return None


def load_config(config_path: Optional[Union[Path, str]] = None) -> MeteogramConfig:
    """
    Load and validate configuration from a JSON file.

    Args:
        config_path: Path to config.json. If None, looks in the current directory
            and falls back to built-in defaults when nothing is found.

    Returns:
        MeteogramConfig object with validated configuration.

    Raises:
        FileNotFoundError: If an explicit config file cannot be found.
        ValueError: If config file contains invalid data.
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            logger.debug("No config.json found, using defaults")
            return MeteogramConfig()
    else:
        config_path = Path(config_path)

    logger.debug(f"Loading config from {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                msg = f"Invalid JSON in config file: {e}"
                logger.error(msg)
                raise ValueError(msg) from e
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        raise

    try:
        config = MeteogramConfig.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        logger.debug(f"Validation errors: {errors}")
        msg = errors[0]["msg"]
        logger.error(
            f"Invalid configuration at {' -> '.join(str(x) for x in errors[0]['loc'])}: {msg}"
        )
        raise ValueError(msg) from e

    logger.debug(f"Using service at {config.service.base_url}")
    return config

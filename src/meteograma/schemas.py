"""Data schemas and validation for lookup results and configuration."""

import re
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, field_validator

from . import __version__

_UNSAFE_PATH_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def format_city_label(city: "CityRecord") -> str:
    """Decode a city label for display.

    The label is percent-decoded first (invalid UTF-8 becomes U+FFFD) and only
    then are literal "+" characters replaced by spaces.
    """
    return unquote(city.label, encoding="utf-8", errors="replace").replace("+", " ")


class CityRecord(BaseModel):
    """One candidate returned by the autocomplete endpoint."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "244",
                "label": "S%C3%A3o+Paulo%2FSP",
                "value": "S%C3%A3o+Paulo%2FSP",
                "custom": "cidade/244/saopaulo-sp",
            }
        },
    )

    id: str
    label: str  # percent-encoded, "+" for spaces
    value: str
    custom: str = Field(min_length=1, description="Forecast page path, appended verbatim")

    @field_validator("custom")
    @classmethod
    def validate_custom(cls, v: str) -> str:
        """Reject path segments that cannot go into a URL unencoded."""
        if _UNSAFE_PATH_CHARS.search(v):
            raise ValueError("custom must not contain whitespace or control characters")
        return v

    def __str__(self) -> str:
        return format_city_label(self)


class ServiceConfig(BaseModel):
    """Remote weather service settings."""

    base_url: str = Field(default="https://tempo.cptec.inpe.br", pattern="^https?://")
    autocomplete_path: str = Field(default="autocomplete", min_length=1)
    timeout: Optional[PositiveFloat] = None  # seconds; None leaves requests' default
    user_agent: str = Field(default=f"meteograma/{__version__}", min_length=1)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def autocomplete_url(self) -> str:
        return f"{self.base_url}/{self.autocomplete_path.lstrip('/')}"


class OutputConfig(BaseModel):
    """Where the scratch copy of the meteogram is written before opening it."""

    temp_dir: Optional[Path] = None
    temp_filename: str = Field(default="meteo.png", pattern=r"^[^/\\]+$")


class MeteogramConfig(BaseModel):
    """Complete application configuration."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "service": {
                    "base_url": "https://tempo.cptec.inpe.br",
                    "autocomplete_path": "autocomplete",
                    "timeout": 30,
                },
                "output": {"temp_dir": "/tmp", "temp_filename": "meteo.png"},
            }
        }
    )

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from weatherscreen.location.models import LocationAccuracy

DEFAULT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_ICON_BASE_URL = "https://openweathermap.org/img/wn"
DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org/reverse"
DEFAULT_IP_LOOKUP_URL = "http://ipapi.co/json/"


class LocationProviderType(Enum):
    IP = "ip"
    STATIC = "static"


class WeatherConfig(BaseModel):
    """Configuration for the weather API"""

    base_url: str = DEFAULT_WEATHER_URL
    icon_base_url: str = DEFAULT_ICON_BASE_URL


class LocationConfig(BaseModel):
    """Configuration for the location service"""

    provider: LocationProviderType = LocationProviderType.IP
    latitude: Optional[float] = Field(None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(None, ge=-180.0, le=180.0)
    accuracy: LocationAccuracy = LocationAccuracy.HIGHEST
    geocoder_url: str = DEFAULT_GEOCODER_URL
    ip_lookup_url: str = DEFAULT_IP_LOOKUP_URL
    user_agent: str = "weatherscreen/0.1"

    @field_validator("provider", "accuracy", mode="before")
    @classmethod
    def _coerce_lowercase(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def _require_static_coordinates(self) -> LocationConfig:
        if self.provider is LocationProviderType.STATIC and (
            self.latitude is None or self.longitude is None
        ):
            raise ValueError("static location provider needs latitude and longitude")
        return self


class ScreenConfig(BaseModel):
    """Main application configuration"""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)


def load_config(path: str | Path) -> ScreenConfig:
    """
    Load and validate hierarchical YAML config.

    Raises:
        FileNotFoundError: if the file does not exist
        RuntimeError: for YAML syntax errors or validation errors
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise RuntimeError(f"Invalid YAML in {p}: {e}") from e

    try:
        return ScreenConfig.model_validate(raw)
    except ValidationError as e:
        raise RuntimeError(f"Invalid config values in {p}:\n{e}") from e

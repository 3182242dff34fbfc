from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# API Response Models (OpenWeatherMap current weather mappings)
# =============================================================================


class OpenWeatherCondition(BaseModel):
    """Single entry of the `weather` array."""

    description: Optional[str] = None
    icon: Optional[str] = None


class OpenWeatherMain(BaseModel):
    temp: Optional[float] = None


class OpenWeatherApiResponse(BaseModel):
    """Current weather payload. Only the fields the screen shows are mapped."""

    weather: list[OpenWeatherCondition] = []
    main: OpenWeatherMain = Field(default_factory=OpenWeatherMain)
    name: Optional[str] = None


# =============================================================================
# Domain Models
# =============================================================================


class WeatherReport(BaseModel):
    """Immutable snapshot of one successful fetch."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    temperature_celsius: Optional[float] = None
    icon_code: str = ""
    fallback_name: str = ""


class WeatherApiError(RuntimeError):
    """Non-2xx answer from the weather API."""

    def __init__(self, status: int, message: str | None = None):
        super().__init__(message or f"Error while fetching weather data: {status}")
        self.status = status

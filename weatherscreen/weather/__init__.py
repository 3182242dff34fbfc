"""Weather module for fetching and formatting current weather."""

from .client import WeatherAPIClient
from .formatting import (
    build_icon_url,
    capitalize_first,
    format_temperature,
    transform_api_response,
)
from .views import (
    OpenWeatherApiResponse,
    WeatherApiError,
    WeatherReport,
)

__all__ = [
    "OpenWeatherApiResponse",
    "WeatherAPIClient",
    "WeatherApiError",
    "WeatherReport",
    "build_icon_url",
    "capitalize_first",
    "format_temperature",
    "transform_api_response",
]

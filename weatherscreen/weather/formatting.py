from typing import Optional

from weatherscreen.config.loader import DEFAULT_ICON_BASE_URL
from weatherscreen.weather.views import OpenWeatherApiResponse, WeatherReport


def transform_api_response(api_response: OpenWeatherApiResponse) -> WeatherReport:
    """Transform API response to the domain report."""
    condition = api_response.weather[0] if api_response.weather else None

    return WeatherReport(
        description=(condition.description if condition else None) or "",
        temperature_celsius=api_response.main.temp,
        icon_code=(condition.icon if condition else None) or "",
        fallback_name=api_response.name or "",
    )


def build_icon_url(icon_code: str, base_url: str = DEFAULT_ICON_BASE_URL) -> str:
    if not icon_code:
        return ""
    return f"{base_url.rstrip('/')}/{icon_code}@4x.png"


def capitalize_first(text: str) -> str:
    """Upper-case only the first character; 'clear sky' -> 'Clear sky'."""
    return text[:1].upper() + text[1:]


def format_temperature(value: Optional[float]) -> str:
    """Render a number the way the screen always has: 18 rather than 18.0."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))

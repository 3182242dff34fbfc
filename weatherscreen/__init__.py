from weatherscreen.config import ScreenConfig, WeatherEnv, load_config
from weatherscreen.events import EventBus, ScreenEvent
from weatherscreen.location import (
    Coordinates,
    IpLocationProvider,
    LocationName,
    LocationProvider,
    PermissionStatus,
    StaticLocationProvider,
)
from weatherscreen.screen import (
    ScreenAlert,
    ScreenState,
    WeatherScreenController,
    render_screen,
)
from weatherscreen.weather import WeatherAPIClient, WeatherApiError, WeatherReport

__all__ = [
    "Coordinates",
    "EventBus",
    "IpLocationProvider",
    "LocationName",
    "LocationProvider",
    "PermissionStatus",
    "ScreenAlert",
    "ScreenConfig",
    "ScreenEvent",
    "ScreenState",
    "StaticLocationProvider",
    "WeatherAPIClient",
    "WeatherApiError",
    "WeatherEnv",
    "WeatherReport",
    "WeatherScreenController",
    "load_config",
    "render_screen",
]

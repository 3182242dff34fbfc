from .env import WeatherEnv
from .loader import (
    LocationConfig,
    LocationProviderType,
    ScreenConfig,
    WeatherConfig,
    load_config,
)

__all__ = [
    "LocationConfig",
    "LocationProviderType",
    "ScreenConfig",
    "WeatherConfig",
    "WeatherEnv",
    "load_config",
]

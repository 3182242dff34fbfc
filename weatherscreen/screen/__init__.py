from .alerts import ScreenAlert
from .controller import WeatherScreenController
from .render import LoadingView, ScreenView, WeatherDetailView, render_screen
from .service_factory import ServiceBundle, ServiceFactory
from .state import ScreenState

__all__ = [
    "LoadingView",
    "ScreenAlert",
    "ScreenState",
    "ScreenView",
    "ServiceBundle",
    "ServiceFactory",
    "WeatherDetailView",
    "WeatherScreenController",
    "render_screen",
]

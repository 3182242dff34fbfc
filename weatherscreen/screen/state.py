from typing import Optional

from pydantic import BaseModel

from weatherscreen.location.models import LocationName
from weatherscreen.weather.views import WeatherReport


class ScreenState(BaseModel):
    """Mutable state bag owned by the controller."""

    report: Optional[WeatherReport] = None
    location_name: Optional[LocationName] = None
    is_refreshing: bool = False
    is_searching: bool = False
    search_text: str = ""

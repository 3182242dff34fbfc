from typing import Literal, Union

from pydantic import BaseModel

from weatherscreen.config.loader import DEFAULT_ICON_BASE_URL
from weatherscreen.screen.state import ScreenState
from weatherscreen.weather.formatting import (
    build_icon_url,
    capitalize_first,
    format_temperature,
)

TITLE = "Current Weather"
SEARCHING_TEXT = "Searching..."


class LoadingView(BaseModel):
    kind: Literal["loading"] = "loading"


class WeatherDetailView(BaseModel):
    kind: Literal["detail"] = "detail"

    title: str = TITLE
    description: str
    temperature_text: str
    location_text: str
    icon_url: str
    search_text: str = ""
    status_text: str = ""
    is_refreshing: bool = False
    is_searching: bool = False


ScreenView = Union[LoadingView, WeatherDetailView]


def render_screen(
    state: ScreenState, icon_base_url: str = DEFAULT_ICON_BASE_URL
) -> ScreenView:
    """
    Map the state bag to what the screen shows.

    The loading view is shown exactly while there is no report and no search is
    running. The detail view never refuses to render: missing report fields
    become empty text.
    """
    if state.report is None and not state.is_searching:
        return LoadingView()

    report = state.report

    if state.location_name is not None:
        location_text = (
            f"Location: {state.location_name.city}, {state.location_name.region}"
        )
    else:
        location_text = f"Location: {report.fallback_name if report else ''}"

    return WeatherDetailView(
        description=capitalize_first(report.description) if report else "",
        temperature_text=(
            f"Temperature: "
            f"{format_temperature(report.temperature_celsius if report else None)}°C"
        ),
        location_text=location_text,
        icon_url=build_icon_url(report.icon_code, icon_base_url) if report else "",
        search_text=state.search_text,
        status_text=SEARCHING_TEXT if state.is_searching else "",
        is_refreshing=state.is_refreshing,
        is_searching=state.is_searching,
    )

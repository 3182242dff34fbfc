"""
Controller for the current-weather screen
"""

import asyncio
from itertools import count
from typing import Optional

import aiohttp

from weatherscreen.events import EventBus, ScreenEvent
from weatherscreen.location import (
    Coordinates,
    LocationAccuracy,
    LocationError,
    LocationName,
    LocationProvider,
    PermissionStatus,
)
from weatherscreen.screen.alerts import ScreenAlert
from weatherscreen.screen.state import ScreenState
from weatherscreen.shared.logging_mixin import LoggingMixin
from weatherscreen.weather import WeatherAPIClient, WeatherApiError

_REPORT = "report"
_LOCATION_NAME = "location_name"

_FETCH_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


class WeatherScreenController(LoggingMixin):
    """Mediates between user actions, the location service and the weather API.

    Every request takes a token from a shared counter. A result is applied to
    its state slice only if no newer request has already written that slice,
    so a late answer to a superseded request is dropped, while a newer request
    that fails never blocks an older one that succeeds.

    A place name belongs to the coordinate flow that looked it up. While the
    report on screen came from a search, a flow's place name is held back
    until that flow's own forecast lands, and dropped if it never does.
    """

    def __init__(
        self,
        location_provider: LocationProvider,
        weather_client: WeatherAPIClient,
        event_bus: Optional[EventBus] = None,
        accuracy: LocationAccuracy = LocationAccuracy.HIGHEST,
    ):
        self.state = ScreenState()
        self.event_bus = event_bus or EventBus()

        self._location_provider = location_provider
        self._weather_client = weather_client
        self._accuracy = accuracy

        self._token_counter = count(1)
        self._applied_tokens: dict[str, int] = {_REPORT: 0, _LOCATION_NAME: 0}
        self._report_from_search = False
        self._held_names: dict[int, LocationName] = {}
        self._refreshes_in_flight = 0
        self._searches_in_flight = 0
        self._initialized = False

    async def initialize(self) -> None:
        """Load weather for the current location once, at mount."""
        if self._initialized:
            self.logger.warning("Screen is already initialized")
            return

        self._initialized = True
        self.logger.info("Initializing weather screen")
        await self._load_current_location_weather()

    async def refresh(self) -> None:
        self._refreshes_in_flight += 1
        self.state.is_refreshing = True
        await self._publish_state()

        try:
            await self._load_current_location_weather()
        finally:
            self._refreshes_in_flight -= 1
            self.state.is_refreshing = self._refreshes_in_flight > 0
            await self._publish_state()

    async def set_search_text(self, text: str) -> None:
        self.state.search_text = text
        await self._publish_state()

    async def search(self, query: Optional[str] = None) -> None:
        """Fetch weather by city name; defaults to the current search text."""
        city = (self.state.search_text if query is None else query).strip()
        if not city:
            self.logger.debug("Ignoring empty search")
            return

        token = next(self._token_counter)
        self._searches_in_flight += 1
        self.state.is_searching = True
        await self._publish_state()

        try:
            report = await self._weather_client.fetch_by_city_name(city)
        except WeatherApiError as e:
            self.logger.warning("Search for %r failed: %s", city, e)
            await self._alert(ScreenAlert.CITY_NOT_FOUND)
        except _FETCH_ERRORS as e:
            self.logger.error("Search for %r raised %s: %s", city, type(e).__name__, e)
            await self._alert(ScreenAlert.SEARCH_ERROR)
        else:
            if self._claim(_REPORT, token):
                self.state.report = report
                self.state.location_name = None
                self._report_from_search = True
                # Place names looked up before this result must not come back
                self._applied_tokens[_LOCATION_NAME] = max(
                    self._applied_tokens[_LOCATION_NAME], token
                )
            else:
                self.logger.debug("Discarding stale search result for %r", city)
        finally:
            self._searches_in_flight -= 1
            self.state.is_searching = self._searches_in_flight > 0
            await self._publish_state()

    async def _load_current_location_weather(self) -> None:
        permission = await self._location_provider.request_permission()
        if permission is not PermissionStatus.GRANTED:
            await self._alert(ScreenAlert.PERMISSION_DENIED)
            return

        try:
            coordinates = await self._location_provider.get_current_coordinates(
                self._accuracy
            )
        except LocationError as e:
            self.logger.error("Could not get coordinates: %s", e)
            await self._alert(ScreenAlert.LOCATION_UNAVAILABLE)
            return

        self.logger.info(
            "Current position: %.4f, %.4f", coordinates.latitude, coordinates.longitude
        )

        token = next(self._token_counter)

        # Each branch applies its own result when it lands
        try:
            await asyncio.gather(
                self._load_forecast(coordinates, token),
                self._load_location_name(coordinates, token),
            )
        finally:
            self._held_names.pop(token, None)

    async def _load_forecast(self, coordinates: Coordinates, token: int) -> None:
        try:
            report = await self._weather_client.fetch_by_coordinates(
                coordinates.latitude, coordinates.longitude
            )
        except WeatherApiError as e:
            self.logger.warning("Forecast request failed: %s", e)
            await self._alert(ScreenAlert.FORECAST_FAILED)
            return
        except _FETCH_ERRORS as e:
            self.logger.error("Forecast request raised %s: %s", type(e).__name__, e)
            await self._alert(ScreenAlert.FORECAST_ERROR)
            return

        if not self._claim(_REPORT, token):
            self.logger.debug("Discarding stale forecast")
            return

        self.state.report = report
        self._report_from_search = False

        held = self._held_names.pop(token, None)
        if held is not None and self._applied_tokens[_LOCATION_NAME] == token:
            self.state.location_name = held

        await self._publish_state()

    async def _load_location_name(self, coordinates: Coordinates, token: int) -> None:
        try:
            candidates = await self._location_provider.reverse_geocode(coordinates)
        except LocationError as e:
            self.logger.warning("Reverse geocoding failed: %s", e)
            return

        if not candidates:
            self.logger.debug("Reverse geocoding returned no places")
            return

        if not self._claim(_LOCATION_NAME, token):
            self.logger.debug("Discarding stale place name")
            return

        if self._report_from_search:
            self.logger.debug("Holding place name until its forecast lands")
            self._held_names[token] = candidates[0]
            return

        self.state.location_name = candidates[0]
        await self._publish_state()

    def _claim(self, slice_name: str, token: int) -> bool:
        if token <= self._applied_tokens[slice_name]:
            return False
        self._applied_tokens[slice_name] = token
        return True

    async def _alert(self, alert: ScreenAlert) -> None:
        self.logger.info("Alert: %s", alert)
        await self.event_bus.publish_async(ScreenEvent.ALERT_RAISED, alert.value)

    async def _publish_state(self) -> None:
        await self.event_bus.publish_async(
            ScreenEvent.STATE_CHANGED, self.state.model_copy()
        )

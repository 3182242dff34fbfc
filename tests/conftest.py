"""Pytest configuration and fixtures."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from weatherscreen.events import EventBus, ScreenEvent
from weatherscreen.location import (
    Coordinates,
    LocationName,
    LocationProvider,
    PermissionStatus,
)
from weatherscreen.shared.logging_mixin import LIBRARY_NAME
from weatherscreen.weather import WeatherAPIClient, WeatherReport

LONDON = Coordinates(latitude=51.5074, longitude=-0.1278)


@pytest.fixture(autouse=True)
def restore_library_logger():
    """configure_logging() swaps handlers on a global logger; undo it per test."""
    lib_logger = logging.getLogger(LIBRARY_NAME)
    handlers, level = list(lib_logger.handlers), lib_logger.level
    yield
    lib_logger.handlers[:] = handlers
    lib_logger.setLevel(level)


@pytest.fixture
def london_payload() -> dict[str, Any]:
    return {
        "weather": [{"description": "clear sky", "icon": "01d"}],
        "main": {"temp": 18.3},
        "name": "London",
    }


@pytest.fixture
def london_report() -> WeatherReport:
    return WeatherReport(
        description="clear sky",
        temperature_celsius=18.3,
        icon_code="01d",
        fallback_name="London",
    )


@pytest.fixture
def location_provider() -> AsyncMock:
    """Location service that grants permission and resolves London."""
    provider = AsyncMock(spec=LocationProvider)
    provider.request_permission.return_value = PermissionStatus.GRANTED
    provider.get_current_coordinates.return_value = LONDON
    provider.reverse_geocode.return_value = [
        LocationName(city="London", region="England")
    ]
    return provider


@pytest.fixture
def weather_client(london_report) -> AsyncMock:
    client = AsyncMock(spec=WeatherAPIClient)
    client.fetch_by_coordinates.return_value = london_report
    client.fetch_by_city_name.return_value = london_report
    return client


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def alerts(event_bus) -> list[str]:
    """Collects every alert text published on the bus."""
    raised: list[str] = []

    def _collect(message: str) -> None:
        raised.append(message)

    event_bus.subscribe(ScreenEvent.ALERT_RAISED, _collect)
    return raised


Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@pytest_asyncio.fixture
async def serve():
    """Start an in-process aiohttp app serving `handler` at `path`."""
    servers: list[TestServer] = []

    async def _serve(handler: Handler, path: str = "/") -> TestServer:
        app = web.Application()
        app.router.add_get(path, handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield _serve

    for server in servers:
        await server.close()

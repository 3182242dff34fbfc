from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from weatherscreen.location.models import (
    Coordinates,
    LocationAccuracy,
    LocationError,
    LocationName,
    PermissionStatus,
)
from weatherscreen.shared.logging_mixin import LoggingMixin

PermissionPrompt = Callable[[], Awaitable[bool]]

_CITY_KEYS = ("city", "town", "village", "municipality", "hamlet")
_REGION_KEYS = ("state", "region", "county")

_REQUEST_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


class LocationProvider(ABC, LoggingMixin):
    """Device-style location service: permission, positioning, reverse geocoding"""

    @abstractmethod
    async def request_permission(self) -> PermissionStatus: ...

    @abstractmethod
    async def get_current_coordinates(
        self, accuracy: LocationAccuracy = LocationAccuracy.HIGHEST
    ) -> Coordinates: ...

    @abstractmethod
    async def reverse_geocode(self, coordinates: Coordinates) -> list[LocationName]:
        """Return candidate place names, best match first. May be empty."""
        ...


class NominatimLocationProvider(LocationProvider):
    """Shared permission handling and OpenStreetMap Nominatim reverse geocoding"""

    def __init__(
        self,
        geocoder_url: str,
        user_agent: str,
        permission_prompt: PermissionPrompt | None = None,
        permission_granted: bool = True,
    ):
        self._geocoder_url = geocoder_url
        self._user_agent = user_agent
        self._permission_prompt = permission_prompt
        self._permission_granted = permission_granted

    async def request_permission(self) -> PermissionStatus:
        if self._permission_prompt is not None:
            granted = await self._permission_prompt()
        else:
            granted = self._permission_granted

        status = PermissionStatus.GRANTED if granted else PermissionStatus.DENIED
        self.logger.info("Location permission: %s", status)
        return status

    async def reverse_geocode(self, coordinates: Coordinates) -> list[LocationName]:
        params = {
            "lat": str(coordinates.latitude),
            "lon": str(coordinates.longitude),
            "format": "jsonv2",
        }
        headers = {"User-Agent": self._user_agent}

        try:
            async with aiohttp.ClientSession(headers=headers) as session:
                async with session.get(self._geocoder_url, params=params) as response:
                    if response.status != 200:
                        raise LocationError(
                            f"Reverse geocoding failed with status {response.status}"
                        )
                    data = await response.json()
        except LocationError:
            raise
        except _REQUEST_ERRORS as e:
            raise LocationError(
                f"Reverse geocoding failed: {type(e).__name__} {e}"
            ) from e

        self.logger.debug("Reverse geocoding payload: %s", data)

        if not isinstance(data, dict) or "error" in data:
            return []

        address = data.get("address")
        if not isinstance(address, dict):
            return []

        city = _first_present(address, _CITY_KEYS)
        region = _first_present(address, _REGION_KEYS)
        if not city and not region:
            return []

        return [LocationName(city=city, region=region)]


class IpLocationProvider(NominatimLocationProvider):
    """Positions the device via IP geolocation."""

    def __init__(
        self,
        ip_lookup_url: str,
        geocoder_url: str,
        user_agent: str,
        permission_prompt: PermissionPrompt | None = None,
        permission_granted: bool = True,
    ):
        super().__init__(
            geocoder_url=geocoder_url,
            user_agent=user_agent,
            permission_prompt=permission_prompt,
            permission_granted=permission_granted,
        )
        self._ip_lookup_url = ip_lookup_url

    async def get_current_coordinates(
        self, accuracy: LocationAccuracy = LocationAccuracy.HIGHEST
    ) -> Coordinates:
        # IP geolocation has a single fixed precision
        self.logger.debug("Requested accuracy %s, using IP geolocation", accuracy)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self._ip_lookup_url) as response:
                    if response.status != 200:
                        raise LocationError(
                            f"API request failed with status {response.status}"
                        )

                    data = await response.json()
                    return Coordinates.model_validate(data)

        except LocationError:
            raise
        except Exception as e:
            raise LocationError(f"Location could not be determined: {e}") from e


class StaticLocationProvider(NominatimLocationProvider):
    """Always reports the configured coordinates."""

    def __init__(
        self,
        coordinates: Coordinates,
        geocoder_url: str,
        user_agent: str,
        permission_prompt: PermissionPrompt | None = None,
        permission_granted: bool = True,
    ):
        super().__init__(
            geocoder_url=geocoder_url,
            user_agent=user_agent,
            permission_prompt=permission_prompt,
            permission_granted=permission_granted,
        )
        self._coordinates = coordinates

    async def get_current_coordinates(
        self, accuracy: LocationAccuracy = LocationAccuracy.HIGHEST
    ) -> Coordinates:
        return self._coordinates


def _first_present(address: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        value = address.get(key)
        if value:
            return str(value)
    return ""

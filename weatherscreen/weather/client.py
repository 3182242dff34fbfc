from typing import Any

import aiohttp

from weatherscreen.config.loader import DEFAULT_WEATHER_URL
from weatherscreen.shared.logging_mixin import LoggingMixin
from weatherscreen.weather.formatting import transform_api_response
from weatherscreen.weather.views import (
    OpenWeatherApiResponse,
    WeatherApiError,
    WeatherReport,
)


class WeatherAPIClient(LoggingMixin):
    """OpenWeatherMap current-weather client, always in metric units.

    Raises:
        WeatherApiError: for any non-2xx status, whatever the body says
        aiohttp.ClientError: for transport failures
        ValueError: for bodies that are not JSON or do not match the payload shape
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_WEATHER_URL):
        if not api_key:
            raise ValueError("An OpenWeatherMap API key is required")
        self._api_key = api_key
        self._base_url = base_url

    async def fetch_by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        return await self._fetch({"lat": str(lat), "lon": str(lon)})

    async def fetch_by_city_name(self, name: str) -> WeatherReport:
        return await self._fetch({"q": name})

    async def _fetch(self, query: dict[str, str]) -> WeatherReport:
        params = {**query, "units": "metric", "appid": self._api_key}

        async with aiohttp.ClientSession() as session:
            async with session.get(self._base_url, params=params) as response:
                self.logger.debug("GET %s -> %s", query, response.status)

                if not 200 <= response.status < 300:
                    raise WeatherApiError(response.status)

                raw_data: Any = await response.json(content_type=None)
                self.logger.debug("Weather payload: %s", raw_data)

                api_response = OpenWeatherApiResponse.model_validate(raw_data)
                return transform_api_response(api_response)

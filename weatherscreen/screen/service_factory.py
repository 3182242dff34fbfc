from dataclasses import dataclass
from typing import Optional

from weatherscreen.config import LocationProviderType, ScreenConfig, WeatherEnv
from weatherscreen.events import EventBus
from weatherscreen.location import (
    Coordinates,
    IpLocationProvider,
    LocationProvider,
    PermissionPrompt,
    StaticLocationProvider,
)
from weatherscreen.screen.controller import WeatherScreenController
from weatherscreen.weather import WeatherAPIClient


@dataclass
class ServiceBundle:
    event_bus: EventBus
    location_provider: LocationProvider
    weather_client: WeatherAPIClient
    controller: WeatherScreenController


class ServiceFactory:
    """Factory for wiring the weather screen from env and config."""

    def __init__(
        self,
        env: WeatherEnv,
        config: ScreenConfig,
        permission_prompt: Optional[PermissionPrompt] = None,
    ):
        self.env = env
        self.config = config
        self.permission_prompt = permission_prompt

        self.event_bus = EventBus()

    def create_services(self) -> ServiceBundle:
        location_provider = self._create_location_provider()
        weather_client = self._create_weather_client()

        controller = WeatherScreenController(
            location_provider=location_provider,
            weather_client=weather_client,
            event_bus=self.event_bus,
            accuracy=self.config.location.accuracy,
        )

        return ServiceBundle(
            event_bus=self.event_bus,
            location_provider=location_provider,
            weather_client=weather_client,
            controller=controller,
        )

    def _create_weather_client(self) -> WeatherAPIClient:
        return WeatherAPIClient(
            api_key=self.env.openweather_api_key,
            base_url=self.config.weather.base_url,
        )

    def _create_location_provider(self) -> LocationProvider:
        location = self.config.location

        if location.provider is LocationProviderType.STATIC:
            return StaticLocationProvider(
                coordinates=Coordinates(
                    latitude=location.latitude, longitude=location.longitude
                ),
                geocoder_url=location.geocoder_url,
                user_agent=location.user_agent,
                permission_prompt=self.permission_prompt,
            )

        return IpLocationProvider(
            ip_lookup_url=location.ip_lookup_url,
            geocoder_url=location.geocoder_url,
            user_agent=location.user_agent,
            permission_prompt=self.permission_prompt,
        )

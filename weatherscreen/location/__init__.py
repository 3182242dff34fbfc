"""Location service: permission, positioning and reverse geocoding."""

from .models import (
    Coordinates,
    LocationAccuracy,
    LocationError,
    LocationName,
    PermissionStatus,
)
from .provider import (
    IpLocationProvider,
    LocationProvider,
    NominatimLocationProvider,
    PermissionPrompt,
    StaticLocationProvider,
)

__all__ = [
    "Coordinates",
    "IpLocationProvider",
    "LocationAccuracy",
    "LocationError",
    "LocationName",
    "LocationProvider",
    "NominatimLocationProvider",
    "PermissionPrompt",
    "PermissionStatus",
    "StaticLocationProvider",
]

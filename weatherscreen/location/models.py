from enum import Enum

from pydantic import BaseModel, ConfigDict


class PermissionStatus(Enum):
    GRANTED = "granted"
    DENIED = "denied"

    def __str__(self) -> str:
        return self.value


class LocationAccuracy(Enum):
    """Requested positioning accuracy, lowest to highest"""

    LOWEST = "lowest"
    LOW = "low"
    BALANCED = "balanced"
    HIGH = "high"
    HIGHEST = "highest"

    def __str__(self) -> str:
        return self.value


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class LocationName(BaseModel):
    """Human-readable place resolved from coordinates."""

    model_config = ConfigDict(frozen=True)

    city: str = ""
    region: str = ""


class LocationError(ValueError):
    """Raised when the location service cannot position or reverse geocode."""

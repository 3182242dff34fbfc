from enum import Enum


class ScreenAlert(Enum):
    """User-facing notices. Coordinate and search failures keep separate texts."""

    PERMISSION_DENIED = "Permission to access location was denied"
    LOCATION_UNAVAILABLE = "Unable to determine your current location"
    FORECAST_FAILED = "Something went wrong"
    FORECAST_ERROR = "An error occurred"
    CITY_NOT_FOUND = "City not found"
    SEARCH_ERROR = "An error occurred while searching"

    def __str__(self) -> str:
        return self.value

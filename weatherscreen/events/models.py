from enum import Enum


class ScreenEvent(Enum):
    """Events published by the weather screen controller"""

    STATE_CHANGED = "state_changed"
    ALERT_RAISED = "alert_raised"

    def __str__(self) -> str:
        return self.value

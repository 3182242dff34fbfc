from .bus import EventBus
from .models import ScreenEvent

__all__ = ["EventBus", "ScreenEvent"]

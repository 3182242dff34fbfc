import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from weatherscreen.events.models import ScreenEvent
from weatherscreen.shared.logging_mixin import LoggingMixin


class EventBus(LoggingMixin):
    def __init__(self):
        self._subscribers: dict[ScreenEvent, list[Callable]] = {
            event_type: [] for event_type in ScreenEvent
        }

    def subscribe(self, event_type: ScreenEvent, callback: Callable) -> None:
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: ScreenEvent, callback: Callable) -> None:
        self._subscribers[event_type] = [
            cb for cb in self._subscribers[event_type] if cb != callback
        ]

    async def publish_async(self, event_type: ScreenEvent, data: Any = None) -> None:
        # Subscribers run on the caller's loop, one after another
        for callback in list(self._subscribers[event_type]):
            try:
                result = self._call_with_appropriate_args(callback, event_type, data)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                self.logger.exception(
                    "Subscriber %s failed while handling %s", callback, event_type
                )

    def _call_with_appropriate_args(
        self, callback: Callable, event: ScreenEvent, data: Any
    ) -> Any:
        sig = inspect.signature(callback)
        params = list(sig.parameters.values())
        param_count = len(params)

        if param_count == 0:
            return callback()
        elif param_count == 1:
            return callback(data) if data is not None else callback(event)
        else:
            return callback(event, data)

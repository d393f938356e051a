"""
Dashboard Event Bus

In-process publish/subscribe with typed event payloads. Subscribers are
keyed by event class; handlers may be plain functions or coroutines.
"""

import inspect
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Base class for all dashboard events"""


@dataclass(frozen=True)
class AppReady(Event):
    section: str


@dataclass(frozen=True)
class SectionChanged(Event):
    section: str
    previous: Optional[str] = None


@dataclass(frozen=True)
class SectionLoaded(Event):
    section: str
    data: Any = None


@dataclass(frozen=True)
class SectionLoadFailed(Event):
    section: str
    message: str


@dataclass(frozen=True)
class PlayerChanged(Event):
    player_id: Optional[str]


@dataclass(frozen=True)
class RewardRedeemed(Event):
    reward_id: str
    player_id: str
    result: Any = None


@dataclass(frozen=True)
class EventCompleted(Event):
    event_id: str
    player_id: str
    result: Any = None


E = TypeVar("E", bound=Event)
Handler = Callable[[E], Union[None, Awaitable[None]]]


class EventBus:
    """
    Typed Event Bus

    Delivery order follows subscription order. A handler that raises is
    logged and skipped; the remaining handlers still receive the event.
    """

    def __init__(self):
        self._handlers: dict[type, list[Callable[[Any], Any]]] = defaultdict(list)

    def subscribe(self, event_type: type[E], handler: Handler) -> Callable[[], None]:
        """
        Register a handler for an event class (and its subclasses)

        Returns:
            Callable[[], None]: Call it to unsubscribe
        """
        self._handlers[event_type].append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def unsubscribe(self, event_type: type[E], handler: Handler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def _handlers_for(self, event: Event) -> list[Callable[[Any], Any]]:
        matched: list[Callable[[Any], Any]] = []
        for event_type in type(event).__mro__:
            matched.extend(self._handlers.get(event_type, ()))
        return matched

    async def publish(self, event: Event) -> None:
        for handler in self._handlers_for(event):
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Event handler %r failed for %s", handler, type(event).__name__)

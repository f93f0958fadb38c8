"""
Event Bus - Event-driven communication system.

This module provides a lightweight, synchronous event bus for domain events.
Command handlers publish an event after each successful catalog change;
subscribers react without the handlers knowing about them.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from uuid import uuid4
import weakref

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='DomainEvent')


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class DomainEvent:
    """Base class for all domain events."""
    event_id: str = field(default_factory=lambda: f"evt_{uuid4().hex}")
    timestamp: datetime = field(default_factory=_utcnow)
    aggregate_id: Optional[str] = None
    aggregate_type: Optional[str] = None
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.aggregate_type and self.aggregate_id:
            self.aggregate_type = self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_type": self.__class__.__name__,
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "version": self.version,
            "metadata": self.metadata,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Get event-specific data for serialization."""
        return {}


class EventBus:
    """
    Central event bus for publishing and subscribing to domain events.

    Handlers subscribed to a parent event type also receive its subclasses.
    Handlers are held by weak reference, so a bound method stops receiving
    events once its instance is garbage collected.
    """

    def __init__(self, max_events_in_memory: int = 1000):
        self._handlers: Dict[Type[DomainEvent], List[weakref.ref]] = {}
        self._event_store: List[DomainEvent] = []
        self._max_events_in_memory = max_events_in_memory

    def subscribe(
        self,
        event_type: Type[T],
        handler: Callable[[T], Any]
    ) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The event class to subscribe to
            handler: The handler function/method
        """
        if hasattr(handler, '__self__'):
            ref = weakref.WeakMethod(handler)
        else:
            ref = weakref.ref(handler)

        self._handlers.setdefault(event_type, []).append(ref)

    def unsubscribe(
        self,
        event_type: Type[DomainEvent],
        handler: Callable
    ) -> None:
        if event_type in self._handlers:
            self._handlers[event_type] = [
                ref for ref in self._handlers[event_type]
                if ref() is not None and ref() != handler
            ]

    def publish(self, event: DomainEvent) -> None:
        """
        Record the event and deliver it to every matching handler.

        A handler that raises is logged and skipped; delivery continues.
        """
        self._event_store.append(event)
        if len(self._event_store) > self._max_events_in_memory:
            self._event_store.pop(0)

        for handler in self._handlers_for(type(event)):
            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler %r for %s", handler, type(event).__name__)

    def get_events(
        self,
        aggregate_id: Optional[str] = None,
        aggregate_type: Optional[str] = None,
        since: Optional[datetime] = None,
        event_type: Optional[Type[DomainEvent]] = None
    ) -> List[DomainEvent]:
        """
        Get recorded events with optional filtering.
        """
        filtered_events = list(self._event_store)

        if aggregate_id:
            filtered_events = [e for e in filtered_events if e.aggregate_id == aggregate_id]

        if aggregate_type:
            filtered_events = [e for e in filtered_events if e.aggregate_type == aggregate_type]

        if since:
            filtered_events = [e for e in filtered_events if e.timestamp >= since]

        if event_type:
            filtered_events = [e for e in filtered_events if isinstance(e, event_type)]

        return filtered_events

    def clear(self) -> None:
        """Clear all handlers and events."""
        self._handlers.clear()
        self._event_store.clear()

    def _handlers_for(self, event_type: Type[DomainEvent]) -> List[Callable]:
        handlers = []
        for cls in event_type.__mro__:
            if cls in self._handlers:
                handlers.extend(ref() for ref in self._handlers[cls] if ref() is not None)
        return handlers

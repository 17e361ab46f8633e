"""
In-process dispatcher for domain events.

Events are delivered after the unit of work flushes changes. Delivery is
sequential and ordered; a failing subscriber fails the save that
dispatched the event.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Type

from ...domain.shared.domain_event import DomainEvent

logger = logging.getLogger("catalog-api.infrastructure.events.dispatcher")


EventSubscriber = Callable[[DomainEvent], Awaitable[None]]


class EventHandler:
    """Wrapper for event subscriber with metadata."""

    def __init__(
        self,
        handler: EventSubscriber,
        event_type: Optional[Type[DomainEvent]] = None,
        priority: int = 0
    ):
        self.handler = handler
        self.event_type = event_type
        self.priority = priority

    def matches(self, event: DomainEvent) -> bool:
        return self.event_type is None or isinstance(event, self.event_type)

    def __repr__(self):
        name = getattr(self.handler, "__name__", repr(self.handler))
        return f"EventHandler(handler={name}, priority={self.priority})"


class DispatcherStats:
    """Statistics for dispatcher operations."""

    def __init__(self):
        self.total_dispatched: int = 0
        self.successful_handlers: int = 0
        self.failed_handlers: int = 0


class DomainEventDispatcher:
    """
    Dispatcher of domain events to in-process subscribers.

    Features:
    - Subscribe to an event class (subclasses included) or to all events
    - Handler priorities (higher runs first)
    - Sequential delivery in the order events are dispatched
    - Subscriber errors propagate to the caller

    Usage:
        >>> dispatcher = DomainEventDispatcher()
        >>> dispatcher.subscribe(ProductCreated, handler=on_product_created)
        >>>
        >>> @dispatcher.subscribe(ProductStockUpdated)
        ... async def on_stock(event):
        ...     ...
    """

    def __init__(self):
        self._handlers: List[EventHandler] = []
        self._stats = DispatcherStats()

    def subscribe(
        self,
        event_type: Optional[Type[DomainEvent]] = None,
        handler: Optional[EventSubscriber] = None,
        priority: int = 0
    ):
        """
        Subscribe to events.

        Args:
            event_type: Event class to subscribe to (None for all events)
            handler: Async function to handle events
            priority: Handler priority (higher = executed first)

        Returns:
            Unsubscribe function or decorator
        """
        if handler is None:
            # Decorator mode
            def decorator(func: EventSubscriber):
                self._add_handler(event_type, func, priority)
                return func
            return decorator

        self._add_handler(event_type, handler, priority)

        def unsubscribe():
            self.unsubscribe(handler)
        return unsubscribe

    def _add_handler(
        self,
        event_type: Optional[Type[DomainEvent]],
        handler: EventSubscriber,
        priority: int
    ) -> None:
        self._handlers.append(EventHandler(handler, event_type, priority))
        # Stable sort keeps subscription order among equal priorities
        self._handlers.sort(key=lambda h: h.priority, reverse=True)

        logger.debug(
            f"Subscribed {getattr(handler, '__name__', handler)} to "
            f"{event_type.__name__ if event_type else 'all events'}"
        )

    def unsubscribe(self, handler: EventSubscriber) -> None:
        """Remove a subscriber from every event type."""
        self._handlers = [h for h in self._handlers if h.handler != handler]

    def clear(self) -> None:
        """Remove all subscribers."""
        self._handlers = []

    async def dispatch(self, event: DomainEvent) -> None:
        """
        Deliver one event to every matching subscriber.

        Args:
            event: Event to deliver

        Raises:
            Exception: Whatever a subscriber raises
        """
        self._stats.total_dispatched += 1
        handlers = [h for h in self._handlers if h.matches(event)]

        if not handlers:
            logger.debug(f"No handlers for event {event.event_type}")
            return

        for handler in handlers:
            try:
                await handler.handler(event)
            except Exception as e:
                self._stats.failed_handlers += 1
                logger.error(
                    f"Error in event handler {handler!r} "
                    f"for event {event.event_type}: {e}",
                    exc_info=True
                )
                raise
            self._stats.successful_handlers += 1

    async def dispatch_all(self, events: List[DomainEvent]) -> int:
        """
        Deliver events one after another in the given order.

        Returns:
            Number of dispatched events
        """
        for event in events:
            await self.dispatch(event)
        return len(events)

    def get_stats(self) -> DispatcherStats:
        """Get dispatcher statistics."""
        return self._stats

"""
Audit logger subscriber that logs catalog domain events.
"""

from typing import Any, Dict, List

import structlog

from ..domain_event_dispatcher import DomainEventDispatcher
from ....domain.shared.domain_event import DomainEvent
from ....domain.catalog_context.events import CategoryEvent, ProductEvent

logger = structlog.get_logger(__name__)


class AuditLogger:
    """
    Logs catalog domain events for audit purposes.

    Every product and category event is written to the structured log
    with its payload and kept in a bounded in-memory trail.
    """

    def __init__(self, dispatcher: DomainEventDispatcher, max_entries: int = 1000):
        self._audit_log: List[Dict[str, Any]] = []
        self._max_entries = max_entries
        self._setup_subscriptions(dispatcher)

    def _setup_subscriptions(self, dispatcher: DomainEventDispatcher):
        """Subscribe to catalog events."""
        dispatcher.subscribe(event_type=ProductEvent, handler=self._log_event, priority=10)
        dispatcher.subscribe(event_type=CategoryEvent, handler=self._log_event, priority=10)
        logger.info("AuditLogger initialized and subscribed to events")

    async def _log_event(self, event: DomainEvent):
        """Log a catalog event."""
        log_entry = event.to_dict()
        self._store(log_entry)
        logger.info("audit_event", **log_entry)

    def _store(self, log_entry: Dict[str, Any]):
        self._audit_log.append(log_entry)
        if len(self._audit_log) > self._max_entries:
            self._audit_log = self._audit_log[-self._max_entries:]

    def get_audit_log(self, limit: int = 100) -> List[Dict[str, Any]]:
        """Get the most recent audit entries."""
        return self._audit_log[-limit:]

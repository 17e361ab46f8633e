"""
Domain event dispatching.
"""

from .domain_event_dispatcher import DomainEventDispatcher, EventSubscriber

__all__ = [
    "DomainEventDispatcher",
    "EventSubscriber",
]

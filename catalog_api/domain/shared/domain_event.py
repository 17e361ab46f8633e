"""
Domain event base.

Events are facts recorded by aggregates. They are queued on the aggregate,
drained by the unit of work after a flush and delivered to subscribers in
record order (``sequence``).
"""

import itertools
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4


# Process-wide record order
_sequence = itertools.count(1)


class DomainEvent(ABC):
    """
    Immutable domain event.

    Attributes:
        event_id: Unique event id
        occurred_at: UTC time the event was recorded
        sequence: Global record order, strictly increasing
        event_type: Class name of the event

    Subclasses add their payload in ``__init__`` after calling
    ``super().__init__()`` and extend ``to_dict``. Every attribute can be
    assigned only once.

    Usage:
        class StockReserved(DomainEvent):
            def __init__(self, product_id: UUID, quantity: int):
                super().__init__()
                self.product_id = product_id
                self.quantity = quantity
    """

    def __init__(self, event_id: Optional[str] = None, occurred_at: Optional[datetime] = None):
        self.event_id: str = event_id or str(uuid4())
        self.occurred_at: datetime = occurred_at or datetime.now(timezone.utc)
        self.sequence: int = next(_sequence)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__:
            raise AttributeError(f"{self.event_type} is immutable: cannot reassign '{name}'")
        object.__setattr__(self, name, value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DomainEvent):
            return NotImplemented
        return type(self) is type(other) and self.event_id == other.event_id

    def __hash__(self) -> int:
        return hash((type(self), self.event_id))

    def __repr__(self) -> str:
        return f"{self.event_type}(#{self.sequence}, id={self.event_id})"

    def to_dict(self) -> Dict[str, Any]:
        """Serializable payload for logging and audit."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "sequence": self.sequence,
        }

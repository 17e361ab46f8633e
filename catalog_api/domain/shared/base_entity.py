"""
Base Entity class for Domain-Driven Design.

This module provides the foundation for all domain entities following DDD principles.
"""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from catalog_api.domain.shared.domain_event import DomainEvent


class Entity(BaseModel):
    """
    Base class for all domain entities.

    An entity is defined by its identity, not its attributes.
    Two entities with the same ID are considered equal, even if their attributes differ.

    Principles:
    - Identity: Each entity has a unique identifier
    - Lifecycle: Entities have a lifecycle (created, modified, soft-deleted)
    - Equality: Based on identity, not attributes
    - Audit: Audit fields are written by the persistence layer on flush,
      domain code only reads them

    Pending domain events live in a private queue. The unit of work drains the
    queue after flushing changes, so an entity never dispatches its own events.

    Attributes:
        id: Unique identifier
        created_at: Creation timestamp (UTC), set on first flush
        updated_at: Last update timestamp (UTC), set on every later flush
        created_by: Actor that created the entity
        updated_by: Actor that last modified the entity
        is_deleted: Soft delete flag
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp (UTC)")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp (UTC)")
    created_by: Optional[str] = Field(None, description="Actor that created the entity")
    updated_by: Optional[str] = Field(None, description="Actor that last updated the entity")
    is_deleted: bool = Field(False, description="Soft delete flag")

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    def add_domain_event(self, event: DomainEvent) -> None:
        """
        Record a pending domain event.

        Args:
            event: Domain event to add
        """
        self._domain_events.append(event)

    def drain_domain_events(self) -> List[DomainEvent]:
        """
        Return pending domain events and clear the queue.

        Returns:
            Events in the order they were recorded
        """
        events = self._domain_events
        self._domain_events = []
        return events

    def clear_domain_events(self) -> None:
        """Clear all domain events."""
        self._domain_events = []

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Get a copy of pending domain events."""
        return list(self._domain_events)

    @property
    def has_domain_events(self) -> bool:
        """Check whether the entity has undispatched events."""
        return bool(self._domain_events)

    def mark_deleted(self) -> None:
        """Soft delete the entity."""
        self.is_deleted = True

    def __eq__(self, other: Any) -> bool:
        """
        Compare entities by identity.

        Args:
            other: Object to compare with

        Returns:
            True if entities have the same ID and type
        """
        if not isinstance(other, Entity):
            return False
        return self.id == other.id and type(self) == type(other)

    def __hash__(self) -> int:
        """
        Generate hash based on identity.

        Returns:
            Hash of entity ID and type
        """
        return hash((self.id, type(self)))

    def __repr__(self) -> str:
        """
        String representation of entity.

        Returns:
            String with entity type and ID
        """
        return f"{self.__class__.__name__}(id={self.id})"

"""
Base Repository and Unit of Work interfaces for Domain-Driven Design.

This module provides the foundation for all repository interfaces following DDD principles.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from catalog_api.domain.shared.base_entity import Entity


# Type variable for entity type
TEntity = TypeVar('TEntity', bound=Entity)
TId = TypeVar('TId')


class Repository(ABC, Generic[TEntity, TId]):
    """
    Base interface for all repositories.

    A repository provides the illusion of an in-memory collection of domain objects.
    It encapsulates the logic required to access data sources and provides a more
    object-oriented view of the persistence layer.

    Principles:
    - Abstraction: Hide persistence details from domain layer
    - Collection-like: Provide collection-like interface (add, get, delete)
    - Domain-focused: Work with domain entities, not database models
    - Single responsibility: One repository per aggregate root
    - Soft delete: Deleted entities are flagged, never removed, and are
      invisible to every read

    Usage:
        class ProductRepository(Repository[Product, UUID]):
            async def get_by_category(self, category_id: UUID) -> List[Product]:
                pass
    """

    @abstractmethod
    async def get_by_id(self, id: TId) -> Optional[TEntity]:
        """
        Get entity by identifier.

        Args:
            id: Entity identifier

        Returns:
            Entity if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[TEntity]:
        """
        List all non-deleted entities.

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    async def add(self, entity: TEntity) -> TEntity:
        """
        Add new entity to repository.

        Args:
            entity: Entity to add

        Returns:
            The added entity
        """
        pass

    @abstractmethod
    async def update(self, entity: TEntity) -> None:
        """
        Update existing entity in repository.

        Args:
            entity: Entity to update

        Raises:
            RepositoryError: If entity doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, entity: TEntity) -> None:
        """
        Soft delete entity: set the deleted flag and persist it as an update.

        Args:
            entity: Entity to delete
        """
        pass

    @abstractmethod
    async def exists(self, id: TId) -> bool:
        """
        Check if a non-deleted entity exists.

        Args:
            id: Entity identifier

        Returns:
            True if entity exists, False otherwise
        """
        pass


class UnitOfWork(ABC):
    """
    Unit of Work pattern for managing transactions.

    A Unit of Work maintains a list of objects affected by a business transaction
    and coordinates the writing out of changes, the dispatch of their domain
    events and the resolution of concurrency problems.

    States: idle -> transaction open -> (committed | rolled back) -> idle.

    Usage:
        async with unit_of_work:
            await unit_of_work.begin_transaction()
            product = await unit_of_work.products.get_by_id(product_id)
            product.update_stock(10)
            await unit_of_work.products.update(product)
            await unit_of_work.commit_transaction()
    """

    @abstractmethod
    async def __aenter__(self):
        """Acquire the persistence session."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Roll back any open transaction and release the session."""
        pass

    @property
    @abstractmethod
    def has_active_transaction(self) -> bool:
        """Whether an explicit transaction is open."""
        pass

    @abstractmethod
    async def begin_transaction(self) -> None:
        """Open a transaction; no-op when one is already open."""
        pass

    @abstractmethod
    async def save_changes(self) -> int:
        """
        Flush tracked changes and dispatch pending domain events.

        Returns:
            Number of dispatched events
        """
        pass

    @abstractmethod
    async def commit_transaction(self, operation: str = "unknown") -> None:
        """
        Save changes and commit; roll back and re-raise on failure.

        Args:
            operation: Operation name used for metrics and logging
        """
        pass

    @abstractmethod
    async def rollback_transaction(self) -> None:
        """Discard the open transaction; safe to call when idle."""
        pass

    @abstractmethod
    def track(self, entity: Entity) -> None:
        """Register an aggregate whose events should be dispatched on save."""
        pass

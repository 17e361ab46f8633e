"""
Shared kernel: entity, value object and event bases, repository and
unit-of-work ports used by the catalog context.
"""

from catalog_api.domain.shared.base_entity import Entity
from catalog_api.domain.shared.domain_event import DomainEvent
from catalog_api.domain.shared.repository import Repository, UnitOfWork
from catalog_api.domain.shared.value_object import ValueObject

__all__ = [
    "Entity",
    "ValueObject",
    "DomainEvent",
    "Repository",
    "UnitOfWork",
]

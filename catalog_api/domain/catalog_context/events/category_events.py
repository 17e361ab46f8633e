"""
Category Domain Events.

События жизненного цикла Category entity.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from ...shared.domain_event import DomainEvent


class CategoryEvent(DomainEvent):
    """
    Базовое событие категории.

    Атрибуты:
        category_id: ID категории
    """

    category_id: UUID

    def __init__(self, category_id: UUID, occurred_at: Optional[datetime] = None):
        super().__init__(occurred_at=occurred_at)
        self.category_id = category_id

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["category_id"] = str(self.category_id)
        return data


class CategoryCreated(CategoryEvent):
    """Событие: категория создана."""


class CategoryUpdated(CategoryEvent):
    """Событие: изменены название или описание категории."""


class CategoryActivated(CategoryEvent):
    """Событие: категория активирована."""


class CategoryDeactivated(CategoryEvent):
    """Событие: категория деактивирована."""

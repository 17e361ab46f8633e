"""
Product Domain Events.

События жизненного цикла Product entity.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from ...shared.domain_event import DomainEvent


class ProductEvent(DomainEvent):
    """
    Базовое событие товара.

    Атрибуты:
        product_id: ID товара
    """

    product_id: UUID

    def __init__(self, product_id: UUID, occurred_at: Optional[datetime] = None):
        super().__init__(occurred_at=occurred_at)
        self.product_id = product_id

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["product_id"] = str(self.product_id)
        return data


class ProductCreated(ProductEvent):
    """Событие: товар создан."""


class ProductUpdated(ProductEvent):
    """Событие: изменены название, описание или цена товара."""


class ProductStockUpdated(ProductEvent):
    """
    Событие: изменен остаток товара.

    Атрибуты:
        product_id: ID товара
        old_stock: Остаток до изменения
        new_stock: Остаток после изменения
    """

    old_stock: int
    new_stock: int

    def __init__(
        self,
        product_id: UUID,
        old_stock: int,
        new_stock: int,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(product_id, occurred_at=occurred_at)
        self.old_stock = old_stock
        self.new_stock = new_stock

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["old_stock"] = self.old_stock
        data["new_stock"] = self.new_stock
        return data


class ProductActivated(ProductEvent):
    """Событие: товар активирован."""


class ProductDeactivated(ProductEvent):
    """Событие: товар деактивирован."""

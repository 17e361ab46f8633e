"""
Catalog Context Domain Events.

Domain events для Catalog bounded context.
"""

from .product_events import (
    ProductEvent,
    ProductCreated,
    ProductUpdated,
    ProductStockUpdated,
    ProductActivated,
    ProductDeactivated,
)
from .category_events import (
    CategoryEvent,
    CategoryCreated,
    CategoryUpdated,
    CategoryActivated,
    CategoryDeactivated,
)

__all__ = [
    "ProductEvent",
    "ProductCreated",
    "ProductUpdated",
    "ProductStockUpdated",
    "ProductActivated",
    "ProductDeactivated",
    "CategoryEvent",
    "CategoryCreated",
    "CategoryUpdated",
    "CategoryActivated",
    "CategoryDeactivated",
]

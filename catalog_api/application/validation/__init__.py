"""
Валидация запросов.

Валидаторы регистрируются в медиаторе для типа запроса и
выполняются ValidationBehavior до обработчика.
"""

from .base import ValidationFailure, Validator
from .product_validators import (
    CreateProductValidator,
    UpdateProductValidator,
    UpdateProductStockValidator,
)
from .category_validators import CreateCategoryValidator, UpdateCategoryValidator

__all__ = [
    "ValidationFailure",
    "Validator",
    "CreateProductValidator",
    "UpdateProductValidator",
    "UpdateProductStockValidator",
    "CreateCategoryValidator",
    "UpdateCategoryValidator",
]

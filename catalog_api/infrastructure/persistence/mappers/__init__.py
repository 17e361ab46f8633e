"""
Mappers между доменными сущностями и моделями БД.
"""

from .audit_fields import copy_audit_fields
from .category_mapper import CategoryMapper
from .product_mapper import ProductMapper

__all__ = [
    "copy_audit_fields",
    "CategoryMapper",
    "ProductMapper",
]

"""
SQLAlchemy models for catalog persistence.
"""
from .base import Base, AuditMixin
from .category import CategoryModel
from .product import ProductModel

__all__ = [
    "Base",
    "AuditMixin",
    "CategoryModel",
    "ProductModel",
]

"""
SQLAlchemy реализации репозиториев каталога.
"""

from .category_repository_impl import CategoryRepositoryImpl
from .product_repository_impl import ProductRepositoryImpl

__all__ = [
    "CategoryRepositoryImpl",
    "ProductRepositoryImpl",
]

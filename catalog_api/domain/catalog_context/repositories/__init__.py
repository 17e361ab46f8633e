"""
Catalog Context Repositories.

Интерфейсы репозиториев для Catalog bounded context.
"""

from .product_repository import ProductRepository
from .category_repository import CategoryRepository
from .unit_of_work import CatalogUnitOfWork

__all__ = [
    "ProductRepository",
    "CategoryRepository",
    "CatalogUnitOfWork",
]

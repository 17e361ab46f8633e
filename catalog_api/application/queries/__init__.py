"""
Запросы (Queries) для чтения каталога.

Запросы не изменяют состояние и не открывают транзакцию.
"""

from .base import Query, QueryHandler
from .product_queries import (
    GetProductByIdQuery,
    GetProductByIdHandler,
    GetAllProductsQuery,
    GetAllProductsHandler,
)
from .category_queries import (
    GetCategoryByIdQuery,
    GetCategoryByIdHandler,
    GetAllCategoriesQuery,
    GetAllCategoriesHandler,
)

__all__ = [
    "Query",
    "QueryHandler",
    "GetProductByIdQuery",
    "GetProductByIdHandler",
    "GetAllProductsQuery",
    "GetAllProductsHandler",
    "GetCategoryByIdQuery",
    "GetCategoryByIdHandler",
    "GetAllCategoriesQuery",
    "GetAllCategoriesHandler",
]

"""
Кастомные исключения для Catalog API.

Этот модуль содержит иерархию исключений для различных
ошибочных ситуаций в системе.
"""

from .base import (
    CatalogError,
    DomainError,
    InfrastructureError,
    ApplicationError
)

from .domain_errors import (
    InvalidMoneyError,
    CurrencyMismatchError,
    InvalidStockError,
    CategoryHasProductsError
)

from .infrastructure_errors import (
    RepositoryError,
    TransactionError
)

__all__ = [
    # Базовые исключения
    "CatalogError",
    "DomainError",
    "InfrastructureError",
    "ApplicationError",

    # Доменные исключения
    "InvalidMoneyError",
    "CurrencyMismatchError",
    "InvalidStockError",
    "CategoryHasProductsError",

    # Инфраструктурные исключения
    "RepositoryError",
    "TransactionError",
]

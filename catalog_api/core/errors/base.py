"""
Корень иерархии исключений Catalog API.

CatalogError
├── DomainError          - нарушение бизнес-правила (Money, остаток, удаление категории)
├── ApplicationError     - ошибка сборки pipeline (нет обработчика, дубликат)
└── InfrastructureError  - БД, транзакции, репозитории
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """
    Ошибка Catalog API с кодом и структурированными деталями.

    Атрибуты:
        message: Текст для клиента и логов
        details: Контекст ошибки (ID, значения полей)
        error_code: Стабильный код; по умолчанию имя класса

    Пример:
        >>> error = CatalogError("Stock cannot be negative", {"stock": -1}, "INVALID_STOCK")
        >>> error.to_dict()["error_code"]
        'INVALID_STOCK'
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.error_code = error_code or type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Представление для логирования."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} [{context}]"


class DomainError(CatalogError):
    """Нарушение инварианта модели: неправильное использование, а не ошибка ввода."""


class ApplicationError(CatalogError):
    """Ошибка конфигурации медиатора."""


class InfrastructureError(CatalogError):
    """Ошибка хранилища или транзакции."""

"""
Доменные исключения.

Исключения для нарушения бизнес-правил каталога.
"""

from typing import Optional, Dict, Any
from .base import DomainError


class InvalidMoneyError(DomainError, ValueError):
    """
    Исключение: некорректное денежное значение.

    Выбрасывается при попытке создать Money с отрицательной
    суммой или пустой валютой.

    Пример:
        >>> raise InvalidMoneyError(field="amount", reason="Amount cannot be negative")
    """

    def __init__(
        self,
        field: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            field: Поле с ошибкой (amount или currency)
            reason: Причина ошибки
            details: Дополнительные детали
        """
        super().__init__(
            message=reason,
            details={"field": field, **(details or {})},
            error_code="INVALID_MONEY"
        )


class CurrencyMismatchError(DomainError):
    """
    Исключение: операция над деньгами в разных валютах.

    Сложение, вычитание и сравнение требуют одинаковой валюты.

    Пример:
        >>> raise CurrencyMismatchError("add", "USD", "EUR")
    """

    def __init__(
        self,
        operation: str,
        left_currency: str,
        right_currency: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            operation: Операция (add, subtract, compare)
            left_currency: Валюта левого операнда
            right_currency: Валюта правого операнда
            details: Дополнительные детали
        """
        message = f"Cannot {operation} money with different currencies"
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "left_currency": left_currency,
                "right_currency": right_currency,
                **(details or {})
            },
            error_code="CURRENCY_MISMATCH"
        )


class InvalidStockError(DomainError):
    """
    Исключение: отрицательный остаток товара.

    Пример:
        >>> raise InvalidStockError(product_id="...", stock=-1)
    """

    def __init__(
        self,
        product_id: str,
        stock: int,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            product_id: ID товара
            stock: Некорректное значение остатка
            details: Дополнительные детали
        """
        super().__init__(
            message="Stock cannot be negative",
            details={"product_id": product_id, "stock": stock, **(details or {})},
            error_code="INVALID_STOCK"
        )


class CategoryHasProductsError(DomainError):
    """
    Исключение: удаление категории, в которой есть товары.

    Категория с неудаленными товарами не может быть удалена.

    Пример:
        >>> raise CategoryHasProductsError(category_id="...")
    """

    def __init__(self, category_id: str, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            category_id: ID категории
            details: Дополнительные детали
        """
        super().__init__(
            message="Cannot delete category that contains products",
            details={"category_id": category_id, **(details or {})},
            error_code="CATEGORY_HAS_PRODUCTS"
        )

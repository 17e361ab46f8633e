"""
Валидаторы команд над товарами.
"""

from typing import List

from .base import (
    ValidationFailure,
    Validator,
    exact_length,
    greater_than,
    max_decimal_places,
    max_length,
    min_value,
    not_empty,
    not_nil,
)
from ..commands import (
    CreateProductCommand,
    UpdateProductCommand,
    UpdateProductStockCommand,
)


NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
CURRENCY_LENGTH = 3
PRICE_DECIMAL_PLACES = 2


def _check_details(failures: List[ValidationFailure], request) -> None:
    """Общие правила для названия, описания и цены."""
    not_empty(failures, "name", request.name, "Product name is required")
    max_length(
        failures, "name", request.name, NAME_MAX_LENGTH,
        "Product name cannot exceed 200 characters"
    )

    not_empty(failures, "description", request.description, "Product description is required")
    max_length(
        failures, "description", request.description, DESCRIPTION_MAX_LENGTH,
        "Product description cannot exceed 1000 characters"
    )

    greater_than(failures, "amount", request.amount, 0, "Product price must be greater than 0")
    max_decimal_places(
        failures, "amount", request.amount, PRICE_DECIMAL_PLACES,
        "Product price cannot have more than 2 decimal places"
    )

    not_empty(failures, "currency", request.currency, "Currency is required")
    exact_length(
        failures, "currency", request.currency, CURRENCY_LENGTH,
        "Currency must be 3 characters long"
    )


class CreateProductValidator(Validator[CreateProductCommand]):
    """Валидатор команды создания товара."""

    async def validate(self, request: CreateProductCommand) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        _check_details(failures, request)
        min_value(failures, "stock", request.stock, 0, "Stock cannot be negative")
        not_nil(failures, "category_id", request.category_id, "Valid category ID is required")
        return failures


class UpdateProductValidator(Validator[UpdateProductCommand]):
    """Валидатор команды изменения товара."""

    async def validate(self, request: UpdateProductCommand) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        not_nil(failures, "product_id", request.product_id, "Valid product ID is required")
        _check_details(failures, request)
        return failures


class UpdateProductStockValidator(Validator[UpdateProductStockCommand]):
    """Валидатор команды изменения остатка."""

    async def validate(self, request: UpdateProductStockCommand) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        not_nil(failures, "product_id", request.product_id, "Valid product ID is required")
        min_value(failures, "stock", request.stock, 0, "Stock cannot be negative")
        return failures

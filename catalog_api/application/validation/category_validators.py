"""
Валидаторы команд над категориями.
"""

from typing import List

from .base import ValidationFailure, Validator, max_length, not_empty, not_nil
from ..commands import CreateCategoryCommand, UpdateCategoryCommand


def _check_details(failures: List[ValidationFailure], request) -> None:
    not_empty(failures, "name", request.name, "Category name is required")
    max_length(failures, "name", request.name, 200, "Category name cannot exceed 200 characters")
    not_empty(failures, "description", request.description, "Category description is required")
    max_length(
        failures, "description", request.description, 1000,
        "Category description cannot exceed 1000 characters"
    )


class CreateCategoryValidator(Validator[CreateCategoryCommand]):
    """Валидатор команды создания категории."""

    async def validate(self, request: CreateCategoryCommand) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        _check_details(failures, request)
        return failures


class UpdateCategoryValidator(Validator[UpdateCategoryCommand]):
    """Валидатор команды изменения категории."""

    async def validate(self, request: UpdateCategoryCommand) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        not_nil(failures, "category_id", request.category_id, "Valid category ID is required")
        _check_details(failures, request)
        return failures

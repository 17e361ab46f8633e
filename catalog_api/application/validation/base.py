"""
Базовые классы валидации запросов.

Валидатор проверяет запрос определенного типа и возвращает
список нарушений. Пустой список означает, что запрос корректен.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Generic, List, NamedTuple, Optional, TypeVar, Union
from uuid import UUID


TRequest = TypeVar('TRequest')

NIL_UUID = UUID(int=0)


class ValidationFailure(NamedTuple):
    """
    Нарушение правила валидации.

    Атрибуты:
        field: Имя поля запроса
        message: Сообщение для клиента
    """

    field: str
    message: str


class Validator(ABC, Generic[TRequest]):
    """
    Базовый класс валидаторов.

    Пример:
        >>> class StockValidator(Validator[UpdateProductStockCommand]):
        ...     async def validate(self, request):
        ...         failures = []
        ...         min_value(failures, "stock", request.stock, 0, "Stock cannot be negative")
        ...         return failures
    """

    @abstractmethod
    async def validate(self, request: TRequest) -> List[ValidationFailure]:
        """
        Проверить запрос.

        Args:
            request: Запрос для проверки

        Returns:
            Список нарушений (пустой, если запрос корректен)
        """
        pass


# Правила. Каждое правило добавляет нарушение в список и ничего не возвращает.

def not_empty(failures: List[ValidationFailure], field: str, value: Optional[str], message: str) -> None:
    """Строка не пустая и не состоит из пробелов."""
    if value is None or not value.strip():
        failures.append(ValidationFailure(field, message))


def max_length(failures: List[ValidationFailure], field: str, value: Optional[str], limit: int, message: str) -> None:
    """Длина строки не больше limit."""
    if value is not None and len(value) > limit:
        failures.append(ValidationFailure(field, message))


def exact_length(failures: List[ValidationFailure], field: str, value: Optional[str], length: int, message: str) -> None:
    """Длина строки равна length."""
    if value is not None and len(value) != length:
        failures.append(ValidationFailure(field, message))


def greater_than(
    failures: List[ValidationFailure],
    field: str,
    value: Union[int, Decimal],
    bound: Union[int, Decimal],
    message: str
) -> None:
    """Значение строго больше bound."""
    if value is None or not value > bound:
        failures.append(ValidationFailure(field, message))


def min_value(
    failures: List[ValidationFailure],
    field: str,
    value: Union[int, Decimal],
    bound: Union[int, Decimal],
    message: str
) -> None:
    """Значение не меньше bound."""
    if value is None or value < bound:
        failures.append(ValidationFailure(field, message))


def not_nil(failures: List[ValidationFailure], field: str, value: Optional[UUID], message: str) -> None:
    """UUID задан и не нулевой."""
    if value is None or value == NIL_UUID:
        failures.append(ValidationFailure(field, message))


def max_decimal_places(
    failures: List[ValidationFailure],
    field: str,
    value: Optional[Decimal],
    places: int,
    message: str
) -> None:
    """Число не содержит значащих цифр дальше places знаков после запятой."""
    if value is None or not value.is_finite():
        return
    if value.normalize().as_tuple().exponent < -places:
        failures.append(ValidationFailure(field, message))

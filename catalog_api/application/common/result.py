"""
Result - единый конверт результата для всех use cases.

Ожидаемые бизнес-ошибки (не найдено, валидация, дубликат) кодируются
как неуспешный Result, а не как исключения.
"""

from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .messages import MessageConstants


T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """
    Результат выполнения команды или запроса.

    Атрибуты:
        is_success: Флаг успеха
        data: Данные (только для успешного результата, может быть None)
        message: Сообщение для клиента
        errors: Список ошибок (только для неуспешного результата)

    Сериализуется с camelCase ключами: isSuccess, data, message, errors.

    Пример:
        >>> result = Result.success(dto, MessageConstants.PRODUCT_CREATED)
        >>> result.is_success
        True
        >>> failure = Result.failure("Validation failed", ["Stock cannot be negative"])
        >>> failure.errors
        ['Stock cannot be negative']
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    is_success: bool = Field(description="Флаг успеха")
    data: Optional[T] = Field(default=None, description="Данные результата")
    message: str = Field(default="", description="Сообщение")
    errors: List[str] = Field(default_factory=list, description="Список ошибок")

    @classmethod
    def success(
        cls,
        data: Optional[T] = None,
        message: str = MessageConstants.OPERATION_SUCCESSFUL
    ) -> "Result[T]":
        """
        Создать успешный результат.

        Args:
            data: Данные (None допустимо)
            message: Сообщение
        """
        return cls(is_success=True, data=data, message=message, errors=[])

    @classmethod
    def failure(
        cls,
        message: str,
        errors: Optional[Union[List[str], str]] = None
    ) -> "Result[T]":
        """
        Создать неуспешный результат.

        Args:
            message: Сообщение об ошибке
            errors: Список ошибок или одна ошибка (по умолчанию пустой список)
        """
        if errors is None:
            errors = []
        elif isinstance(errors, str):
            errors = [errors]
        return cls(is_success=False, data=None, message=message, errors=list(errors))

    @property
    def is_failure(self) -> bool:
        """Проверить, что результат неуспешный."""
        return not self.is_success

    def to_response(self) -> dict:
        """
        Сериализовать в JSON-совместимый словарь с camelCase ключами.

        Returns:
            Словарь для HTTP ответа
        """
        return self.model_dump(mode="json", by_alias=True)

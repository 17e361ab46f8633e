"""
Базовые классы запросов к медиатору.

Команды и запросы являются частными случаями Request.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from .result import Result


# Тип переменная для данных результата
TResult = TypeVar('TResult')
TRequest = TypeVar('TRequest', bound="Request")


class Request(BaseModel, ABC):
    """
    Базовый класс для всех запросов к медиатору.

    Запросы неизменяемы. Каждый класс запроса статически объявляет,
    выполняется ли он в транзакции (атрибут класса transactional).
    """

    model_config = ConfigDict(frozen=True)

    transactional: ClassVar[bool] = False


class RequestHandler(ABC, Generic[TRequest, TResult]):
    """
    Базовый класс для обработчиков запросов.

    Обработчик всегда возвращает Result.
    """

    @abstractmethod
    async def handle(self, request: TRequest) -> Result[TResult]:
        """
        Обработать запрос.

        Args:
            request: Запрос

        Returns:
            Result с данными или ошибкой

        Raises:
            DomainError: При нарушении бизнес-правил
            InfrastructureError: При ошибках инфраструктуры
        """
        pass

"""
Базовые классы для запросов (Queries).

Запрос представляет намерение получить данные без изменения состояния.
Query Handler обрабатывает запрос и возвращает данные.
"""

from abc import ABC
from typing import ClassVar, Generic, TypeVar

from ..common.request import Request, RequestHandler


# Тип переменная для результата запроса
TResult = TypeVar('TResult')


class Query(Request, ABC):
    """
    Базовый класс для запросов.

    Запрос - это объект, который представляет намерение
    получить данные без изменения состояния системы.

    Важно: Запросы НЕ должны изменять состояние системы
    и никогда не выполняются в транзакции.

    Пример:
        >>> class GetProductByNameQuery(Query):
        ...     name: str
    """

    transactional: ClassVar[bool] = False


class QueryHandler(RequestHandler[Query, TResult], Generic[TResult]):
    """
    Базовый класс для обработчиков запросов.

    Query Handler отвечает за выполнение запроса:
    - Получение данных из репозиториев
    - Преобразование в DTO
    - Возврат Result

    Важно: Query Handler НЕ должен изменять состояние системы!
    """

"""
Медиатор: отправка запросов обработчикам через цепочку behaviors.
"""

import functools
import logging
from typing import Dict, List, Optional, Sequence, Type

from .behaviors import NextHandler, PipelineBehavior
from ..common import Request, RequestHandler, Result
from ...core.errors import ApplicationError

logger = logging.getLogger("catalog-api.mediator")


class Mediator:
    """
    Медиатор запросов.

    Каждому типу запроса соответствует ровно один обработчик.
    Behaviors применяются в порядке регистрации: первый behavior
    является внешним звеном цепочки.

    Атрибуты:
        _handlers: Обработчики по типу запроса
        _behaviors: Цепочка behaviors

    Пример:
        >>> mediator = Mediator([validation, transaction])
        >>> mediator.register_handler(CreateProductCommand, CreateProductHandler(uow))
        >>> result = await mediator.send(CreateProductCommand(...))
    """

    def __init__(self, behaviors: Optional[Sequence[PipelineBehavior]] = None):
        """
        Инициализация медиатора.

        Args:
            behaviors: Behaviors в порядке выполнения
        """
        self._handlers: Dict[Type[Request], RequestHandler] = {}
        self._behaviors: List[PipelineBehavior] = list(behaviors or [])

    def register_handler(self, request_type: Type[Request], handler: RequestHandler) -> None:
        """
        Зарегистрировать обработчик.

        Args:
            request_type: Класс запроса
            handler: Обработчик

        Raises:
            ApplicationError: Если обработчик для типа уже зарегистрирован
        """
        if request_type in self._handlers:
            raise ApplicationError(
                f"Handler for {request_type.__name__} is already registered",
                error_code="HANDLER_ALREADY_REGISTERED"
            )
        self._handlers[request_type] = handler

    async def send(self, request: Request) -> Result:
        """
        Отправить запрос обработчику через цепочку behaviors.

        Args:
            request: Запрос

        Returns:
            Result обработчика или behavior, прервавшего цепочку

        Raises:
            ApplicationError: Если обработчик не зарегистрирован
        """
        request_type = type(request)
        handler = self._handlers.get(request_type)
        if handler is None:
            raise ApplicationError(
                f"No handler registered for {request_type.__name__}",
                error_code="HANDLER_NOT_FOUND"
            )

        logger.debug(f"Sending {request_type.__name__}")

        next_handler: NextHandler = functools.partial(handler.handle, request)
        for behavior in reversed(self._behaviors):
            next_handler = functools.partial(behavior.handle, request, next_handler)

        return await next_handler()

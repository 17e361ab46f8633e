"""
Pipeline behaviors медиатора.

Behavior оборачивает вызов следующего звена цепочки. Порядок
фиксирован при сборке медиатора: сначала валидация, затем транзакция,
затем обработчик.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Type

from ..common import MessageConstants, Request, Result
from ..validation import Validator
from ...domain.shared.repository import UnitOfWork

logger = logging.getLogger("catalog-api.pipeline")


# Следующее звено цепочки: behavior или обработчик
NextHandler = Callable[[], Awaitable[Result]]


class PipelineBehavior(ABC):
    """
    Базовый класс pipeline behavior.

    Пример:
        >>> class TimingBehavior(PipelineBehavior):
        ...     async def handle(self, request, next_handler):
        ...         started = time.perf_counter()
        ...         try:
        ...             return await next_handler()
        ...         finally:
        ...             logger.debug(f"{type(request).__name__}: {time.perf_counter() - started:.3f}s")
    """

    @abstractmethod
    async def handle(self, request: Request, next_handler: NextHandler) -> Result:
        """
        Обработать запрос.

        Args:
            request: Запрос
            next_handler: Следующее звено цепочки

        Returns:
            Result от следующего звена или собственный Result
        """
        pass


class ValidationBehavior(PipelineBehavior):
    """
    Behavior валидации.

    Все валидаторы, зарегистрированные для типа запроса, выполняются
    конкурентно; нарушения всех валидаторов собираются вместе. При наличии
    нарушений цепочка прерывается и возвращается
    Result.failure("Validation failed", [сообщения]).
    """

    def __init__(self):
        self._validators: Dict[Type[Request], List[Validator]] = defaultdict(list)

    def register(self, request_type: Type[Request], validator: Validator) -> None:
        """
        Зарегистрировать валидатор для типа запроса.

        Args:
            request_type: Класс запроса
            validator: Валидатор
        """
        self._validators[request_type].append(validator)

    def validators_for(self, request_type: Type[Request]) -> List[Validator]:
        """Получить валидаторы типа запроса."""
        return list(self._validators.get(request_type, []))

    async def handle(self, request: Request, next_handler: NextHandler) -> Result:
        validators = self.validators_for(type(request))
        if not validators:
            return await next_handler()

        results = await asyncio.gather(
            *(validator.validate(request) for validator in validators)
        )
        failures = [failure for result in results for failure in result]

        if failures:
            logger.info(
                f"Validation failed for {type(request).__name__}: "
                f"{len(failures)} error(s)"
            )
            return Result.failure(
                MessageConstants.VALIDATION_FAILED,
                [failure.message for failure in failures]
            )

        return await next_handler()


class TransactionBehavior(PipelineBehavior):
    """
    Behavior транзакции.

    Нетранзакционные запросы проходят без изменений. Для транзакционных:
    begin -> следующее звено -> commit. Любое исключение следующего звена
    (включая asyncio.CancelledError) приводит к rollback и повторному
    выбросу исходного исключения.

    Если транзакция уже открыта внешним звеном, behavior не управляет
    ею: commit и rollback выполняет тот, кто ее открыл.
    """

    def __init__(self, uow: UnitOfWork):
        """
        Args:
            uow: Unit of Work текущего запроса
        """
        self._uow = uow

    async def handle(self, request: Request, next_handler: NextHandler) -> Result:
        if not type(request).transactional:
            return await next_handler()

        if self._uow.has_active_transaction:
            return await next_handler()

        request_name = type(request).__name__
        await self._uow.begin_transaction()
        logger.debug(f"Transaction started for {request_name}")

        try:
            result = await next_handler()
        except BaseException as e:
            logger.warning(
                f"Rolling back transaction for {request_name}: {type(e).__name__}"
            )
            await self._uow.rollback_transaction()
            raise

        await self._uow.commit_transaction(operation=request_name)
        logger.debug(f"Transaction committed for {request_name}")
        return result

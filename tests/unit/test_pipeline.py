"""
Тесты для медиатора и pipeline behaviors.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_api.application.commands import Command
from catalog_api.application.common import RequestHandler, Result
from catalog_api.application.pipeline import Mediator, TransactionBehavior, ValidationBehavior
from catalog_api.application.queries import Query
from catalog_api.application.validation import ValidationFailure, Validator
from catalog_api.core.errors import ApplicationError


# ==================== Тестовые классы ====================

class PingQuery(Query):
    """Тестовый запрос"""
    text: str = "ping"


class RenameCommand(Command):
    """Тестовая команда"""
    name: str = ""


class EchoHandler(RequestHandler):
    """Обработчик, возвращающий текст запроса"""

    def __init__(self):
        self.calls = 0

    async def handle(self, request):
        self.calls += 1
        return Result.success(getattr(request, "text", None) or getattr(request, "name", None))


class FailingHandler(RequestHandler):
    """Обработчик, выбрасывающий исключение"""

    def __init__(self, error: BaseException):
        self.error = error

    async def handle(self, request):
        raise self.error


class NameValidator(Validator):
    async def validate(self, request):
        return [] if request.name else [ValidationFailure("name", "Name is required")]


class SlowValidator(Validator):
    async def validate(self, request):
        await asyncio.sleep(0)
        return [ValidationFailure("name", "Name is too slow")]


def make_uow(active: bool = False):
    uow = MagicMock()
    uow.has_active_transaction = active
    uow.begin_transaction = AsyncMock()
    uow.commit_transaction = AsyncMock()
    uow.rollback_transaction = AsyncMock()
    return uow


# ==================== Тесты Mediator ====================

class TestMediator:
    """Тесты для Mediator"""

    @pytest.mark.asyncio
    async def test_send_to_handler(self):
        mediator = Mediator()
        mediator.register_handler(PingQuery, EchoHandler())

        result = await mediator.send(PingQuery(text="hello"))

        assert result.is_success
        assert result.data == "hello"

    @pytest.mark.asyncio
    async def test_missing_handler(self):
        with pytest.raises(ApplicationError) as exc_info:
            await Mediator().send(PingQuery())
        assert exc_info.value.error_code == "HANDLER_NOT_FOUND"

    def test_duplicate_handler(self):
        mediator = Mediator()
        mediator.register_handler(PingQuery, EchoHandler())
        with pytest.raises(ApplicationError):
            mediator.register_handler(PingQuery, EchoHandler())

    @pytest.mark.asyncio
    async def test_behaviors_run_in_registration_order(self):
        """Первый behavior - внешнее звено цепочки"""
        calls = []

        class Recording:
            def __init__(self, name):
                self.name = name

            async def handle(self, request, next_handler):
                calls.append(f"{self.name}:before")
                result = await next_handler()
                calls.append(f"{self.name}:after")
                return result

        mediator = Mediator([Recording("outer"), Recording("inner")])
        mediator.register_handler(PingQuery, EchoHandler())

        await mediator.send(PingQuery())

        assert calls == ["outer:before", "inner:before", "inner:after", "outer:after"]


# ==================== Тесты ValidationBehavior ====================

class TestValidationBehavior:
    """Тесты для ValidationBehavior"""

    @pytest.mark.asyncio
    async def test_no_validators_passes_through(self):
        next_handler = AsyncMock(return_value=Result.success("ok"))

        result = await ValidationBehavior().handle(RenameCommand(), next_handler)

        assert result.data == "ok"
        next_handler.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failures_short_circuit(self):
        """Тест прерывания цепочки при ошибках валидации"""
        behavior = ValidationBehavior()
        behavior.register(RenameCommand, NameValidator())
        behavior.register(RenameCommand, SlowValidator())
        next_handler = AsyncMock()

        result = await behavior.handle(RenameCommand(name=""), next_handler)

        assert result.is_failure
        assert result.message == "Validation failed"
        assert result.errors == ["Name is required", "Name is too slow"]
        next_handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_request_reaches_handler(self):
        behavior = ValidationBehavior()
        behavior.register(RenameCommand, NameValidator())
        next_handler = AsyncMock(return_value=Result.success())

        result = await behavior.handle(RenameCommand(name="ok"), next_handler)

        assert result.is_success
        next_handler.assert_awaited_once()

    def test_validators_are_per_type(self):
        behavior = ValidationBehavior()
        behavior.register(RenameCommand, NameValidator())
        assert behavior.validators_for(PingQuery) == []
        assert len(behavior.validators_for(RenameCommand)) == 1


# ==================== Тесты TransactionBehavior ====================

class TestTransactionBehavior:
    """Тесты для TransactionBehavior"""

    @pytest.mark.asyncio
    async def test_query_is_not_transactional(self):
        uow = make_uow()
        next_handler = AsyncMock(return_value=Result.success())

        await TransactionBehavior(uow).handle(PingQuery(), next_handler)

        uow.begin_transaction.assert_not_awaited()
        uow.commit_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_command_commits(self):
        """Тест begin -> handler -> commit"""
        uow = make_uow()
        next_handler = AsyncMock(return_value=Result.success("done"))

        result = await TransactionBehavior(uow).handle(RenameCommand(name="x"), next_handler)

        assert result.data == "done"
        uow.begin_transaction.assert_awaited_once()
        uow.commit_transaction.assert_awaited_once_with(operation="RenameCommand")
        uow.rollback_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_result_is_committed(self):
        """Неуспешный Result не является исключением"""
        uow = make_uow()
        next_handler = AsyncMock(return_value=Result.failure("Category not found"))

        result = await TransactionBehavior(uow).handle(RenameCommand(), next_handler)

        assert result.is_failure
        uow.commit_transaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_exception_rolls_back_and_propagates(self):
        uow = make_uow()
        next_handler = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await TransactionBehavior(uow).handle(RenameCommand(), next_handler)

        uow.rollback_transaction.assert_awaited_once()
        uow.commit_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancellation_rolls_back(self):
        uow = make_uow()
        next_handler = AsyncMock(side_effect=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await TransactionBehavior(uow).handle(RenameCommand(), next_handler)

        uow.rollback_transaction.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_joins_outer_transaction(self):
        """Внешняя транзакция не фиксируется внутренним звеном"""
        uow = make_uow(active=True)
        next_handler = AsyncMock(return_value=Result.success())

        await TransactionBehavior(uow).handle(RenameCommand(), next_handler)

        uow.begin_transaction.assert_not_awaited()
        uow.commit_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_validation_runs_before_transaction(self):
        """Невалидная команда не открывает транзакцию"""
        uow = make_uow()
        validation = ValidationBehavior()
        validation.register(RenameCommand, NameValidator())
        handler = EchoHandler()
        mediator = Mediator([validation, TransactionBehavior(uow)])
        mediator.register_handler(RenameCommand, handler)

        result = await mediator.send(RenameCommand(name=""))

        assert result.errors == ["Name is required"]
        assert handler.calls == 0
        uow.begin_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handler_error_through_mediator(self):
        uow = make_uow()
        mediator = Mediator([ValidationBehavior(), TransactionBehavior(uow)])
        mediator.register_handler(RenameCommand, FailingHandler(ValueError("bad")))

        with pytest.raises(ValueError):
            await mediator.send(RenameCommand(name="x"))

        uow.rollback_transaction.assert_awaited_once()

"""
Integration тесты для SqlAlchemyUnitOfWork.

Проверяет транзакции, аудит-поля и порядок отправки domain events.
"""

import asyncio
from datetime import datetime
from uuid import uuid4

import pytest

from catalog_api.core.errors import TransactionError
from catalog_api.domain.catalog_context.events import (
    CategoryCreated,
    ProductCreated,
    ProductStockUpdated,
)
from catalog_api.infrastructure.events import DomainEventDispatcher
from catalog_api.infrastructure.persistence import SqlAlchemyUnitOfWork
from tests.factories import make_category, make_product


class TestUnitOfWorkLifecycle:
    """Тесты жизненного цикла Unit of Work"""

    @pytest.mark.asyncio
    async def test_session_outside_context(self, session_factory):
        uow = SqlAlchemyUnitOfWork(session_factory)
        with pytest.raises(TransactionError):
            uow.session

    @pytest.mark.asyncio
    async def test_commit_without_transaction(self, uow):
        with pytest.raises(TransactionError):
            await uow.commit_transaction()

    @pytest.mark.asyncio
    async def test_begin_is_idempotent(self, uow):
        await uow.begin_transaction()
        await uow.begin_transaction()
        assert uow.has_active_transaction is True

        await uow.rollback_transaction()
        assert uow.has_active_transaction is False

    @pytest.mark.asyncio
    async def test_rollback_when_idle_is_safe(self, uow):
        await uow.rollback_transaction()
        assert uow.has_active_transaction is False

    @pytest.mark.asyncio
    async def test_commit_persists(self, session_factory, uow):
        """Тест begin -> add -> commit"""
        category = make_category()

        await uow.begin_transaction()
        await uow.categories.add(category)
        await uow.commit_transaction(operation="CreateCategoryCommand")

        assert uow.has_active_transaction is False
        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.exists(category.id) is True

    @pytest.mark.asyncio
    async def test_rollback_discards_changes(self, session_factory, uow, recorded_events):
        """Тест отката транзакции"""
        category = make_category()

        await uow.begin_transaction()
        await uow.categories.add(category)
        await uow.session.flush()
        await uow.rollback_transaction()

        assert category.domain_events == []
        assert recorded_events == []
        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.get_by_id(category.id) is None

    @pytest.mark.asyncio
    async def test_exit_rolls_back_open_transaction(self, session_factory):
        category = make_category()

        async with SqlAlchemyUnitOfWork(session_factory) as uow:
            await uow.begin_transaction()
            await uow.categories.add(category)
            await uow.session.flush()

        assert uow.has_active_transaction is False
        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.get_by_id(category.id) is None

    @pytest.mark.asyncio
    async def test_exception_inside_context_rolls_back(self, session_factory):
        category = make_category()

        with pytest.raises(RuntimeError):
            async with SqlAlchemyUnitOfWork(session_factory) as uow:
                await uow.begin_transaction()
                await uow.categories.add(category)
                await uow.session.flush()
                raise RuntimeError("handler failed")

        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.exists(category.id) is False

    @pytest.mark.asyncio
    async def test_cancelled_commit_rolls_back(self, session_factory):
        """Отмена во время отправки событий откатывает транзакцию"""
        dispatcher = DomainEventDispatcher()

        async def cancel(event):
            raise asyncio.CancelledError()

        dispatcher.subscribe(handler=cancel)
        category = make_category()

        async with SqlAlchemyUnitOfWork(session_factory, dispatcher) as uow:
            await uow.begin_transaction()
            await uow.categories.add(category)
            with pytest.raises(asyncio.CancelledError):
                await uow.commit_transaction()
            assert uow.has_active_transaction is False

        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.exists(category.id) is False


class TestUnitOfWorkAudit:
    """Тесты аудит-полей"""

    @pytest.mark.asyncio
    async def test_created_fields_are_stamped(self, uow):
        category = make_category()

        await uow.categories.add(category)
        await uow.save_changes()

        assert category.created_by == "tester"
        assert isinstance(category.created_at, datetime)
        assert category.updated_at is None
        assert category.updated_by is None

    @pytest.mark.asyncio
    async def test_updated_fields_are_stamped(self, uow):
        category = make_category()
        await uow.categories.add(category)
        await uow.save_changes()

        category.update_details("Garden", "Garden tools")
        await uow.categories.update(category)
        await uow.save_changes()

        assert category.updated_by == "tester"
        assert category.updated_at is not None
        assert category.created_by == "tester"


class TestUnitOfWorkEvents:
    """Тесты отправки domain events"""

    @pytest.mark.asyncio
    async def test_events_dispatched_on_save(self, uow, recorded_events):
        category = make_category()
        await uow.categories.add(category)

        dispatched = await uow.save_changes()

        assert dispatched == 1
        assert [type(e) for e in recorded_events] == [CategoryCreated]
        assert category.domain_events == []

    @pytest.mark.asyncio
    async def test_events_ordered_across_aggregates(self, uow, recorded_events):
        """События разных агрегатов отправляются в порядке записи"""
        category = make_category()
        product = make_product(category.id, stock=1)
        product.update_stock(2)

        # Порядок регистрации в репозиториях отличается от порядка записи
        await uow.products.add(product)
        await uow.categories.add(category)
        await uow.save_changes()

        assert [type(e) for e in recorded_events] == [
            CategoryCreated,
            ProductCreated,
            ProductStockUpdated,
        ]
        sequences = [e.sequence for e in recorded_events]
        assert sequences == sorted(sequences)

    @pytest.mark.asyncio
    async def test_events_dispatched_before_commit_in_transaction(self, uow, recorded_events):
        category = make_category()

        await uow.begin_transaction()
        await uow.categories.add(category)
        await uow.save_changes()

        assert len(recorded_events) == 1
        assert uow.has_active_transaction is True

        await uow.commit_transaction()
        assert len(recorded_events) == 1

    @pytest.mark.asyncio
    async def test_subscriber_failure_rolls_back_commit(self, session_factory):
        dispatcher = DomainEventDispatcher()

        async def broken(event):
            raise RuntimeError("subscriber failed")

        dispatcher.subscribe(handler=broken)
        category = make_category()

        async with SqlAlchemyUnitOfWork(session_factory, dispatcher) as uow:
            await uow.begin_transaction()
            await uow.categories.add(category)
            with pytest.raises(RuntimeError):
                await uow.commit_transaction(operation="CreateCategoryCommand")

        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.exists(category.id) is False

    @pytest.mark.asyncio
    async def test_subscriber_failure_rolls_back_implicit_save(self, session_factory):
        dispatcher = DomainEventDispatcher()

        async def broken(event):
            raise RuntimeError("subscriber failed")

        dispatcher.subscribe(handler=broken)
        category = make_category()

        async with SqlAlchemyUnitOfWork(session_factory, dispatcher) as uow:
            await uow.categories.add(category)
            with pytest.raises(RuntimeError):
                await uow.save_changes()

        async with SqlAlchemyUnitOfWork(session_factory) as reader:
            assert await reader.categories.exists(category.id) is False

    @pytest.mark.asyncio
    async def test_without_dispatcher_events_are_dropped(self, session_factory):
        async with SqlAlchemyUnitOfWork(session_factory) as uow:
            category = make_category()
            await uow.categories.add(category)
            assert await uow.save_changes() == 1
            assert category.domain_events == []

    @pytest.mark.asyncio
    async def test_untracked_product_keeps_events(self, uow):
        product = make_product(uuid4())
        await uow.save_changes()
        assert product.has_domain_events

"""
Integration тесты для обработчиков команд и запросов.

Запросы отправляются через медиатор, собранный DI контейнером,
с тестовой БД (SQLite in-memory).
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from catalog_api.application.commands import (
    ActivateProductCommand,
    CreateCategoryCommand,
    CreateProductCommand,
    DeactivateProductCommand,
    DeleteCategoryCommand,
    DeleteProductCommand,
    UpdateCategoryCommand,
    UpdateProductCommand,
    UpdateProductStockCommand,
)
from catalog_api.application.common import MessageConstants
from catalog_api.application.queries import (
    GetAllCategoriesQuery,
    GetAllProductsQuery,
    GetCategoryByIdQuery,
    GetProductByIdQuery,
)
from catalog_api.core.di import DIContainer
from catalog_api.core.errors import CategoryHasProductsError
from catalog_api.domain.catalog_context.events import (
    ProductCreated,
    ProductDeactivated,
    ProductStockUpdated,
    ProductUpdated,
)


@pytest.fixture
def container(session_factory):
    """DI контейнер с тестовой БД."""
    return DIContainer(session_factory=session_factory)


@pytest.fixture
def catalog_events(container):
    """События каталога, полученные dispatcher контейнера."""
    events = []

    async def record(event):
        events.append(event)

    container.event_dispatcher.subscribe(handler=record)
    return events


async def send(container, request):
    """Выполнить запрос в отдельном Unit of Work."""
    async with container.create_unit_of_work() as uow:
        return await container.get_mediator(uow).send(request)


async def create_category(container, name="Tools"):
    result = await send(container, CreateCategoryCommand(name=name, description=f"{name} category"))
    assert result.is_success, result.errors
    return result.data


async def create_product(container, category_id, name="Widget", stock=5):
    result = await send(container, CreateProductCommand(
        name=name,
        description="A widget",
        amount=Decimal("9.99"),
        currency="usd",
        stock=stock,
        category_id=category_id
    ))
    assert result.is_success, result.errors
    return result.data


class TestProductCommands:
    """Тесты команд над товарами"""

    @pytest.mark.asyncio
    async def test_create_product(self, container, catalog_events):
        category = await create_category(container)

        product = await create_product(container, category.id)

        assert product.currency == "USD"
        assert product.amount == Decimal("9.99")
        assert product.category_name == "Tools"
        assert product.is_active is True
        assert product.created_at is not None
        assert ProductCreated in [type(e) for e in catalog_events]

    @pytest.mark.asyncio
    async def test_create_product_unknown_category(self, container):
        """Товар без существующей категории не создается"""
        result = await send(container, CreateProductCommand(
            name="Widget",
            description="A widget",
            amount=Decimal("9.99"),
            currency="USD",
            stock=1,
            category_id=uuid4()
        ))

        assert result.is_failure
        assert result.message == MessageConstants.CATEGORY_NOT_FOUND

        listed = await send(container, GetAllProductsQuery())
        assert listed.data == []

    @pytest.mark.asyncio
    async def test_create_product_validation(self, container):
        result = await send(container, CreateProductCommand(
            name="",
            description="A widget",
            amount=Decimal("0"),
            currency="USD",
            stock=1,
            category_id=uuid4()
        ))

        assert result.message == MessageConstants.VALIDATION_FAILED
        assert result.errors == ["Product name is required", "Product price must be greater than 0"]

    @pytest.mark.asyncio
    async def test_update_product(self, container, catalog_events):
        category = await create_category(container)
        product = await create_product(container, category.id)

        result = await send(container, UpdateProductCommand(
            product_id=product.id,
            name="Gadget",
            description="A gadget",
            amount=Decimal("19.50"),
            currency="eur"
        ))

        assert result.is_success
        assert result.message == MessageConstants.PRODUCT_UPDATED
        assert (result.data.name, result.data.amount, result.data.currency) == ("Gadget", Decimal("19.50"), "EUR")
        assert result.data.updated_at is not None
        assert isinstance(catalog_events[-1], ProductUpdated)

    @pytest.mark.asyncio
    async def test_update_missing_product_details(self, container):
        result = await send(container, UpdateProductCommand(
            product_id=uuid4(),
            name="Gadget",
            description="A gadget",
            amount=Decimal("1"),
            currency="USD"
        ))

        assert result.is_failure
        assert result.message == MessageConstants.PRODUCT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_stock_missing_product(self, container):
        result = await send(container, UpdateProductStockCommand(product_id=uuid4(), stock=3))

        assert result.is_failure
        assert result.message == MessageConstants.PRODUCT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_stock(self, container, catalog_events):
        category = await create_category(container)
        product = await create_product(container, category.id, stock=5)

        result = await send(container, UpdateProductStockCommand(product_id=product.id, stock=42))

        assert result.data.stock == 42
        event = catalog_events[-1]
        assert isinstance(event, ProductStockUpdated)
        assert (event.old_stock, event.new_stock) == (5, 42)

    @pytest.mark.asyncio
    async def test_deactivate_and_activate(self, container, catalog_events):
        category = await create_category(container)
        product = await create_product(container, category.id)

        deactivated = await send(container, DeactivateProductCommand(product_id=product.id))
        assert deactivated.data.is_active is False
        assert deactivated.message == MessageConstants.PRODUCT_DEACTIVATED
        assert isinstance(catalog_events[-1], ProductDeactivated)

        active = await send(container, GetAllProductsQuery(is_active=True))
        assert active.data == []

        activated = await send(container, ActivateProductCommand(product_id=product.id))
        assert activated.data.is_active is True

    @pytest.mark.asyncio
    async def test_delete_product(self, container):
        category = await create_category(container)
        product = await create_product(container, category.id)

        result = await send(container, DeleteProductCommand(product_id=product.id))
        assert result.is_success
        assert result.data is None

        found = await send(container, GetProductByIdQuery(product_id=product.id))
        assert found.message == MessageConstants.PRODUCT_NOT_FOUND

        again = await send(container, DeleteProductCommand(product_id=product.id))
        assert again.message == MessageConstants.PRODUCT_NOT_FOUND


class TestProductQueries:
    """Тесты запросов товаров"""

    @pytest.mark.asyncio
    async def test_get_product_by_id(self, container):
        category = await create_category(container)
        product = await create_product(container, category.id)

        result = await send(container, GetProductByIdQuery(product_id=product.id))

        assert result.is_success
        assert result.data.id == product.id
        assert result.data.category_name == "Tools"

    @pytest.mark.asyncio
    async def test_get_all_products_filters(self, container):
        tools = await create_category(container, "Tools")
        garden = await create_category(container, "Garden")
        await create_product(container, tools.id, name="Hammer")
        await create_product(container, garden.id, name="Rake")

        everything = await send(container, GetAllProductsQuery())
        in_garden = await send(container, GetAllProductsQuery(category_id=garden.id))

        assert [(p.name, p.category_name) for p in everything.data] == [
            ("Hammer", "Tools"),
            ("Rake", "Garden"),
        ]
        assert [p.name for p in in_garden.data] == ["Rake"]


class TestCategoryHandlers:
    """Тесты команд и запросов категорий"""

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, container):
        await create_category(container, "Tools")

        result = await send(container, CreateCategoryCommand(name="tools", description="Again"))

        assert result.is_failure
        assert result.message == MessageConstants.CATEGORY_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_update_category(self, container):
        tools = await create_category(container, "Tools")
        await create_category(container, "Garden")

        same_name = await send(container, UpdateCategoryCommand(
            category_id=tools.id, name="TOOLS", description="Renamed case"
        ))
        conflict = await send(container, UpdateCategoryCommand(
            category_id=tools.id, name="Garden", description="Clash"
        ))
        missing = await send(container, UpdateCategoryCommand(
            category_id=uuid4(), name="Other", description="Other"
        ))

        assert same_name.is_success
        assert same_name.data.name == "TOOLS"
        assert conflict.message == MessageConstants.CATEGORY_ALREADY_EXISTS
        assert missing.message == MessageConstants.CATEGORY_NOT_FOUND

    @pytest.mark.asyncio
    async def test_product_counts(self, container):
        tools = await create_category(container, "Tools")
        await create_category(container, "Garden")
        await create_product(container, tools.id, name="Hammer")
        await create_product(container, tools.id, name="Saw")

        single = await send(container, GetCategoryByIdQuery(category_id=tools.id))
        listed = await send(container, GetAllCategoriesQuery())

        assert single.data.product_count == 2
        assert {(c.name, c.product_count) for c in listed.data} == {("Tools", 2), ("Garden", 0)}

    @pytest.mark.asyncio
    async def test_delete_category_with_products(self, container):
        """Категорию с товарами удалить нельзя"""
        tools = await create_category(container)
        await create_product(container, tools.id)

        with pytest.raises(CategoryHasProductsError):
            await send(container, DeleteCategoryCommand(category_id=tools.id))

        still_there = await send(container, GetCategoryByIdQuery(category_id=tools.id))
        assert still_there.is_success

    @pytest.mark.asyncio
    async def test_delete_empty_category(self, container):
        tools = await create_category(container)

        deleted = await send(container, DeleteCategoryCommand(category_id=tools.id))
        missing = await send(container, GetCategoryByIdQuery(category_id=tools.id))

        assert deleted.message == MessageConstants.CATEGORY_DELETED
        assert missing.message == MessageConstants.CATEGORY_NOT_FOUND


class TestTransactionalCommands:
    """Тесты атомарности команд"""

    @pytest.mark.asyncio
    async def test_failed_command_persists_nothing(self, container):
        """Ошибка после записи откатывает всю команду"""
        category = await create_category(container)

        @container.event_dispatcher.subscribe(ProductCreated)
        async def broken(event):
            raise RuntimeError("subscriber failed")

        with pytest.raises(RuntimeError):
            await create_product(container, category.id)

        container.event_dispatcher.unsubscribe(broken)
        listed = await send(container, GetAllProductsQuery())
        assert listed.data == []

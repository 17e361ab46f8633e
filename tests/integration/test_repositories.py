"""
Integration тесты для репозиториев.

Проверяет работу репозиториев с реальной БД (SQLite in-memory).
"""

from uuid import uuid4

import pytest
from sqlalchemy import select

from catalog_api.core.errors import RepositoryError
from catalog_api.domain.catalog_context.entities import Product
from catalog_api.infrastructure.persistence import SqlAlchemyUnitOfWork
from catalog_api.infrastructure.persistence.models import ProductModel
from tests.factories import make_category, make_product


async def seed(session_factory, *entities):
    """Сохранить сущности отдельным Unit of Work."""
    async with SqlAlchemyUnitOfWork(session_factory) as uow:
        for entity in entities:
            repo = uow.products if isinstance(entity, Product) else uow.categories
            await repo.add(entity)
        await uow.save_changes()


class TestProductRepository:
    """Тесты для ProductRepositoryImpl"""

    @pytest.mark.asyncio
    async def test_add_and_get(self, session_factory, uow):
        category = make_category()
        product = make_product(category.id, amount="12.50", currency="usd")
        await seed(session_factory, category, product)

        loaded = await uow.products.get_by_id(product.id)

        assert loaded == product
        assert loaded.price.amount == product.price.amount
        assert loaded.price.currency == "USD"
        assert loaded.created_by == "System"
        assert loaded.created_at is not None
        assert loaded.domain_events == []

    @pytest.mark.asyncio
    async def test_get_missing(self, uow):
        assert await uow.products.get_by_id(uuid4()) is None
        assert await uow.products.exists(uuid4()) is False

    @pytest.mark.asyncio
    async def test_find_filters(self, session_factory, uow):
        """Тест фильтров списка товаров (AND)"""
        tools = make_category("Tools", "Hand tools")
        garden = make_category("Garden", "Garden tools")
        hammer = make_product(tools.id, name="Hammer")
        saw = make_product(tools.id, name="Saw")
        rake = make_product(garden.id, name="Rake")
        saw.deactivate()
        await seed(session_factory, tools, garden, hammer, saw, rake)

        assert [p.name for p in await uow.products.get_all()] == ["Hammer", "Rake", "Saw"]
        assert [p.name for p in await uow.products.get_active()] == ["Hammer", "Rake"]
        assert [p.name for p in await uow.products.get_by_category(tools.id)] == ["Hammer", "Saw"]
        assert [p.name for p in await uow.products.find(is_active=False, category_id=tools.id)] == ["Saw"]
        assert await uow.products.find(is_active=False, category_id=garden.id) == []

    @pytest.mark.asyncio
    async def test_soft_delete_hides_product(self, session_factory, uow):
        """Тест мягкого удаления"""
        category = make_category()
        product = make_product(category.id)
        await seed(session_factory, category, product)

        await uow.products.delete(product)
        await uow.save_changes()

        assert product.is_deleted is True
        assert await uow.products.get_by_id(product.id) is None
        assert await uow.products.exists(product.id) is False
        assert await uow.products.get_all() == []

        row = (await uow.session.execute(
            select(ProductModel).where(ProductModel.id == product.id)
        )).scalar_one()
        assert row.is_deleted is True
        assert row.updated_by == "tester"

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, uow):
        with pytest.raises(RepositoryError):
            await uow.products.update(make_product(uuid4()))

    @pytest.mark.asyncio
    async def test_get_with_category(self, session_factory, uow):
        category = make_category()
        product = make_product(category.id)
        await seed(session_factory, category, product)

        found, found_category = await uow.products.get_with_category(product.id)

        assert found == product
        assert found_category == category
        assert await uow.products.get_with_category(uuid4()) is None

    @pytest.mark.asyncio
    async def test_exists_by_name_is_case_insensitive(self, session_factory, uow):
        category = make_category()
        await seed(session_factory, category, make_product(category.id, name="Widget"))

        assert await uow.products.exists_by_name("wIDGET") is True
        assert await uow.products.exists_by_name("Gadget") is False


class TestCategoryRepository:
    """Тесты для CategoryRepositoryImpl"""

    @pytest.mark.asyncio
    async def test_counts_and_names(self, session_factory, uow):
        tools = make_category("Tools", "Hand tools")
        empty = make_category("Empty", "Nothing here")
        hammer = make_product(tools.id, name="Hammer")
        saw = make_product(tools.id, name="Saw")
        await seed(session_factory, tools, empty, hammer, saw)

        await uow.products.delete(saw)
        await uow.save_changes()

        counts = await uow.categories.count_products([tools.id, empty.id])
        assert counts.get(tools.id) == 1
        assert counts.get(empty.id, 0) == 0

        names = await uow.categories.get_names([tools.id, uuid4()])
        assert names == {tools.id: "Tools"}

        assert await uow.categories.has_products(tools.id) is True
        assert await uow.categories.has_products(empty.id) is False

    @pytest.mark.asyncio
    async def test_get_with_products(self, session_factory, uow):
        tools = make_category()
        hammer = make_product(tools.id, name="Hammer")
        await seed(session_factory, tools, hammer)

        category, products = await uow.categories.get_with_products(tools.id)

        assert category == tools
        assert products == [hammer]
        assert await uow.categories.get_with_products(uuid4()) is None

    @pytest.mark.asyncio
    async def test_exists_by_name(self, session_factory, uow):
        tools = make_category("Tools", "Hand tools")
        await seed(session_factory, tools)

        assert await uow.categories.exists_by_name("tools") is True
        assert await uow.categories.exists_by_name("TOOLS", exclude_id=tools.id) is False

    @pytest.mark.asyncio
    async def test_deleted_name_can_be_reused(self, session_factory, uow):
        """Уникальность названия только среди неудаленных категорий"""
        old = make_category("Tools", "Old tools")
        await seed(session_factory, old)

        await uow.categories.delete(old)
        await uow.save_changes()

        await uow.categories.add(make_category("Tools", "New tools"))
        await uow.save_changes()

        assert [c.description for c in await uow.categories.get_all()] == ["New tools"]

    @pytest.mark.asyncio
    async def test_find_by_activity(self, session_factory, uow):
        active = make_category("Active", "Active category")
        inactive = make_category("Inactive", "Inactive category")
        inactive.deactivate()
        await seed(session_factory, active, inactive)

        assert [c.name for c in await uow.categories.find(is_active=True)] == ["Active"]
        assert [c.name for c in await uow.categories.get_active()] == ["Active"]
        assert [c.name for c in await uow.categories.find(is_active=False)] == ["Inactive"]
        assert len(await uow.categories.find()) == 2

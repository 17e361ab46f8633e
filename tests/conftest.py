"""
Pytest configuration and fixtures.

Все тесты с БД используют SQLite in-memory с одним общим соединением
(StaticPool), поэтому несколько сессий видят одни и те же данные.
"""
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.infrastructure.events import DomainEventDispatcher
from catalog_api.infrastructure.persistence import SqlAlchemyUnitOfWork
from catalog_api.infrastructure.persistence.models import Base
from tests.factories import make_category


@pytest_asyncio.fixture
async def engine():
    """In-memory БД с созданной схемой."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Фабрика сессий тестовой БД."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def dispatcher():
    """Dispatcher без подписчиков."""
    return DomainEventDispatcher()


@pytest.fixture
def recorded_events(dispatcher):
    """Список событий, полученных подписчиком на все события."""
    events = []

    async def record(event):
        events.append(event)

    dispatcher.subscribe(handler=record)
    return events


@pytest_asyncio.fixture
async def uow(session_factory, dispatcher):
    """Открытый Unit of Work тестовой БД."""
    async with SqlAlchemyUnitOfWork(session_factory, dispatcher, actor="tester") as uow:
        yield uow


@pytest_asyncio.fixture
async def saved_category(session_factory):
    """Категория, сохраненная в БД отдельным Unit of Work."""
    async with SqlAlchemyUnitOfWork(session_factory) as setup_uow:
        category = make_category()
        await setup_uow.categories.add(category)
        await setup_uow.save_changes()
    return category

"""
Фикстуры API тестов.
"""
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog_api.core.di import DIContainer, get_container
from catalog_api.main import app


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP клиент приложения с тестовой БД."""
    container = DIContainer(session_factory=session_factory)
    app.dependency_overrides[get_container] = lambda: container

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()

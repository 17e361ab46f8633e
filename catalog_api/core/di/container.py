"""
Центральный DI Container для Catalog API.

Координирует все DI модули и предоставляет единую точку доступа к зависимостям.
"""

import logging
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from .catalog_module import CatalogModule
from .infrastructure_module import InfrastructureModule
from catalog_api.application.pipeline import Mediator
from catalog_api.core.config import Settings, settings as default_settings
from catalog_api.domain.catalog_context.repositories import CatalogUnitOfWork
from catalog_api.infrastructure.persistence import SqlAlchemyUnitOfWork

logger = logging.getLogger("catalog-api.di.container")


class DIContainer:
    """
    Центральный DI Container.

    Пример:
        >>> container = DIContainer()
        >>> async with container.create_unit_of_work() as uow:
        ...     mediator = container.get_mediator(uow)
        ...     result = await mediator.send(GetAllProductsQuery())
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session_factory: Optional[Callable[[], AsyncSession]] = None
    ):
        """
        Инициализация контейнера.

        Args:
            settings: Настройки (по умолчанию глобальные)
            session_factory: Фабрика сессий (по умолчанию из database.py)
        """
        self.settings = settings or default_settings
        self.infrastructure_module = InfrastructureModule(self.settings, session_factory)
        self.catalog_module = CatalogModule()
        logger.info("DIContainer инициализирован")

    def create_unit_of_work(self) -> SqlAlchemyUnitOfWork:
        """Создать Unit of Work для нового запроса."""
        return self.infrastructure_module.provide_unit_of_work()

    def get_mediator(self, uow: CatalogUnitOfWork) -> Mediator:
        """Получить медиатор, привязанный к Unit of Work запроса."""
        return self.catalog_module.provide_mediator(uow)

    @property
    def event_dispatcher(self):
        """Dispatcher domain events (singleton)."""
        return self.infrastructure_module.provide_event_dispatcher()


# Глобальный экземпляр контейнера
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Получить глобальный DI контейнер.

    Returns:
        DIContainer: Singleton контейнер
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Сбросить глобальный контейнер."""
    global _container
    _container = None

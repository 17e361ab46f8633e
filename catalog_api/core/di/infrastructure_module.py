"""
DI Module для Infrastructure Layer.

Предоставляет зависимости для инфраструктурных компонентов.
"""

import logging
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.config import Settings
from catalog_api.infrastructure.events import DomainEventDispatcher
from catalog_api.infrastructure.events.subscribers import AuditLogger
from catalog_api.infrastructure.persistence import SqlAlchemyUnitOfWork, get_session_factory

logger = logging.getLogger("catalog-api.di.infrastructure_module")


class InfrastructureModule:
    """
    DI модуль для Infrastructure Layer.

    Предоставляет:
    - DomainEventDispatcher (singleton, с подписанным AuditLogger)
    - SqlAlchemyUnitOfWork (новый на каждый запрос)
    """

    def __init__(
        self,
        settings: Settings,
        session_factory: Optional[Callable[[], AsyncSession]] = None
    ):
        """
        Инициализация модуля.

        Args:
            settings: Настройки приложения
            session_factory: Фабрика сессий (по умолчанию из database.py)
        """
        self._settings = settings
        self._session_factory = session_factory
        self._dispatcher: Optional[DomainEventDispatcher] = None
        self._audit_logger: Optional[AuditLogger] = None

        logger.debug("InfrastructureModule инициализирован")

    def provide_session_factory(self) -> Callable[[], AsyncSession]:
        """Предоставить фабрику сессий БД."""
        if self._session_factory is None:
            self._session_factory = get_session_factory()
        return self._session_factory

    def provide_event_dispatcher(self) -> DomainEventDispatcher:
        """
        Предоставить dispatcher domain events.

        Returns:
            DomainEventDispatcher: Dispatcher с подписанным AuditLogger
        """
        if self._dispatcher is None:
            self._dispatcher = DomainEventDispatcher()
            self._audit_logger = AuditLogger(self._dispatcher)
            logger.info("DomainEventDispatcher создан")

        return self._dispatcher

    def provide_unit_of_work(self) -> SqlAlchemyUnitOfWork:
        """
        Предоставить новый Unit of Work.

        Returns:
            SqlAlchemyUnitOfWork: UoW (еще не открытый)
        """
        return SqlAlchemyUnitOfWork(
            session_factory=self.provide_session_factory(),
            dispatcher=self.provide_event_dispatcher(),
            actor=self._settings.default_actor,
            slow_transaction_threshold=self._settings.slow_transaction_threshold
        )

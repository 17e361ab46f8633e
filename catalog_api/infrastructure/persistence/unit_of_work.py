"""
Unit of Work Pattern для управления транзакциями каталога.

Предоставляет явное управление границами транзакций, сбор и
упорядоченную отправку domain events после сохранения изменений.
"""

import logging
import time
from typing import Callable, Dict, List, Optional, Tuple

from prometheus_client import Counter, Histogram
from sqlalchemy.ext.asyncio import AsyncSession

from .audit import AuditListener
from .mappers import copy_audit_fields
from .models import AuditMixin
from .repositories import CategoryRepositoryImpl, ProductRepositoryImpl
from ..events import DomainEventDispatcher
from ...core.errors import TransactionError
from ...domain.catalog_context.repositories import CatalogUnitOfWork
from ...domain.shared.base_entity import Entity
from ...domain.shared.domain_event import DomainEvent

logger = logging.getLogger("catalog-api.infrastructure.unit_of_work")

# Prometheus метрики
transaction_duration = Histogram(
    'catalog_transaction_duration_seconds',
    'Duration of catalog transaction commits',
    ['operation']
)

transaction_commits = Counter(
    'catalog_transaction_commits_total',
    'Total number of transaction commits',
    ['operation', 'status']
)


class SqlAlchemyUnitOfWork(CatalogUnitOfWork):
    """
    Unit of Work поверх AsyncSession.

    Классический паттерн UoW (Martin Fowler) - управляет репозиториями
    и гарантирует атомарность транзакций.

    Состояния: idle -> транзакция открыта -> (commit | rollback) -> idle.

    Особенности:
    - Создает сессию БД и репозитории в __aenter__
    - Подключает слушатель аудита к сессии
    - begin_transaction идемпотентен
    - save_changes после flush отправляет события в порядке их записи
    - При выходе из контекста открытая транзакция откатывается,
      сессия закрывается всегда

    Использование:
        >>> async with SqlAlchemyUnitOfWork(session_factory, dispatcher) as uow:
        ...     await uow.begin_transaction()
        ...     await uow.products.add(product)
        ...     await uow.commit_transaction()

    Атрибуты:
        products: Repository для товаров
        categories: Repository для категорий
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        dispatcher: Optional[DomainEventDispatcher] = None,
        actor: str = "System",
        slow_transaction_threshold: float = 0.1
    ):
        """
        Инициализация Unit of Work.

        Args:
            session_factory: Callable для создания AsyncSession
            dispatcher: Получатель domain events (None - события отбрасываются)
            actor: Имя для аудит-полей created_by / updated_by
            slow_transaction_threshold: Порог медленного commit в секундах
        """
        self._session_factory = session_factory
        self._dispatcher = dispatcher
        self._audit = AuditListener(actor=actor)
        self._slow_threshold = slow_transaction_threshold

        self._session: Optional[AsyncSession] = None
        self._transaction_open = False
        # id(entity) -> (entity, model)
        self._tracked: Dict[int, Tuple[Entity, Optional[AuditMixin]]] = {}

        # Репозитории (создаются в __aenter__)
        self.products = None
        self.categories = None

    async def __aenter__(self):
        """
        Вход в контекст - создание сессии БД и репозиториев.

        Returns:
            Self для использования в with statement
        """
        self._session = self._session_factory()
        self._audit.attach(self._session)

        self.products = ProductRepositoryImpl(self._session, self)
        self.categories = CategoryRepositoryImpl(self._session, self)

        logger.debug("UnitOfWork: Session and repositories initialized")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """
        Выход из контекста - rollback открытой транзакции и закрытие сессии.
        """
        if self._session is None:
            return

        try:
            if self._transaction_open:
                logger.warning(
                    "UnitOfWork: Transaction still open on exit, rolling back"
                    + (f" ({exc_type.__name__})" if exc_type else "")
                )
                await self.rollback_transaction()
        finally:
            # Всегда закрываем сессию (UoW владеет ею)
            self._audit.detach()
            await self._session.close()
            self._session = None
            self._tracked.clear()
            self.products = None
            self.categories = None
            logger.debug("UnitOfWork: Session closed")

    @property
    def session(self) -> AsyncSession:
        """
        Получить текущую сессию БД.

        Raises:
            TransactionError: Если UoW не находится в контексте
        """
        if self._session is None:
            raise TransactionError(
                operation="session",
                reason="Unit of work is not in context. Use 'async with uow:'"
            )
        return self._session

    @property
    def has_active_transaction(self) -> bool:
        return self._transaction_open

    def track(self, entity: Entity, model: Optional[AuditMixin] = None) -> None:
        """
        Зарегистрировать измененную сущность.

        Args:
            entity: Агрегат с возможными domain events
            model: Модель БД, из которой после flush копируются аудит-поля
        """
        self._tracked[id(entity)] = (entity, model)

    async def begin_transaction(self) -> None:
        """Открыть транзакцию; если уже открыта - ничего не делать."""
        if self._transaction_open:
            return

        session = self.session
        if not session.in_transaction():
            await session.begin()
        self._transaction_open = True
        logger.debug("UnitOfWork: Transaction started")

    def _drain_events(self) -> List[DomainEvent]:
        events: List[DomainEvent] = []
        for entity, _ in self._tracked.values():
            events.extend(entity.drain_domain_events())
        events.sort(key=lambda e: e.sequence)
        return events

    async def save_changes(self) -> int:
        """
        Сохранить изменения и отправить domain events.

        Порядок: flush -> перенос аудит-полей в сущности -> отправка событий
        всех отслеживаемых агрегатов в порядке записи -> commit (только если
        явная транзакция не открыта). Ошибка подписчика без явной транзакции
        откатывает сессию, и ничего не фиксируется.

        Returns:
            Количество отправленных событий
        """
        session = self.session
        await session.flush()

        for entity, model in self._tracked.values():
            if model is not None:
                copy_audit_fields(model, entity)

        events = self._drain_events()
        self._tracked.clear()

        try:
            if self._dispatcher is not None:
                await self._dispatcher.dispatch_all(events)
        except BaseException:
            if not self._transaction_open:
                logger.warning("UnitOfWork: Event dispatch failed, rolling back implicit commit")
                await session.rollback()
            raise

        if events:
            logger.debug(f"UnitOfWork: Dispatched {len(events)} domain events")

        if not self._transaction_open:
            await session.commit()
        return len(events)

    async def commit_transaction(self, operation: str = "unknown") -> None:
        """
        Сохранить изменения и зафиксировать транзакцию с метриками.

        При любой ошибке выполняется rollback и исключение выбрасывается
        дальше. Транзакция освобождается в любом случае.

        Args:
            operation: Название операции для метрик и логирования

        Raises:
            TransactionError: Если транзакция не открыта
        """
        if not self._transaction_open:
            raise TransactionError(operation="commit", reason="No active transaction")

        start_time = time.time()
        try:
            await self.save_changes()
            await self.session.commit()
        except BaseException as e:
            transaction_commits.labels(operation=operation, status="error").inc()
            logger.error(
                f"UnitOfWork: Commit failed (operation={operation}): {e}",
                exc_info=True
            )
            await self.rollback_transaction()
            raise
        finally:
            self._transaction_open = False

        duration = time.time() - start_time
        transaction_duration.labels(operation=operation).observe(duration)
        transaction_commits.labels(operation=operation, status="success").inc()

        logger.debug(
            f"UnitOfWork: Transaction committed "
            f"(operation={operation}, duration={duration:.3f}s)"
        )

        if duration > self._slow_threshold:
            logger.warning(
                f"SLOW TRANSACTION: {operation} took {duration:.3f}s "
                f"(> {self._slow_threshold * 1000:.0f}ms threshold)"
            )

    async def rollback_transaction(self) -> None:
        """
        Откатить транзакцию. Безопасно вызывать без открытой транзакции.

        Неотправленные события отслеживаемых агрегатов отбрасываются.
        """
        try:
            if self._session is not None and self._session.in_transaction():
                await self._session.rollback()
                logger.debug("UnitOfWork: Transaction rolled back")
        finally:
            self._transaction_open = False
            for entity, _ in self._tracked.values():
                entity.clear_domain_events()
            self._tracked.clear()

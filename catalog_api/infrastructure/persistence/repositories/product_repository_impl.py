"""
Реализация ProductRepository с использованием SQLAlchemy.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ....core.errors import RepositoryError
from ....domain.catalog_context.entities import Category, Product
from ....domain.catalog_context.repositories import ProductRepository
from ..mappers import CategoryMapper, ProductMapper
from ..models import CategoryModel, ProductModel

logger = logging.getLogger("catalog-api.infrastructure.product_repository")


class ProductRepositoryImpl(ProductRepository):
    """
    Реализация репозитория товаров для SQLAlchemy.

    Изменения (add, update, delete) регистрируются в Unit of Work,
    чтобы после flush перенести аудит-поля в сущность и
    отправить ее domain events.

    Атрибуты:
        _db: Сессия БД SQLAlchemy
        _uow: Unit of Work, отслеживающий измененные сущности
        _mapper: Mapper для преобразования данных

    Пример:
        >>> repo = ProductRepositoryImpl(db_session, uow)
        >>> product = await repo.get_by_id(product_id)
    """

    def __init__(self, db: AsyncSession, uow=None):
        """
        Инициализировать репозиторий.

        Args:
            db: Сессия БД SQLAlchemy
            uow: Unit of Work с методом track(entity, model)
        """
        self._db = db
        self._uow = uow
        self._mapper = ProductMapper()
        self._category_mapper = CategoryMapper()

    def _track(self, entity: Product, model: ProductModel) -> None:
        if self._uow is not None:
            self._uow.track(entity, model)

    def _active(self):
        return select(ProductModel).where(ProductModel.is_deleted.is_(False))

    async def _load_model(self, id: UUID, operation: str) -> ProductModel:
        model = await self._db.get(ProductModel, id)
        if model is None or model.is_deleted:
            raise RepositoryError(
                operation=operation,
                entity_type="Product",
                reason=f"Product {id} does not exist"
            )
        return model

    async def get_by_id(self, id: UUID) -> Optional[Product]:
        result = await self._db.execute(self._active().where(ProductModel.id == id))
        model = result.scalar_one_or_none()

        if not model:
            logger.debug(f"Product {id} not found")
            return None

        return self._mapper.to_entity(model)

    async def get_all(self) -> List[Product]:
        return await self.find()

    async def find(
        self,
        is_active: Optional[bool] = None,
        category_id: Optional[UUID] = None
    ) -> List[Product]:
        stmt = self._active()
        if is_active is not None:
            stmt = stmt.where(ProductModel.is_active.is_(is_active))
        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id)

        result = await self._db.execute(stmt.order_by(ProductModel.name))
        products = [self._mapper.to_entity(model) for model in result.scalars().all()]

        logger.debug(
            f"Found {len(products)} products "
            f"(is_active={is_active}, category_id={category_id})"
        )
        return products

    async def get_with_category(
        self,
        id: UUID
    ) -> Optional[Tuple[Product, Optional[Category]]]:
        stmt = (
            select(ProductModel, CategoryModel)
            .outerjoin(
                CategoryModel,
                and_(
                    ProductModel.category_id == CategoryModel.id,
                    CategoryModel.is_deleted.is_(False)
                )
            )
            .where(ProductModel.id == id, ProductModel.is_deleted.is_(False))
        )
        row = (await self._db.execute(stmt)).first()
        if row is None:
            return None

        product_model, category_model = row
        category = self._category_mapper.to_entity(category_model) if category_model else None
        return self._mapper.to_entity(product_model), category

    async def get_by_category(self, category_id: UUID) -> List[Product]:
        return await self.find(category_id=category_id)

    async def get_active(self) -> List[Product]:
        return await self.find(is_active=True)

    async def exists(self, id: UUID) -> bool:
        stmt = select(ProductModel.id).where(
            ProductModel.id == id,
            ProductModel.is_deleted.is_(False)
        )
        return (await self._db.execute(stmt.limit(1))).scalar_one_or_none() is not None

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(ProductModel.id).where(
            func.lower(ProductModel.name) == name.strip().lower(),
            ProductModel.is_deleted.is_(False)
        )
        return (await self._db.execute(stmt.limit(1))).scalar_one_or_none() is not None

    async def add(self, entity: Product) -> Product:
        model = self._mapper.to_model(entity)
        self._db.add(model)
        self._track(entity, model)
        logger.debug(f"Product {entity.id} added")
        return entity

    async def update(self, entity: Product) -> None:
        model = await self._load_model(entity.id, "update")
        self._mapper.update_model(model, entity)
        self._track(entity, model)
        logger.debug(f"Product {entity.id} updated")

    async def delete(self, entity: Product) -> None:
        model = await self._load_model(entity.id, "delete")
        entity.mark_deleted()
        self._mapper.update_model(model, entity)
        self._track(entity, model)
        logger.debug(f"Product {entity.id} soft deleted")

"""
Реализация CategoryRepository с использованием SQLAlchemy.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ....core.errors import RepositoryError
from ....domain.catalog_context.entities import Category, Product
from ....domain.catalog_context.repositories import CategoryRepository
from ..mappers import CategoryMapper, ProductMapper
from ..models import CategoryModel, ProductModel

logger = logging.getLogger("catalog-api.infrastructure.category_repository")


class CategoryRepositoryImpl(CategoryRepository):
    """
    Реализация репозитория категорий для SQLAlchemy.

    Атрибуты:
        _db: Сессия БД SQLAlchemy
        _uow: Unit of Work, отслеживающий измененные сущности
        _mapper: Mapper для преобразования данных
    """

    def __init__(self, db: AsyncSession, uow=None):
        self._db = db
        self._uow = uow
        self._mapper = CategoryMapper()
        self._product_mapper = ProductMapper()

    def _track(self, entity: Category, model: CategoryModel) -> None:
        if self._uow is not None:
            self._uow.track(entity, model)

    def _active(self):
        return select(CategoryModel).where(CategoryModel.is_deleted.is_(False))

    async def _load_model(self, id: UUID, operation: str) -> CategoryModel:
        model = await self._db.get(CategoryModel, id)
        if model is None or model.is_deleted:
            raise RepositoryError(
                operation=operation,
                entity_type="Category",
                reason=f"Category {id} does not exist"
            )
        return model

    async def get_by_id(self, id: UUID) -> Optional[Category]:
        result = await self._db.execute(self._active().where(CategoryModel.id == id))
        model = result.scalar_one_or_none()

        if not model:
            logger.debug(f"Category {id} not found")
            return None

        return self._mapper.to_entity(model)

    async def get_all(self) -> List[Category]:
        return await self.find()

    async def find(self, is_active: Optional[bool] = None) -> List[Category]:
        stmt = self._active()
        if is_active is not None:
            stmt = stmt.where(CategoryModel.is_active.is_(is_active))

        result = await self._db.execute(stmt.order_by(CategoryModel.name))
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def get_active(self) -> List[Category]:
        return await self.find(is_active=True)

    async def get_with_products(
        self,
        id: UUID
    ) -> Optional[Tuple[Category, List[Product]]]:
        category = await self.get_by_id(id)
        if category is None:
            return None

        result = await self._db.execute(
            select(ProductModel)
            .where(ProductModel.category_id == id, ProductModel.is_deleted.is_(False))
            .order_by(ProductModel.name)
        )
        products = [self._product_mapper.to_entity(model) for model in result.scalars().all()]
        return category, products

    async def exists(self, id: UUID) -> bool:
        stmt = select(CategoryModel.id).where(
            CategoryModel.id == id,
            CategoryModel.is_deleted.is_(False)
        )
        return (await self._db.execute(stmt.limit(1))).scalar_one_or_none() is not None

    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        stmt = select(CategoryModel.id).where(
            func.lower(CategoryModel.name) == name.strip().lower(),
            CategoryModel.is_deleted.is_(False)
        )
        if exclude_id is not None:
            stmt = stmt.where(CategoryModel.id != exclude_id)
        return (await self._db.execute(stmt.limit(1))).scalar_one_or_none() is not None

    async def has_products(self, id: UUID) -> bool:
        stmt = select(ProductModel.id).where(
            ProductModel.category_id == id,
            ProductModel.is_deleted.is_(False)
        )
        return (await self._db.execute(stmt.limit(1))).scalar_one_or_none() is not None

    async def count_products(self, ids: Iterable[UUID]) -> Dict[UUID, int]:
        ids = list(ids)
        if not ids:
            return {}

        result = await self._db.execute(
            select(ProductModel.category_id, func.count(ProductModel.id))
            .where(ProductModel.category_id.in_(ids), ProductModel.is_deleted.is_(False))
            .group_by(ProductModel.category_id)
        )
        counts = {category_id: 0 for category_id in ids}
        counts.update({category_id: count for category_id, count in result.all()})
        return counts

    async def get_names(self, ids: Iterable[UUID]) -> Dict[UUID, str]:
        ids = list(ids)
        if not ids:
            return {}

        result = await self._db.execute(
            select(CategoryModel.id, CategoryModel.name)
            .where(CategoryModel.id.in_(ids), CategoryModel.is_deleted.is_(False))
        )
        return {category_id: name for category_id, name in result.all()}

    async def add(self, entity: Category) -> Category:
        model = self._mapper.to_model(entity)
        self._db.add(model)
        self._track(entity, model)
        logger.debug(f"Category {entity.id} added")
        return entity

    async def update(self, entity: Category) -> None:
        model = await self._load_model(entity.id, "update")
        self._mapper.update_model(model, entity)
        self._track(entity, model)
        logger.debug(f"Category {entity.id} updated")

    async def delete(self, entity: Category) -> None:
        model = await self._load_model(entity.id, "delete")
        entity.mark_deleted()
        self._mapper.update_model(model, entity)
        self._track(entity, model)
        logger.debug(f"Category {entity.id} soft deleted")

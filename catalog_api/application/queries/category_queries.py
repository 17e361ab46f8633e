"""
Запросы категорий.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from .base import Query, QueryHandler
from ..common import MessageConstants, Result
from ..dto import CategoryDTO
from ...domain.catalog_context.repositories import CatalogUnitOfWork


class GetCategoryByIdQuery(Query):
    """Запрос категории по ID (с количеством товаров)."""

    category_id: UUID = Field(description="ID категории")


class GetAllCategoriesQuery(Query):
    """Запрос списка категорий с необязательным фильтром по активности."""

    is_active: Optional[bool] = Field(default=None, description="Фильтр по активности")


class GetCategoryByIdHandler(QueryHandler[CategoryDTO]):
    """Обработчик запроса категории по ID."""

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, query: GetCategoryByIdQuery) -> Result[CategoryDTO]:
        found = await self._uow.categories.get_with_products(query.category_id)
        if found is None:
            return Result.failure(MessageConstants.CATEGORY_NOT_FOUND)

        category, products = found
        return Result.success(CategoryDTO.from_entity(category, len(products)))


class GetAllCategoriesHandler(QueryHandler[List[CategoryDTO]]):
    """
    Обработчик запроса списка категорий.

    Количество товаров считается одним сгруппированным запросом.
    """

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, query: GetAllCategoriesQuery) -> Result[List[CategoryDTO]]:
        categories = await self._uow.categories.find(is_active=query.is_active)
        counts = await self._uow.categories.count_products([c.id for c in categories])

        return Result.success([
            CategoryDTO.from_entity(category, counts.get(category.id, 0))
            for category in categories
        ])

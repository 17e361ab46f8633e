"""
Запросы товаров.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from .base import Query, QueryHandler
from ..common import MessageConstants, Result
from ..dto import ProductDTO
from ...domain.catalog_context.repositories import CatalogUnitOfWork


class GetProductByIdQuery(Query):
    """
    Запрос товара по ID.

    Атрибуты:
        product_id: ID товара
    """

    product_id: UUID = Field(description="ID товара")


class GetAllProductsQuery(Query):
    """
    Запрос списка товаров.

    Фильтры необязательны и объединяются через AND.

    Атрибуты:
        is_active: Только активные / только неактивные
        category_id: Только товары категории
    """

    is_active: Optional[bool] = Field(default=None, description="Фильтр по активности")
    category_id: Optional[UUID] = Field(default=None, description="Фильтр по категории")


class GetProductByIdHandler(QueryHandler[ProductDTO]):
    """Обработчик запроса товара по ID."""

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, query: GetProductByIdQuery) -> Result[ProductDTO]:
        found = await self._uow.products.get_with_category(query.product_id)
        if found is None:
            return Result.failure(MessageConstants.PRODUCT_NOT_FOUND)

        product, category = found
        return Result.success(
            ProductDTO.from_entity(product, category.name if category else "")
        )


class GetAllProductsHandler(QueryHandler[List[ProductDTO]]):
    """
    Обработчик запроса списка товаров.

    Названия категорий получаются одним запросом (id -> name),
    а не отдельным запросом на каждый товар.
    """

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, query: GetAllProductsQuery) -> Result[List[ProductDTO]]:
        products = await self._uow.products.find(
            is_active=query.is_active,
            category_id=query.category_id
        )

        names = await self._uow.categories.get_names(
            {product.category_id for product in products}
        )

        return Result.success([
            ProductDTO.from_entity(product, names.get(product.category_id, ""))
            for product in products
        ])

"""
Общая часть обработчиков команд над товарами.
"""

from typing import Generic, TypeVar

from .base import CommandHandler
from ..dto import ProductDTO
from ...domain.catalog_context.entities import Product
from ...domain.catalog_context.repositories import CatalogUnitOfWork


TResult = TypeVar('TResult')


class ProductCommandHandler(CommandHandler[TResult], Generic[TResult]):
    """
    Базовый обработчик команд над товарами.

    Атрибуты:
        _uow: Unit of Work каталога
    """

    def __init__(self, uow: CatalogUnitOfWork):
        """
        Инициализация обработчика.

        Args:
            uow: Unit of Work каталога
        """
        self._uow = uow

    async def _to_dto(self, product: Product) -> ProductDTO:
        """Преобразовать товар в DTO с названием категории."""
        names = await self._uow.categories.get_names([product.category_id])
        return ProductDTO.from_entity(product, names.get(product.category_id, ""))

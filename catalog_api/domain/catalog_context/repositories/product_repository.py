"""
Product Repository Interface.

Порт хранилища товаров.
"""

from abc import abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from ...shared.repository import Repository
from ..entities import Category, Product


class ProductRepository(Repository[Product, UUID]):
    """
    Репозиторий товаров.

    Все методы чтения исключают мягко удаленные записи.
    """

    @abstractmethod
    async def get_with_category(
        self,
        id: UUID
    ) -> Optional[Tuple[Product, Optional[Category]]]:
        """
        Получить товар вместе с его категорией одним запросом.

        Returns:
            Пара (товар, категория) или None, если товар не найден
        """
        pass

    @abstractmethod
    async def get_by_category(self, category_id: UUID) -> List[Product]:
        """Получить товары категории."""
        pass

    @abstractmethod
    async def get_active(self) -> List[Product]:
        """Получить активные товары."""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Проверить наличие товара с названием (без учета регистра)."""
        pass

    @abstractmethod
    async def find(
        self,
        is_active: Optional[bool] = None,
        category_id: Optional[UUID] = None
    ) -> List[Product]:
        """
        Получить товары по фильтрам.

        Фильтры необязательны и объединяются через AND.

        Args:
            is_active: Флаг активности
            category_id: ID категории
        """
        pass

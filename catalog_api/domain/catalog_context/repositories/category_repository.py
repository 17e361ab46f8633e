"""
Category Repository Interface.

Порт хранилища категорий.
"""

from abc import abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from ...shared.repository import Repository
from ..entities import Category, Product


class CategoryRepository(Repository[Category, UUID]):
    """
    Репозиторий категорий.

    Все методы чтения исключают мягко удаленные записи.
    """

    @abstractmethod
    async def get_active(self) -> List[Category]:
        """Получить активные категории."""
        pass

    @abstractmethod
    async def find(self, is_active: Optional[bool] = None) -> List[Category]:
        """Получить категории, опционально отфильтрованные по активности."""
        pass

    @abstractmethod
    async def get_with_products(
        self,
        id: UUID
    ) -> Optional[Tuple[Category, List[Product]]]:
        """
        Получить категорию вместе с неудаленными товарами.

        Returns:
            Пара (категория, товары) или None, если категория не найдена
        """
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        """
        Проверить наличие категории с названием (без учета регистра).

        Args:
            name: Название
            exclude_id: ID категории, которую нужно исключить из проверки
        """
        pass

    @abstractmethod
    async def has_products(self, id: UUID) -> bool:
        """Проверить, есть ли в категории неудаленные товары."""
        pass

    @abstractmethod
    async def count_products(self, ids: Iterable[UUID]) -> Dict[UUID, int]:
        """
        Посчитать неудаленные товары для набора категорий одним запросом.

        Returns:
            Словарь id -> количество (категории без товаров имеют 0)
        """
        pass

    @abstractmethod
    async def get_names(self, ids: Iterable[UUID]) -> Dict[UUID, str]:
        """
        Получить названия категорий одним запросом.

        Returns:
            Словарь id -> название
        """
        pass

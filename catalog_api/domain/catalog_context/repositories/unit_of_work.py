"""
Catalog Unit of Work Interface.
"""

from ...shared.repository import UnitOfWork
from .category_repository import CategoryRepository
from .product_repository import ProductRepository


class CatalogUnitOfWork(UnitOfWork):
    """
    Unit of Work каталога.

    Предоставляет репозитории, привязанные к одной сессии хранилища.

    Атрибуты:
        products: Репозиторий товаров
        categories: Репозиторий категорий
    """

    products: ProductRepository
    categories: CategoryRepository

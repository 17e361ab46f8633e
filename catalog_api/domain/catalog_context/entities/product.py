"""
Product Entity.

Aggregate root каталога: товар с ценой, остатком и категорией.
"""

from uuid import UUID

from pydantic import Field

from ...shared.base_entity import Entity
from ..value_objects import Money
from ..events import (
    ProductCreated,
    ProductUpdated,
    ProductStockUpdated,
    ProductActivated,
    ProductDeactivated,
)
from catalog_api.core.errors import InvalidStockError


class Product(Entity):
    """
    Product Entity.

    Состояние изменяется только через именованные методы, каждый из
    которых записывает соответствующее domain event.

    Атрибуты:
        name: Название товара
        description: Описание товара
        price: Цена (Money)
        stock: Остаток на складе
        is_active: Флаг активности
        category_id: ID категории

    Пример:
        >>> product = Product.create(
        ...     name="Widget",
        ...     description="A widget",
        ...     price=Money(Decimal("9.99"), "USD"),
        ...     stock=5,
        ...     category_id=category.id
        ... )
        >>> product.update_stock(3)
    """

    name: str = Field(..., min_length=1, max_length=200, description="Название товара")
    description: str = Field(..., min_length=1, max_length=1000, description="Описание товара")
    price: Money = Field(..., description="Цена")
    stock: int = Field(0, ge=0, description="Остаток на складе")
    is_active: bool = Field(True, description="Флаг активности")
    category_id: UUID = Field(..., description="ID категории")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: Money,
        stock: int,
        category_id: UUID
    ) -> "Product":
        """
        Создать новый товар.

        Args:
            name: Название
            description: Описание
            price: Цена
            stock: Начальный остаток
            category_id: ID категории

        Returns:
            Новый активный товар с ProductCreated event

        Raises:
            InvalidStockError: Если остаток отрицательный
        """
        if stock < 0:
            raise InvalidStockError(product_id="new", stock=stock)

        product = cls(
            name=name,
            description=description,
            price=price,
            stock=stock,
            is_active=True,
            category_id=category_id
        )
        product.add_domain_event(ProductCreated(product.id))
        return product

    def update_details(self, name: str, description: str, price: Money) -> None:
        """
        Изменить название, описание и цену.

        Args:
            name: Новое название
            description: Новое описание
            price: Новая цена
        """
        self.name = name
        self.description = description
        self.price = price
        self.add_domain_event(ProductUpdated(self.id))

    def update_stock(self, new_stock: int) -> None:
        """
        Изменить остаток.

        Args:
            new_stock: Новый остаток

        Raises:
            InvalidStockError: Если остаток отрицательный
        """
        if new_stock < 0:
            raise InvalidStockError(product_id=str(self.id), stock=new_stock)

        old_stock = self.stock
        self.stock = new_stock
        self.add_domain_event(ProductStockUpdated(self.id, old_stock, new_stock))

    def activate(self) -> None:
        """Активировать товар."""
        self.is_active = True
        self.add_domain_event(ProductActivated(self.id))

    def deactivate(self) -> None:
        """Деактивировать товар."""
        self.is_active = False
        self.add_domain_event(ProductDeactivated(self.id))

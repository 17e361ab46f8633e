"""
Фабрики тестовых сущностей.
"""
from decimal import Decimal

from catalog_api.domain.catalog_context.entities import Category, Product
from catalog_api.domain.catalog_context.value_objects import Money


def make_category(name: str = "Tools", description: str = "Hand tools") -> Category:
    return Category.create(name=name, description=description)


def make_product(
    category_id,
    name: str = "Widget",
    amount: str = "9.99",
    currency: str = "USD",
    stock: int = 5
) -> Product:
    return Product.create(
        name=name,
        description=f"{name} description",
        price=Money(Decimal(amount), currency),
        stock=stock,
        category_id=category_id
    )

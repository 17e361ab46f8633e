"""
Команда создания товара.
"""

import logging
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from .base import Command
from .product_handler import ProductCommandHandler
from ..common import MessageConstants, Result
from ..dto import ProductDTO
from ...domain.catalog_context.entities import Product
from ...domain.catalog_context.value_objects import Money

logger = logging.getLogger("catalog-api.commands.create_product")


class CreateProductCommand(Command):
    """
    Команда создания товара.

    Атрибуты:
        name: Название
        description: Описание
        amount: Цена
        currency: Код валюты
        stock: Начальный остаток
        category_id: ID существующей категории

    Пример:
        >>> command = CreateProductCommand(
        ...     name="Widget",
        ...     description="A widget",
        ...     amount=Decimal("9.99"),
        ...     currency="usd",
        ...     stock=5,
        ...     category_id=category.id
        ... )
    """

    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")
    amount: Decimal = Field(default=Decimal("0"), description="Цена")
    currency: str = Field(default="", description="Код валюты")
    stock: int = Field(default=0, description="Начальный остаток")
    category_id: UUID = Field(description="ID категории")


class CreateProductHandler(ProductCommandHandler[ProductDTO]):
    """
    Обработчик команды создания товара.

    Категория должна существовать, иначе возвращается
    неуспешный Result и ничего не сохраняется.
    """

    async def handle(self, command: CreateProductCommand) -> Result[ProductDTO]:
        """
        Обработать команду создания товара.

        Args:
            command: Команда создания товара

        Returns:
            Result с DTO созданного товара
        """
        category = await self._uow.categories.get_by_id(command.category_id)
        if category is None:
            logger.info(f"Category {command.category_id} not found, product not created")
            return Result.failure(MessageConstants.CATEGORY_NOT_FOUND)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=Money(command.amount, command.currency),
            stock=command.stock,
            category_id=category.id
        )

        await self._uow.products.add(product)
        await self._uow.save_changes()

        logger.info(f"Product {product.id} created in category {category.id}")
        return Result.success(
            ProductDTO.from_entity(product, category.name),
            MessageConstants.PRODUCT_CREATED
        )

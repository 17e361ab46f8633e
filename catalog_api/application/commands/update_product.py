"""
Команда изменения товара.
"""

from decimal import Decimal
from uuid import UUID

from pydantic import Field

from .base import Command
from .product_handler import ProductCommandHandler
from ..common import MessageConstants, Result
from ..dto import ProductDTO
from ...domain.catalog_context.value_objects import Money


class UpdateProductCommand(Command):
    """
    Команда изменения названия, описания и цены товара.

    Атрибуты:
        product_id: ID товара
        name: Новое название
        description: Новое описание
        amount: Новая цена
        currency: Код валюты
    """

    product_id: UUID = Field(description="ID товара")
    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")
    amount: Decimal = Field(default=Decimal("0"), description="Цена")
    currency: str = Field(default="", description="Код валюты")


class UpdateProductHandler(ProductCommandHandler[ProductDTO]):
    """
    Обработчик команды изменения товара.

    Для несуществующего товара возвращает неуспешный Result
    без записи в хранилище.
    """

    async def handle(self, command: UpdateProductCommand) -> Result[ProductDTO]:
        product = await self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(MessageConstants.PRODUCT_NOT_FOUND)

        product.update_details(
            name=command.name,
            description=command.description,
            price=Money(command.amount, command.currency)
        )

        await self._uow.products.update(product)
        await self._uow.save_changes()

        return Result.success(await self._to_dto(product), MessageConstants.PRODUCT_UPDATED)

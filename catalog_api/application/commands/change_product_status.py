"""
Команды активации и деактивации товара.
"""

from uuid import UUID

from pydantic import Field

from .base import Command
from .product_handler import ProductCommandHandler
from ..common import MessageConstants, Result
from ..dto import ProductDTO


class ActivateProductCommand(Command):
    """Команда активации товара."""

    product_id: UUID = Field(description="ID товара")


class DeactivateProductCommand(Command):
    """Команда деактивации товара."""

    product_id: UUID = Field(description="ID товара")


class ActivateProductHandler(ProductCommandHandler[ProductDTO]):
    """Обработчик команды активации товара."""

    async def handle(self, command: ActivateProductCommand) -> Result[ProductDTO]:
        product = await self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(MessageConstants.PRODUCT_NOT_FOUND)

        product.activate()
        await self._uow.products.update(product)
        await self._uow.save_changes()

        return Result.success(await self._to_dto(product), MessageConstants.PRODUCT_ACTIVATED)


class DeactivateProductHandler(ProductCommandHandler[ProductDTO]):
    """Обработчик команды деактивации товара."""

    async def handle(self, command: DeactivateProductCommand) -> Result[ProductDTO]:
        product = await self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(MessageConstants.PRODUCT_NOT_FOUND)

        product.deactivate()
        await self._uow.products.update(product)
        await self._uow.save_changes()

        return Result.success(await self._to_dto(product), MessageConstants.PRODUCT_DEACTIVATED)

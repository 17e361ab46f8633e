"""
Команда удаления товара.

Удаление мягкое: товар помечается флагом is_deleted.
"""

import logging
from uuid import UUID

from pydantic import Field

from .base import Command
from .product_handler import ProductCommandHandler
from ..common import MessageConstants, Result

logger = logging.getLogger("catalog-api.commands.delete_product")


class DeleteProductCommand(Command):
    """Команда удаления товара."""

    product_id: UUID = Field(description="ID товара")


class DeleteProductHandler(ProductCommandHandler[None]):
    """Обработчик команды удаления товара."""

    async def handle(self, command: DeleteProductCommand) -> Result[None]:
        product = await self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(MessageConstants.PRODUCT_NOT_FOUND)

        await self._uow.products.delete(product)
        await self._uow.save_changes()

        logger.info(f"Product {product.id} deleted")
        return Result.success(None, MessageConstants.PRODUCT_DELETED)

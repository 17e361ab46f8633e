"""
Команда изменения остатка товара.
"""

from uuid import UUID

from pydantic import Field

from .base import Command
from .product_handler import ProductCommandHandler
from ..common import MessageConstants, Result
from ..dto import ProductDTO


class UpdateProductStockCommand(Command):
    """
    Команда изменения остатка товара.

    Атрибуты:
        product_id: ID товара
        stock: Новый остаток (не отрицательный)
    """

    product_id: UUID = Field(description="ID товара")
    stock: int = Field(default=0, description="Новый остаток")


class UpdateProductStockHandler(ProductCommandHandler[ProductDTO]):
    """Обработчик команды изменения остатка."""

    async def handle(self, command: UpdateProductStockCommand) -> Result[ProductDTO]:
        product = await self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(MessageConstants.PRODUCT_NOT_FOUND)

        # InvalidStockError при отрицательном остатке
        product.update_stock(command.stock)

        await self._uow.products.update(product)
        await self._uow.save_changes()

        return Result.success(
            await self._to_dto(product),
            MessageConstants.PRODUCT_STOCK_UPDATED
        )

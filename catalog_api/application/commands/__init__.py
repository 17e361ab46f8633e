"""
Команды (Commands) для изменения состояния каталога.

Команды выполняются через медиатор в транзакции.
"""

from .base import Command, CommandHandler
from .create_product import CreateProductCommand, CreateProductHandler
from .update_product import UpdateProductCommand, UpdateProductHandler
from .update_product_stock import UpdateProductStockCommand, UpdateProductStockHandler
from .change_product_status import (
    ActivateProductCommand,
    ActivateProductHandler,
    DeactivateProductCommand,
    DeactivateProductHandler,
)
from .delete_product import DeleteProductCommand, DeleteProductHandler
from .category_commands import (
    CreateCategoryCommand,
    CreateCategoryHandler,
    UpdateCategoryCommand,
    UpdateCategoryHandler,
    DeleteCategoryCommand,
    DeleteCategoryHandler,
)

__all__ = [
    # Base
    "Command",
    "CommandHandler",
    # Products
    "CreateProductCommand",
    "CreateProductHandler",
    "UpdateProductCommand",
    "UpdateProductHandler",
    "UpdateProductStockCommand",
    "UpdateProductStockHandler",
    "ActivateProductCommand",
    "ActivateProductHandler",
    "DeactivateProductCommand",
    "DeactivateProductHandler",
    "DeleteProductCommand",
    "DeleteProductHandler",
    # Categories
    "CreateCategoryCommand",
    "CreateCategoryHandler",
    "UpdateCategoryCommand",
    "UpdateCategoryHandler",
    "DeleteCategoryCommand",
    "DeleteCategoryHandler",
]

"""
Команды над категориями.

Создание, изменение и удаление категорий. Название категории
уникально среди неудаленных категорий без учета регистра.
"""

import logging
from uuid import UUID

from pydantic import Field

from .base import Command, CommandHandler
from ..common import MessageConstants, Result
from ..dto import CategoryDTO
from ...core.errors import CategoryHasProductsError
from ...domain.catalog_context.entities import Category
from ...domain.catalog_context.repositories import CatalogUnitOfWork

logger = logging.getLogger("catalog-api.commands.category")


class CreateCategoryCommand(Command):
    """
    Команда создания категории.

    Атрибуты:
        name: Название (уникальное)
        description: Описание
    """

    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")


class UpdateCategoryCommand(Command):
    """
    Команда изменения категории.

    Атрибуты:
        category_id: ID категории
        name: Новое название
        description: Новое описание
    """

    category_id: UUID = Field(description="ID категории")
    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")


class DeleteCategoryCommand(Command):
    """Команда удаления категории."""

    category_id: UUID = Field(description="ID категории")


class CreateCategoryHandler(CommandHandler[CategoryDTO]):
    """Обработчик команды создания категории."""

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, command: CreateCategoryCommand) -> Result[CategoryDTO]:
        if await self._uow.categories.exists_by_name(command.name):
            return Result.failure(MessageConstants.CATEGORY_ALREADY_EXISTS)

        category = Category.create(name=command.name, description=command.description)

        await self._uow.categories.add(category)
        await self._uow.save_changes()

        logger.info(f"Category {category.id} created")
        return Result.success(
            CategoryDTO.from_entity(category, product_count=0),
            MessageConstants.CATEGORY_CREATED
        )


class UpdateCategoryHandler(CommandHandler[CategoryDTO]):
    """Обработчик команды изменения категории."""

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, command: UpdateCategoryCommand) -> Result[CategoryDTO]:
        category = await self._uow.categories.get_by_id(command.category_id)
        if category is None:
            return Result.failure(MessageConstants.CATEGORY_NOT_FOUND)

        if await self._uow.categories.exists_by_name(command.name, exclude_id=category.id):
            return Result.failure(MessageConstants.CATEGORY_ALREADY_EXISTS)

        category.update_details(name=command.name, description=command.description)

        await self._uow.categories.update(category)
        await self._uow.save_changes()

        counts = await self._uow.categories.count_products([category.id])
        return Result.success(
            CategoryDTO.from_entity(category, counts.get(category.id, 0)),
            MessageConstants.CATEGORY_UPDATED
        )


class DeleteCategoryHandler(CommandHandler[None]):
    """
    Обработчик команды удаления категории.

    Категорию с неудаленными товарами удалить нельзя:
    выбрасывается CategoryHasProductsError.
    """

    def __init__(self, uow: CatalogUnitOfWork):
        self._uow = uow

    async def handle(self, command: DeleteCategoryCommand) -> Result[None]:
        category = await self._uow.categories.get_by_id(command.category_id)
        if category is None:
            return Result.failure(MessageConstants.CATEGORY_NOT_FOUND)

        if await self._uow.categories.has_products(category.id):
            raise CategoryHasProductsError(category_id=str(category.id))

        await self._uow.categories.delete(category)
        await self._uow.save_changes()

        logger.info(f"Category {category.id} deleted")
        return Result.success(None, MessageConstants.CATEGORY_DELETED)

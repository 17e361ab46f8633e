"""
DI Module для Catalog Context.

Собирает медиатор: behaviors, валидаторы и обработчики.
"""

import logging

from catalog_api.application.commands import (
    ActivateProductCommand,
    ActivateProductHandler,
    CreateCategoryCommand,
    CreateCategoryHandler,
    CreateProductCommand,
    CreateProductHandler,
    DeactivateProductCommand,
    DeactivateProductHandler,
    DeleteCategoryCommand,
    DeleteCategoryHandler,
    DeleteProductCommand,
    DeleteProductHandler,
    UpdateCategoryCommand,
    UpdateCategoryHandler,
    UpdateProductCommand,
    UpdateProductHandler,
    UpdateProductStockCommand,
    UpdateProductStockHandler,
)
from catalog_api.application.pipeline import Mediator, TransactionBehavior, ValidationBehavior
from catalog_api.application.queries import (
    GetAllCategoriesHandler,
    GetAllCategoriesQuery,
    GetAllProductsHandler,
    GetAllProductsQuery,
    GetCategoryByIdHandler,
    GetCategoryByIdQuery,
    GetProductByIdHandler,
    GetProductByIdQuery,
)
from catalog_api.application.validation import (
    CreateCategoryValidator,
    CreateProductValidator,
    UpdateCategoryValidator,
    UpdateProductStockValidator,
    UpdateProductValidator,
)
from catalog_api.domain.catalog_context.repositories import CatalogUnitOfWork

logger = logging.getLogger("catalog-api.di.catalog_module")


# Тип запроса -> класс обработчика
HANDLERS = {
    CreateProductCommand: CreateProductHandler,
    UpdateProductCommand: UpdateProductHandler,
    UpdateProductStockCommand: UpdateProductStockHandler,
    ActivateProductCommand: ActivateProductHandler,
    DeactivateProductCommand: DeactivateProductHandler,
    DeleteProductCommand: DeleteProductHandler,
    GetProductByIdQuery: GetProductByIdHandler,
    GetAllProductsQuery: GetAllProductsHandler,
    CreateCategoryCommand: CreateCategoryHandler,
    UpdateCategoryCommand: UpdateCategoryHandler,
    DeleteCategoryCommand: DeleteCategoryHandler,
    GetCategoryByIdQuery: GetCategoryByIdHandler,
    GetAllCategoriesQuery: GetAllCategoriesHandler,
}


class CatalogModule:
    """
    DI модуль для Catalog Context.

    Валидаторы не имеют состояния и создаются один раз;
    обработчики и TransactionBehavior привязаны к Unit of Work запроса.
    """

    def __init__(self):
        """Инициализация модуля."""
        self._validation = ValidationBehavior()
        self._validation.register(CreateProductCommand, CreateProductValidator())
        self._validation.register(UpdateProductCommand, UpdateProductValidator())
        self._validation.register(UpdateProductStockCommand, UpdateProductStockValidator())
        self._validation.register(CreateCategoryCommand, CreateCategoryValidator())
        self._validation.register(UpdateCategoryCommand, UpdateCategoryValidator())

        logger.debug("CatalogModule инициализирован")

    def provide_mediator(self, uow: CatalogUnitOfWork) -> Mediator:
        """
        Предоставить медиатор для запроса.

        Порядок behaviors: валидация -> транзакция -> обработчик.

        Args:
            uow: Открытый Unit of Work запроса

        Returns:
            Mediator: Медиатор с зарегистрированными обработчиками
        """
        mediator = Mediator([self._validation, TransactionBehavior(uow)])
        for request_type, handler_class in HANDLERS.items():
            mediator.register_handler(request_type, handler_class(uow))
        return mediator

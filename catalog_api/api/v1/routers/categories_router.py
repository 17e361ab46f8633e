"""
Categories роутер.

Предоставляет endpoints для работы с категориями.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from ..responses import send_request
from ..schemas import CreateCategoryRequest, UpdateCategoryRequest
from ....application.commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from ....application.common import MessageConstants
from ....application.pipeline import Mediator
from ....application.queries import GetAllCategoriesQuery, GetCategoryByIdQuery
from ....core.dependencies import get_mediator

logger = logging.getLogger("catalog-api.api.categories")

router = APIRouter(prefix="/api/categories", tags=["categories"])

NOT_FOUND = MessageConstants.CATEGORY_NOT_FOUND


@router.get("")
async def get_categories(
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Получить список категорий с количеством товаров."""
    return await send_request(mediator, GetAllCategoriesQuery(is_active=is_active))


@router.get("/{category_id}")
async def get_category(
    category_id: UUID,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Получить категорию по ID."""
    return await send_request(
        mediator,
        GetCategoryByIdQuery(category_id=category_id),
        not_found=NOT_FOUND
    )


@router.post("")
async def create_category(
    request: CreateCategoryRequest,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """
    Создать категорию.

    Returns:
        201 с CategoryDTO и заголовком Location, 400 при ошибке валидации
        или если категория с таким названием уже есть
    """
    command = CreateCategoryCommand(name=request.name, description=request.description)
    return await send_request(
        mediator,
        command,
        success_status=status.HTTP_201_CREATED,
        location=lambda result: f"/api/categories/{result.data.id}"
    )


@router.put("/{category_id}")
async def update_category(
    category_id: UUID,
    request: UpdateCategoryRequest,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Изменить категорию."""
    command = UpdateCategoryCommand(
        category_id=category_id,
        name=request.name,
        description=request.description
    )
    return await send_request(mediator, command, not_found=NOT_FOUND)


@router.delete("/{category_id}")
async def delete_category(
    category_id: UUID,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """
    Удалить категорию (мягкое удаление).

    Returns:
        200 при успехе, 404 если категория не найдена,
        409 если в категории есть товары
    """
    return await send_request(
        mediator,
        DeleteCategoryCommand(category_id=category_id),
        not_found=NOT_FOUND
    )

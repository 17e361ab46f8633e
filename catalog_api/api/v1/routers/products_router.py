"""
Products роутер.

Предоставляет endpoints для работы с товарами.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from ..responses import send_request
from ..schemas import CreateProductRequest, UpdateProductRequest, UpdateProductStockRequest
from ....application.commands import (
    ActivateProductCommand,
    CreateProductCommand,
    DeactivateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
    UpdateProductStockCommand,
)
from ....application.common import MessageConstants
from ....application.pipeline import Mediator
from ....application.queries import GetAllProductsQuery, GetProductByIdQuery
from ....core.dependencies import get_mediator

logger = logging.getLogger("catalog-api.api.products")

router = APIRouter(prefix="/api/products", tags=["products"])

NOT_FOUND = MessageConstants.PRODUCT_NOT_FOUND


@router.get("")
async def get_products(
    category_id: Optional[UUID] = Query(default=None, alias="categoryId"),
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """
    Получить список товаров.

    Фильтры необязательны и объединяются через AND.

    Пример запроса:
        GET /api/products?categoryId=...&isActive=true
    """
    query = GetAllProductsQuery(is_active=is_active, category_id=category_id)
    return await send_request(mediator, query)


@router.get("/{product_id}")
async def get_product(
    product_id: UUID,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """
    Получить товар по ID.

    Returns:
        200 с ProductDTO или 404, если товар не найден
    """
    return await send_request(
        mediator,
        GetProductByIdQuery(product_id=product_id),
        not_found=NOT_FOUND
    )


@router.post("")
async def create_product(
    request: CreateProductRequest,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """
    Создать товар.

    Пример запроса:
        POST /api/products
        {
            "name": "Widget",
            "description": "A widget",
            "amount": 9.99,
            "currency": "usd",
            "stock": 5,
            "categoryId": "..."
        }

    Returns:
        201 с ProductDTO и заголовком Location, 400 при ошибке валидации
        или отсутствии категории
    """
    command = CreateProductCommand(
        name=request.name,
        description=request.description,
        amount=request.amount,
        currency=request.currency,
        stock=request.stock,
        category_id=request.category_id
    )
    return await send_request(
        mediator,
        command,
        success_status=status.HTTP_201_CREATED,
        location=lambda result: f"/api/products/{result.data.id}"
    )


@router.put("/{product_id}")
async def update_product(
    product_id: UUID,
    request: UpdateProductRequest,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """
    Изменить название, описание и цену товара.

    Returns:
        200 с ProductDTO, 404 если товар не найден, 400 при ошибке валидации
    """
    command = UpdateProductCommand(
        product_id=product_id,
        name=request.name,
        description=request.description,
        amount=request.amount,
        currency=request.currency
    )
    return await send_request(mediator, command, not_found=NOT_FOUND)


@router.patch("/{product_id}/stock")
async def update_product_stock(
    product_id: UUID,
    request: UpdateProductStockRequest,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Изменить остаток товара."""
    command = UpdateProductStockCommand(product_id=product_id, stock=request.stock)
    return await send_request(mediator, command, not_found=NOT_FOUND)


@router.post("/{product_id}/activate")
async def activate_product(
    product_id: UUID,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Активировать товар."""
    return await send_request(
        mediator,
        ActivateProductCommand(product_id=product_id),
        not_found=NOT_FOUND
    )


@router.post("/{product_id}/deactivate")
async def deactivate_product(
    product_id: UUID,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Деактивировать товар."""
    return await send_request(
        mediator,
        DeactivateProductCommand(product_id=product_id),
        not_found=NOT_FOUND
    )


@router.delete("/{product_id}")
async def delete_product(
    product_id: UUID,
    mediator: Mediator = Depends(get_mediator)
) -> JSONResponse:
    """Удалить товар (мягкое удаление)."""
    return await send_request(
        mediator,
        DeleteProductCommand(product_id=product_id),
        not_found=NOT_FOUND
    )

"""
API schemas v1.
"""
from .category_schemas import CreateCategoryRequest, UpdateCategoryRequest
from .health_schemas import HealthResponse
from .product_schemas import (
    CamelModel,
    CreateProductRequest,
    UpdateProductRequest,
    UpdateProductStockRequest,
)

__all__ = [
    "CamelModel",
    "CreateProductRequest",
    "UpdateProductRequest",
    "UpdateProductStockRequest",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "HealthResponse",
]

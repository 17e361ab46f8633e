"""
API routers v1.
"""
from .categories_router import router as categories_router
from .health_router import router as health_router
from .products_router import router as products_router

__all__ = [
    "categories_router",
    "health_router",
    "products_router",
]

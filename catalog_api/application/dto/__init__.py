"""
Data Transfer Objects.

DTO для передачи данных между слоями приложения.
"""

from .product_dto import ProductDTO
from .category_dto import CategoryDTO

__all__ = [
    "ProductDTO",
    "CategoryDTO",
]

"""
Схемы запросов для endpoints категорий.
"""
from pydantic import Field

from .product_schemas import CamelModel


class CreateCategoryRequest(CamelModel):
    """Запрос на создание категории"""
    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")


class UpdateCategoryRequest(CamelModel):
    """Запрос на изменение категории"""
    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")

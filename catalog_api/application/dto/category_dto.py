"""
Data Transfer Objects для категорий.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain.catalog_context.entities import Category


class CategoryDTO(BaseModel):
    """
    DTO категории.

    Атрибуты:
        id: ID категории
        name: Название
        description: Описание
        is_active: Флаг активности
        product_count: Количество неудаленных товаров
        created_at: Время создания
        updated_at: Время последнего изменения
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID = Field(description="ID категории")
    name: str = Field(description="Название")
    description: str = Field(description="Описание")
    is_active: bool = Field(description="Флаг активности")
    product_count: int = Field(default=0, description="Количество товаров")
    created_at: Optional[datetime] = Field(default=None, description="Время создания")
    updated_at: Optional[datetime] = Field(default=None, description="Время последнего изменения")

    @classmethod
    def from_entity(cls, category: Category, product_count: int = 0) -> "CategoryDTO":
        """Создать DTO из доменной сущности."""
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            product_count=product_count,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

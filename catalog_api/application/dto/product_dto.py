"""
Data Transfer Objects для товаров.

DTO изолируют внутреннюю структуру доменных сущностей
от внешнего API и других слоев.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from ...domain.catalog_context.entities import Product


class ProductDTO(BaseModel):
    """
    DTO товара.

    Атрибуты:
        id: ID товара
        name: Название
        description: Описание
        amount: Цена
        currency: Код валюты
        stock: Остаток
        is_active: Флаг активности
        category_id: ID категории
        category_name: Название категории
        created_at: Время создания
        updated_at: Время последнего изменения

    Пример:
        >>> dto = ProductDTO.from_entity(product, category_name="Tools")
        >>> dto.model_dump(by_alias=True)["categoryName"]
        'Tools'
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID = Field(description="ID товара")
    name: str = Field(description="Название")
    description: str = Field(description="Описание")
    amount: Decimal = Field(description="Цена")
    currency: str = Field(description="Код валюты")
    stock: int = Field(description="Остаток")
    is_active: bool = Field(description="Флаг активности")
    category_id: UUID = Field(description="ID категории")
    category_name: str = Field(default="", description="Название категории")
    created_at: Optional[datetime] = Field(default=None, description="Время создания")
    updated_at: Optional[datetime] = Field(default=None, description="Время последнего изменения")

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> float:
        return float(amount)

    @classmethod
    def from_entity(cls, product: Product, category_name: str = "") -> "ProductDTO":
        """
        Создать DTO из доменной сущности.

        Args:
            product: Товар
            category_name: Название категории товара

        Returns:
            DTO товара
        """
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            amount=product.price.amount,
            currency=product.price.currency,
            stock=product.stock,
            is_active=product.is_active,
            category_id=product.category_id,
            category_name=category_name,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

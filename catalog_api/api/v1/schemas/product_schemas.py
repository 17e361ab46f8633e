"""
Схемы запросов для endpoints товаров.

Поля принимаются в camelCase (и в snake_case).
Отсутствующие поля получают пустые значения и отклоняются валидаторами
с понятными сообщениями.
"""
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ....application.validation.base import NIL_UUID


class CamelModel(BaseModel):
    """Базовая схема с camelCase алиасами"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateProductRequest(CamelModel):
    """Запрос на создание товара"""
    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")
    amount: Decimal = Field(default=Decimal("0"), description="Цена")
    currency: str = Field(default="", description="Код валюты (3 символа)")
    stock: int = Field(default=0, description="Начальный остаток")
    category_id: UUID = Field(default=NIL_UUID, description="ID категории")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Widget",
                    "description": "A widget",
                    "amount": 9.99,
                    "currency": "USD",
                    "stock": 5,
                    "categoryId": "3fa85f64-5717-4562-b3fc-2c963f66afa6"
                }
            ]
        }
    )


class UpdateProductRequest(CamelModel):
    """Запрос на изменение товара"""
    name: str = Field(default="", description="Название")
    description: str = Field(default="", description="Описание")
    amount: Decimal = Field(default=Decimal("0"), description="Цена")
    currency: str = Field(default="", description="Код валюты (3 символа)")


class UpdateProductStockRequest(CamelModel):
    """Запрос на изменение остатка"""
    stock: int = Field(default=0, description="Новый остаток")

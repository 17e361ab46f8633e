"""
Mapper для преобразования между Product Entity и ProductModel.

Изолирует доменный слой от деталей персистентности.
"""

from ....domain.catalog_context.entities import Product
from ....domain.catalog_context.value_objects import Money
from ..models import ProductModel
from .audit_fields import copy_audit_fields


class ProductMapper:
    """
    Mapper между доменной сущностью Product и моделью БД ProductModel.

    Пример:
        >>> mapper = ProductMapper()
        >>> model = mapper.to_model(product)
        >>> entity = mapper.to_entity(model)
    """

    def to_entity(self, model: ProductModel) -> Product:
        """
        Преобразовать модель БД в доменную сущность.

        Args:
            model: Модель БД ProductModel

        Returns:
            Доменная сущность Product (без событий)
        """
        product = Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=Money(model.price, model.currency),
            stock=model.stock,
            is_active=model.is_active,
            category_id=model.category_id,
            is_deleted=model.is_deleted,
        )
        copy_audit_fields(model, product)
        return product

    def to_model(self, entity: Product) -> ProductModel:
        """
        Преобразовать доменную сущность в новую модель БД.

        Аудит-поля не переносятся: их заполняет слушатель before_flush.
        """
        model = ProductModel(id=entity.id)
        self.update_model(model, entity)
        return model

    def update_model(self, model: ProductModel, entity: Product) -> None:
        """Перенести изменяемые поля сущности в существующую модель."""
        model.name = entity.name
        model.description = entity.description
        model.price = entity.price.amount
        model.currency = entity.price.currency
        model.stock = entity.stock
        model.is_active = entity.is_active
        model.category_id = entity.category_id
        model.is_deleted = entity.is_deleted

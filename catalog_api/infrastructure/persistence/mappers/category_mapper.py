"""
Mapper для преобразования между Category Entity и CategoryModel.
"""

from ....domain.catalog_context.entities import Category
from ..models import CategoryModel
from .audit_fields import copy_audit_fields


class CategoryMapper:
    """Mapper между доменной сущностью Category и моделью БД CategoryModel."""

    def to_entity(self, model: CategoryModel) -> Category:
        category = Category(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            is_deleted=model.is_deleted,
        )
        copy_audit_fields(model, category)
        return category

    def to_model(self, entity: Category) -> CategoryModel:
        model = CategoryModel(id=entity.id)
        self.update_model(model, entity)
        return model

    def update_model(self, model: CategoryModel, entity: Category) -> None:
        model.name = entity.name
        model.description = entity.description
        model.is_active = entity.is_active
        model.is_deleted = entity.is_deleted

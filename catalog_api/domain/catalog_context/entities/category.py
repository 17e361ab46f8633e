"""
Category Entity.

Aggregate root каталога: категория товаров.
"""

from pydantic import Field

from ...shared.base_entity import Entity
from ..events import (
    CategoryCreated,
    CategoryUpdated,
    CategoryActivated,
    CategoryDeactivated,
)


class Category(Entity):
    """
    Category Entity.

    Название уникально среди неудаленных категорий; уникальность
    обеспечивается хранилищем и проверяется обработчиками команд.

    Атрибуты:
        name: Название категории
        description: Описание категории
        is_active: Флаг активности

    Пример:
        >>> category = Category.create(name="Tools", description="Hand tools")
        >>> category.deactivate()
    """

    name: str = Field(..., min_length=1, max_length=200, description="Название категории")
    description: str = Field(..., min_length=1, max_length=1000, description="Описание категории")
    is_active: bool = Field(True, description="Флаг активности")

    @classmethod
    def create(cls, name: str, description: str) -> "Category":
        """
        Создать новую категорию.

        Returns:
            Новая активная категория с CategoryCreated event
        """
        category = cls(name=name, description=description, is_active=True)
        category.add_domain_event(CategoryCreated(category.id))
        return category

    def update_details(self, name: str, description: str) -> None:
        """Изменить название и описание."""
        self.name = name
        self.description = description
        self.add_domain_event(CategoryUpdated(self.id))

    def activate(self) -> None:
        """Активировать категорию."""
        self.is_active = True
        self.add_domain_event(CategoryActivated(self.id))

    def deactivate(self) -> None:
        """Деактивировать категорию."""
        self.is_active = False
        self.add_domain_event(CategoryDeactivated(self.id))

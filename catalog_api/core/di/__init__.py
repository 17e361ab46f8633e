"""
Dependency Injection модули для Catalog API.

Модульная организация DI:
- CatalogModule - медиатор, валидаторы и обработчики
- InfrastructureModule - Unit of Work и dispatcher событий
- DIContainer - центральный контейнер

Пример использования:
    >>> from catalog_api.core.di import get_container
    >>> container = get_container()
    >>> async with container.create_unit_of_work() as uow:
    ...     mediator = container.get_mediator(uow)
"""

from .container import DIContainer, get_container, reset_container
from .catalog_module import CatalogModule
from .infrastructure_module import InfrastructureModule

__all__ = [
    "DIContainer",
    "get_container",
    "reset_container",
    "CatalogModule",
    "InfrastructureModule",
]

"""
FastAPI dependency injection providers.

Each request gets its own unit of work (and database session) and a
mediator bound to it.
"""
from typing import AsyncGenerator

from fastapi import Depends

from catalog_api.application.pipeline import Mediator
from catalog_api.core.di import DIContainer, get_container
from catalog_api.infrastructure.persistence import SqlAlchemyUnitOfWork


async def get_unit_of_work(
    container: DIContainer = Depends(get_container),
) -> AsyncGenerator[SqlAlchemyUnitOfWork, None]:
    """
    Open a unit of work for the request and close it afterwards.

    Yields:
        SqlAlchemyUnitOfWork: Request-scoped unit of work
    """
    async with container.create_unit_of_work() as uow:
        yield uow


def get_mediator(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
    container: DIContainer = Depends(get_container),
) -> Mediator:
    """Create a mediator bound to the request's unit of work"""
    return container.get_mediator(uow)

"""
Persistence layer: SQLAlchemy models, repositories and unit of work.
"""
from .database import (
    init_database,
    init_db,
    close_db,
    get_session_factory,
)
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "init_database",
    "init_db",
    "close_db",
    "get_session_factory",
    "SqlAlchemyUnitOfWork",
]

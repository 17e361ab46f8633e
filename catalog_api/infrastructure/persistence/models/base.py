"""
Base declarative class for SQLAlchemy models.

All models should inherit from this Base.
"""
import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# Single Base instance for all models
Base = declarative_base()


class AuditMixin:
    """
    Audit and soft-delete columns shared by catalog tables.

    Audit values are written by the before_flush listener in
    ``infrastructure.persistence.audit``, never by repositories.
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

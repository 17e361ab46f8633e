"""
SQLAlchemy model for categories.
"""
from sqlalchemy import Boolean, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AuditMixin, Base


class CategoryModel(AuditMixin, Base):
    """SQLAlchemy model for product categories"""
    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    # Relationships
    products = relationship("ProductModel", back_populates="category", lazy="raise_on_sql")

    __table_args__ = (
        # Name is unique among non-deleted categories only
        Index(
            "ix_categories_name_not_deleted",
            "name",
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
    )

    def __repr__(self) -> str:
        return f"CategoryModel(id={self.id}, name={self.name!r})"

"""
Category Model

Represents a book category in the database.

Every book belongs to exactly one category. A category that still has
books cannot be deleted (see the category router).
"""

from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils import generate_id, utc_now

if TYPE_CHECKING:
    from app.models.book import Book


class Category(Base):
    """
    Category model.

    Table: categories

    Relationships:
    - books: One-to-Many relationship with Book

    Example:
        category = Category(title="Classic Literature")
    """

    __tablename__ = "categories"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Opaque string id generated in Python, exposed to clients as `_id`
    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_id,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(200),
        index=True,
        nullable=False,
        comment="Category title (e.g., 'Fiction', 'Poetry')"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Python-side defaults keep microsecond precision, so ordering by
    # created_at follows insertion order even on SQLite.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    books: Mapped[List["Book"]] = relationship(
        "Book",
        back_populates="category",
    )

    def __repr__(self) -> str:
        return f"Category(id='{self.id}', title='{self.title}')"

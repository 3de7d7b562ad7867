"""
Book Model

The central model of the BookStore API.

Each book references exactly one Category through a foreign key.
The relationship is loaded eagerly (joined) because every book
response embeds its category object.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils import generate_id, utc_now

if TYPE_CHECKING:
    from app.models.category import Category


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - title: Book title (required)
    - author: Author name (required)
    - description: Book summary (required)
    - price: Non-negative price
    - pages: Positive page count
    - category_id: Foreign key to categories.id

    Relationships:
    - category: Many-to-One (a category holds many books)

    Example:
        book = Book(
            title="The Great Gatsby",
            author="F. Scott Fitzgerald",
            description="A novel of the Jazz Age.",
            price=10.99,
            pages=180,
            category_id=category.id,
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_id,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author display name"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Book description or summary"
    )

    # Float keeps JSON output numeric (10 stays 10.0, never "10.00")
    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Price, zero or positive"
    )

    pages: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    # RESTRICT only binds where the backend enforces foreign keys (SQLite does
    # not by default); delete_category checks for books itself and answers 409
    category_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
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
    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="books",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"Book(id='{self.id}', title='{self.title}')"

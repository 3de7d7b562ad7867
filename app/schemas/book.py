"""
Book Pydantic Schemas

Handles:
- Required text fields (title, author, description)
- Price and page count validation
- The category reference: an id on write, an embedded object on read
"""

from datetime import datetime

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from app.schemas.category import CategoryResponse
from app.utils import is_valid_id


def _strip_required_text(v: str, field_name: str) -> str:
    if not v.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v.strip()


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Non-empty title, author and description
    - Price (zero or positive)
    - Page count (positive)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["The Great Gatsby", "1984"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["F. Scott Fitzgerald"],
    )

    description: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Book description or summary",
        examples=["A novel set in the Jazz Age on Long Island."],
    )

    price: float = Field(
        ...,
        ge=0,  # ge = greater than or equal (free books allowed)
        le=99999,
        description="Book price",
        examples=[10, 12.99],
    )

    pages: int = Field(
        ...,
        gt=0,  # gt = greater than
        le=50000,
        description="Number of pages",
        examples=[180, 328],
    )

    @field_validator("title", "author", "description")
    @classmethod
    def text_must_not_be_empty(cls, v: str, info: ValidationInfo) -> str:
        """Validate and normalize required text fields."""
        return _strip_required_text(v, info.field_name.capitalize())


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "description": "A novel of the Jazz Age.",
        "price": 10,
        "pages": 180,
        "category": "6571b0c4e1f2a3b4c5d6e7f8"
    }
    """

    category: str = Field(
        ...,
        description="Id of an existing category",
        examples=["6571b0c4e1f2a3b4c5d6e7f8"],
    )

    @field_validator("category")
    @classmethod
    def category_must_be_id(cls, v: str) -> str:
        """Reject values that cannot be a category id."""
        if not is_valid_id(v):
            raise ValueError("Category must be a 24-character hex id")
        return v


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional: fields left out of the request body keep
    their stored value. Sending an explicit null is rejected because
    every book field is required in storage.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=500,
        description="Book title",
    )

    author: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author name",
    )

    description: str | None = Field(
        default=None,
        min_length=1,
        max_length=5000,
        description="Book description",
    )

    price: float | None = Field(
        default=None,
        ge=0,
        le=99999,
        description="Book price",
    )

    pages: int | None = Field(
        default=None,
        gt=0,
        le=50000,
        description="Number of pages",
    )

    category: str | None = Field(
        default=None,
        description="Id of an existing category",
    )

    @field_validator("title", "author", "description", "price", "pages", "category")
    @classmethod
    def value_must_not_be_null(cls, v, info: ValidationInfo):
        """Explicit nulls would erase required data."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        if isinstance(v, str):
            v = _strip_required_text(v, info.field_name.capitalize())
        if info.field_name == "category" and not is_valid_id(v):
            raise ValueError("Category must be a 24-character hex id")
        return v


class BookResponse(BookBase):
    """
    Schema for book responses.

    The category is embedded as a full object, so clients can read
    `book.category._id` without a second request.
    """

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
        description="Opaque unique identifier",
    )

    category: CategoryResponse = Field(
        ...,
        description="The book's category",
    )

    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="When the book was created",
    )
    updated_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
        description="When the book was last updated",
    )

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "6571b0c4e1f2a3b4c5d6e7f9",
                "title": "The Great Gatsby",
                "author": "F. Scott Fitzgerald",
                "description": "A novel of the Jazz Age.",
                "price": 10.99,
                "pages": 180,
                "category": {
                    "_id": "6571b0c4e1f2a3b4c5d6e7f8",
                    "title": "Classic Literature",
                    "createdAt": "2024-01-15T10:30:00Z",
                    "updatedAt": "2024-01-15T10:30:00Z",
                },
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )

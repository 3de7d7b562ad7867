"""
Category Pydantic Schemas

Schemas for category-related API operations.

Responses expose the primary key as `_id` (and timestamps in camelCase),
matching the wire format clients of the bookstore API rely on.
Pydantic treats leading-underscore attribute names as private, so the
field is called `id` and only serialized as `_id`.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CategoryBase(BaseModel):
    """Base schema with shared category fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Category title",
        examples=["Classic Literature", "Science Fiction"],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize category title."""
        if not v.strip():
            raise ValueError("Category title cannot be empty or whitespace")
        return v.strip()


class CategoryCreate(CategoryBase):
    """Schema for creating a new category."""
    pass


class CategoryUpdate(CategoryBase):
    """
    Schema for updating a category.

    Title is the only mutable field, so it stays required.
    """
    pass


class CategoryResponse(CategoryBase):
    """Schema for category responses."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
        description="Opaque unique identifier",
    )
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="When the category was created",
    )
    updated_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
        description="When the category was last updated",
    )

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "6571b0c4e1f2a3b4c5d6e7f8",
                "title": "Classic Literature",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )

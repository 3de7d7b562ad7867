"""
Categories Router

CRUD endpoints for book categories.

Contract notes:
- Every success answers 200, including create and delete.
- GET /category/{id} for an unknown or deleted id answers 200 with a
  JSON null body instead of 404.
- A category that still has books cannot be deleted (409).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy import func, select

from app.config import get_settings
from app.dependencies import ActiveUser, DbSession
from app.models import Book, Category
from app.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from app.services.rate_limiter import limiter

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/category",
    tags=["Categories"],
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Category not found (write operations only)"},
    },
)


def get_category_or_404(db: DbSession, category_id: str) -> Category:
    """Get a category by ID or raise 404."""
    category = db.get(Category, category_id)

    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with id {category_id} not found",
        )
    return category


@router.get(
    "",
    response_model=List[CategoryResponse],
    summary="List all categories",
    description="Get every category, oldest first.",
)
@limiter.limit(settings.rate_limit_default)
def list_categories(request: Request, db: DbSession) -> List[CategoryResponse]:
    """List all categories."""
    stmt = select(Category).order_by(Category.created_at)
    categories = db.execute(stmt).scalars().all()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get(
    "/{category_id}",
    response_model=Optional[CategoryResponse],
    summary="Get a category by ID",
    description="Retrieve a single category. Unknown ids return `null`.",
)
@limiter.limit(settings.rate_limit_default)
def get_category(
    request: Request,
    category_id: str,
    db: DbSession,
) -> Optional[CategoryResponse]:
    """Get a single category by ID, or null when it does not exist."""
    category = db.get(Category, category_id)
    if category is None:
        return None
    return CategoryResponse.model_validate(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a new category",
    description="Create a new category. Requires a bearer token.",
)
@limiter.limit(settings.rate_limit_write)
def create_category(
    request: Request,
    category_data: CategoryCreate,
    db: DbSession,
    current_user: ActiveUser,
) -> CategoryResponse:
    """Create a new category."""
    category = Category(title=category_data.title)

    db.add(category)
    db.commit()
    db.refresh(category)

    logger.info(f"Category {category.id} created by {current_user.email}")

    return CategoryResponse.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update a category",
    description="Replace the title of an existing category. Requires a bearer token.",
)
@limiter.limit(settings.rate_limit_write)
def update_category(
    request: Request,
    category_id: str,
    category_data: CategoryUpdate,
    db: DbSession,
    current_user: ActiveUser,
) -> CategoryResponse:
    """Update an existing category."""
    category = get_category_or_404(db, category_id)

    update_data = category_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(category, field, value)

    db.commit()
    db.refresh(category)

    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Delete a category",
    description=(
        "Permanently delete a category and return it. "
        "Fails with 409 while books still belong to it. Requires a bearer token."
    ),
    responses={409: {"description": "Category still has books"}},
)
@limiter.limit(settings.rate_limit_write)
def delete_category(
    request: Request,
    category_id: str,
    db: DbSession,
    current_user: ActiveUser,
) -> CategoryResponse:
    """Delete a category that no book references."""
    category = get_category_or_404(db, category_id)

    book_count = db.execute(
        select(func.count(Book.id)).where(Book.category_id == category_id)
    ).scalar() or 0
    if book_count:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Category with id {category_id} still has {book_count} book(s)",
        )

    # Serialize before deleting: the instance is expired after commit
    deleted = CategoryResponse.model_validate(category)

    db.delete(category)
    db.commit()

    logger.info(f"Category {category_id} deleted by {current_user.email}")

    return deleted

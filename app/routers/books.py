"""
Books Router

Complete CRUD endpoints for books.

Contract notes:
- Every success answers 200, including create and delete.
- Books are returned with their category embedded as an object.
- PUT is a partial update: fields missing from the body are kept.
- GET /book/{id} for an unknown or deleted id answers 200 with null.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy import select

from app.config import get_settings
from app.dependencies import ActiveUser, DbSession
from app.models import Book, Category
from app.schemas import BookCreate, BookResponse, BookUpdate
from app.services.rate_limiter import limiter

logger = logging.getLogger(__name__)
settings = get_settings()

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/book",
    tags=["Books"],
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Book not found (write operations only)"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(db: DbSession, book_id: str) -> Book:
    """
    Get a book by ID or raise 404.

    Used by write operations only; reads return null instead.
    """
    book = db.get(Book, book_id)

    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )
    return book


def get_category_or_400(db: DbSession, category_id: str) -> Category:
    """
    Resolve the category a book points to.

    A missing category is a problem with the request body, not with the
    URL, hence 400 rather than 404.
    """
    category = db.get(Category, category_id)

    if category is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Category with id {category_id} not found",
        )
    return category


# =============================================================================
# Read Endpoints
# =============================================================================
@router.get(
    "",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book with its category embedded, oldest first.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, db: DbSession) -> List[BookResponse]:
    """List all books."""
    stmt = select(Book).order_by(Book.created_at)
    books = db.execute(stmt).scalars().all()
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=Optional[BookResponse],
    summary="Get a book by ID",
    description="Retrieve a single book. Unknown ids return `null`.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: str,
    db: DbSession,
) -> Optional[BookResponse]:
    """Get a single book by ID, or null when it does not exist."""
    book = db.get(Book, book_id)
    if book is None:
        return None
    return BookResponse.model_validate(book)


# =============================================================================
# Write Endpoints
# =============================================================================
@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a new book",
    description="Create a book in an existing category. Requires a bearer token.",
    responses={400: {"description": "Category does not exist"}},
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    db: DbSession,
    current_user: ActiveUser,
) -> BookResponse:
    """
    Create a new book.

    Raises:
        HTTPException: 400 if the category id does not exist
    """
    category = get_category_or_400(db, book_data.category)

    book = Book(
        title=book_data.title,
        author=book_data.author,
        description=book_data.description,
        price=book_data.price,
        pages=book_data.pages,
        category=category,
    )

    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Book {book.id} created by {current_user.email}")

    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description=(
        "Update some or all fields of a book. Omitted fields are unchanged. "
        "Requires a bearer token."
    ),
    responses={400: {"description": "Category does not exist"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: str,
    book_data: BookUpdate,
    db: DbSession,
    current_user: ActiveUser,
) -> BookResponse:
    """
    Partially update a book.

    model_dump(exclude_unset=True) only contains the fields the client
    actually sent, which is what makes the update partial.
    """
    book = get_book_or_404(db, book_id)

    update_data = book_data.model_dump(exclude_unset=True)

    category_id = update_data.pop("category", None)
    if category_id is not None:
        book.category = get_category_or_400(db, category_id)

    for field, value in update_data.items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)

    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    response_model=BookResponse,
    summary="Delete a book",
    description="Permanently delete a book and return it. Requires a bearer token.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: str,
    db: DbSession,
    current_user: ActiveUser,
) -> BookResponse:
    """Delete a book."""
    book = get_book_or_404(db, book_id)

    # Serialize before deleting: the instance is expired after commit
    deleted = BookResponse.model_validate(book)

    db.delete(book)
    db.commit()

    logger.info(f"Book {book_id} deleted by {current_user.email}")

    return deleted

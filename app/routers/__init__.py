"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- categories.py: /category/* endpoints
- books.py: /book/* endpoints
- users.py: /user/* endpoints (login, registration, current user)

Each router is imported and registered in main.py.
"""

from app.routers.books import router as books_router
from app.routers.categories import router as categories_router
from app.routers.users import router as users_router

__all__ = [
    "books_router",
    "categories_router",
    "users_router",
]

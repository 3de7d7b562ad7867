"""
SQLAlchemy Models Package

This package contains all database models for the BookStore API.

Model Relationships:
- Category <-> Book: One-to-Many (a category holds many books,
                     a book belongs to exactly one category)
- User: Standalone, used for authentication only

Import all models here to:
1. Make them available as: from app.models import Book, Category, User
2. Ensure Base.metadata knows every table before create_all()
"""

# The order matters for SQLAlchemy to resolve relationships
from app.models.category import Category
from app.models.book import Book
from app.models.user import User

__all__ = [
    "Category",
    "Book",
    "User",
]

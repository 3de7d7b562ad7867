"""
Demo Data Service

Populates an empty database with a login account, a handful of
categories and books, so a fresh server already satisfies the
read-side expectations of the contract harness (non-empty lists,
"The Great Gatsby" by F. Scott Fitzgerald, a usable demo login).

Seeding is idempotent: it does nothing when the demo user exists.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models import Book, Category, User
from app.services.security import hash_password

logger = logging.getLogger(__name__)

DEMO_EMAIL = "john.doe@example.com"
DEMO_PASSWORD = "password123"

CATEGORIES = [
    "Classic Literature",
    "Science Fiction",
    "Mystery",
    "Fantasy",
]

BOOKS = [
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "description": "A portrait of the Jazz Age and the mysterious millionaire Jay Gatsby.",
        "price": 10.99,
        "pages": 180,
        "category": "Classic Literature",
    },
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "description": "A story of racial injustice seen through the eyes of young Scout Finch.",
        "price": 12.99,
        "pages": 281,
        "category": "Classic Literature",
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "description": "A dystopian novel set in a totalitarian society under constant surveillance.",
        "price": 12.99,
        "pages": 328,
        "category": "Science Fiction",
    },
    {
        "title": "Foundation",
        "author": "Isaac Asimov",
        "description": "The first novel in the Foundation series about the fall of the Galactic Empire.",
        "price": 15.99,
        "pages": 244,
        "category": "Science Fiction",
    },
    {
        "title": "Murder on the Orient Express",
        "author": "Agatha Christie",
        "description": "Hercule Poirot investigates a murder on a train stuck in a snowdrift.",
        "price": 14.99,
        "pages": 256,
        "category": "Mystery",
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "description": "Bilbo Baggins embarks on a quest to reclaim the Lonely Mountain.",
        "price": 14.99,
        "pages": 310,
        "category": "Fantasy",
    },
]


@dataclass
class SeedSummary:
    users: int = 0
    categories: int = 0
    books: int = 0

    @property
    def created_anything(self) -> bool:
        return bool(self.users or self.categories or self.books)


def clear_data(db: Session) -> None:
    """Delete every book, category and user."""
    db.execute(delete(Book))
    db.execute(delete(Category))
    db.execute(delete(User))
    db.commit()
    logger.info("Cleared existing data")


def seed_demo_data(db: Session) -> SeedSummary:
    """
    Insert the demo user, categories and books.

    Args:
        db: Database session

    Returns:
        Counts of created rows (all zero when already seeded)
    """
    summary = SeedSummary()

    existing = db.execute(
        select(User).where(User.email == DEMO_EMAIL)
    ).scalar_one_or_none()
    if existing is not None:
        logger.info("Demo data already present, skipping seed")
        return summary

    db.add(
        User(
            email=DEMO_EMAIL,
            hashed_password=hash_password(DEMO_PASSWORD),
            full_name="John Doe",
        )
    )
    summary.users = 1

    categories = {}
    for title in CATEGORIES:
        category = Category(title=title)
        db.add(category)
        categories[title] = category
    summary.categories = len(categories)

    # Flush so the categories get their ids before books reference them
    db.flush()

    for data in BOOKS:
        fields = dict(data)
        category = categories[fields.pop("category")]
        db.add(Book(category_id=category.id, **fields))
        summary.books += 1

    db.commit()

    logger.info(
        f"Seeded demo data: {summary.users} user, "
        f"{summary.categories} categories, {summary.books} books"
    )
    return summary

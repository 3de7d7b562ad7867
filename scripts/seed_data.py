#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with the demo account, categories and books.

USAGE:
    # From the project root with the venv activated
    python scripts/seed_data.py            # seed an empty database
    python scripts/seed_data.py --clear    # wipe everything first

This script:
1. Connects to the database using app settings
2. Creates missing tables
3. Optionally clears existing data
4. Inserts the demo data (skipped if the demo user already exists)
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import get_settings
from app.database import SessionLocal, create_tables
from app.services.seed import DEMO_EMAIL, DEMO_PASSWORD, clear_data, seed_demo_data


def seed_database(clear_existing: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        summary = seed_demo_data(db)

        print("=" * 60)
        if summary.created_anything:
            print("Database seeding completed successfully!")
        else:
            print("Demo data already present, nothing to do.")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Users: {summary.users}")
        print(f"  - Categories: {summary.categories}")
        print(f"  - Books: {summary.books}")
        print(f"\nLogin: {DEMO_EMAIL} / {DEMO_PASSWORD}")
        print(f"API at http://localhost:{settings.port}")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the BookStore database")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete all users, categories and books before seeding",
    )
    args = parser.parse_args()
    seed_database(clear_existing=args.clear)

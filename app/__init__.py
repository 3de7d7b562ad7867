"""
BookStore API Application Package

The REST server the contract harness (see the top-level harness package)
checks: categories, books with an embedded category, and bearer-token login.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Security, rate limiting and demo data seeding
- utils/: Id and timestamp helpers
"""

__version__ = "0.1.0"

"""
pytest Fixtures for BookStore API Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES USED HERE:
- session: the SQLite engine (created once)
- function: database session, HTTP client, sample data, harness context
  (fresh for every test, so tests never share state)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Book, Category, User
from app.services.security import hash_password
from app.services.seed import DEMO_EMAIL, DEMO_PASSWORD, seed_demo_data
from harness import ApiContext, HarnessSettings, create_context

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create the account the tests log in with."""
    user = User(
        email="testuser@example.com",
        hashed_password=hash_password("SecurePass123"),
        full_name="Test User",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_token(client: TestClient, sample_user: User) -> str:
    """Log in as sample_user and return the bearer token."""
    response = client.post(
        "/user/login",
        json={"email": "testuser@example.com", "password": "SecurePass123"},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def sample_category(db_session: Session) -> Category:
    """Create a sample category for testing."""
    category = Category(title="Classic Literature")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def second_category(db_session: Session) -> Category:
    category = Category(title="Science Fiction")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_book(db_session: Session, sample_category: Category) -> Book:
    """Create a sample book in sample_category."""
    book = Book(
        title="The Great Gatsby",
        author="F. Scott Fitzgerald",
        description="A portrait of the Jazz Age.",
        price=10.99,
        pages=180,
        category=sample_category,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def demo_data(db_session: Session):
    """Seed the demo user, categories and books."""
    return seed_demo_data(db_session)


# =============================================================================
# HARNESS FIXTURES
# =============================================================================
@pytest.fixture
def harness_settings() -> HarnessSettings:
    """Harness settings pointing at the in-process app and the demo account."""
    return HarnessSettings(
        base_url="http://testserver",
        email=DEMO_EMAIL,
        password=DEMO_PASSWORD,
    )


@pytest.fixture
def api_context(client: TestClient, demo_data, harness_settings: HarnessSettings) -> ApiContext:
    """
    A fresh authenticated ApiContext for each test.

    The TestClient is an httpx.Client, so the harness talks to the app
    without a network. The client fixture closes it after the test.
    """
    return create_context(http=client, settings=harness_settings)

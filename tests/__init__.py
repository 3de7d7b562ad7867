"""
Test Suite for the BookStore API and its contract harness

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data, ApiContext)
- test_categories.py: Tests for /category endpoints
- test_books.py: Tests for /book endpoints
- test_user_auth.py: Tests for /user login, registration and tokens
- test_seed.py: Tests for the demo data seed
- test_config.py: Tests for settings validation
- test_harness_client.py: Harness client against a mocked transport
- test_contract.py: Harness scenarios against the in-process app
- integration/: Harness scenarios against a live server (pytest -m integration)

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Against a running server
    BOOKSTORE_BASE_URL=http://localhost:3030 pytest -m integration
"""

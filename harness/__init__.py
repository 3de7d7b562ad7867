"""
BookStore Contract Harness

Client-side verification of the bookstore REST contract. It logs in,
sends HTTP requests to a running server (or to the in-process app via
FastAPI's TestClient) and checks status codes and JSON shapes.

Package Structure:
- config.py: Harness settings (base URL, demo credentials, timeout)
- exceptions.py: Transport and contract error types
- client.py: BookStoreClient, a thin httpx wrapper per endpoint
- context.py: ApiContext, the per-test client + token pair
- checks.py: Shape and value assertions raising ContractViolation
- scenarios.py: End-to-end category and book lifecycles

Usage:
    from harness import create_context, scenarios

    with create_context() as ctx:
        scenarios.category_lifecycle(ctx)
"""

from harness.client import ApiResponse, BookStoreClient
from harness.config import HarnessSettings, get_harness_settings
from harness.context import ApiContext, create_context
from harness.exceptions import (
    ApiError,
    AuthenticationError,
    ContractViolation,
    HarnessError,
    MalformedResponseError,
    TransportError,
)

__all__ = [
    "ApiContext",
    "ApiError",
    "ApiResponse",
    "AuthenticationError",
    "BookStoreClient",
    "ContractViolation",
    "HarnessError",
    "HarnessSettings",
    "MalformedResponseError",
    "TransportError",
    "create_context",
    "get_harness_settings",
]

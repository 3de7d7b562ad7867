"""
Per-test API context.

An ApiContext bundles the HTTP client and a freshly obtained bearer token.
Tests build a new one for every test case and pass it explicitly to the
scenario functions; nothing is shared between test cases.
"""

import logging
from dataclasses import dataclass

import httpx

from harness.client import BookStoreClient
from harness.config import HarnessSettings, get_harness_settings
from harness.exceptions import ContractViolation

logger = logging.getLogger(__name__)


@dataclass
class ApiContext:
    """An HTTP client plus the token that authorizes its write requests."""

    client: BookStoreClient
    token: str

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ApiContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_context(
    http: httpx.Client | None = None,
    settings: HarnessSettings | None = None,
) -> ApiContext:
    """
    Build a client and log in with the configured account.

    Args:
        http: An existing httpx.Client (e.g. a TestClient) to send requests
            through. When omitted, a client for settings.base_url is created.
        settings: Harness settings; defaults to the cached environment settings.

    Raises:
        AuthenticationError: if the login is rejected
        ContractViolation: if the login succeeds without a usable token
    """
    settings = settings or get_harness_settings()

    if http is None:
        client = BookStoreClient.from_settings(settings)
    else:
        client = BookStoreClient(http, login_path=settings.login_path)

    try:
        token = client.authenticate(settings.email, settings.password)
    except Exception:
        client.close()
        raise

    if not token.strip():
        client.close()
        raise ContractViolation("Authentication token should not be null or empty")

    logger.debug(f"Authenticated as {settings.email}")
    return ApiContext(client=client, token=token)

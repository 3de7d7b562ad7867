"""
BookStore HTTP Client

Encapsulates all HTTP communication with the bookstore server.

The client wraps an httpx.Client. Anything that is an httpx.Client works,
including fastapi.testclient.TestClient, so the same scenarios run against
a live server and against the in-process app.

The client holds no credentials: write methods take the bearer token as
an argument, which keeps the token owned by the caller's ApiContext.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from harness.config import HarnessSettings, get_harness_settings
from harness.exceptions import (
    ApiError,
    AuthenticationError,
    MalformedResponseError,
    TransportError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    """One HTTP exchange: the raw text is kept for checks like body == 'null'."""

    method: str
    path: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return self.status_code == httpx.codes.OK

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            MalformedResponseError: if the body is empty or not JSON
        """
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise MalformedResponseError(self.method, self.path, self.text) from e

    def expect_ok(self) -> "ApiResponse":
        """Raise ApiError unless the status is 200 OK."""
        if not self.ok:
            raise ApiError(self.method, self.path, self.status_code, self.text)
        return self


def bearer(token: str | None) -> dict[str, str]:
    """Authorization header for a token; empty when there is none."""
    return {"Authorization": f"Bearer {token}"} if token else {}


class BookStoreClient:
    """
    Typed access to every endpoint of the bookstore contract.

    Usage:
        with BookStoreClient.from_settings() as client:
            token = client.authenticate("john.doe@example.com", "password123")
            category = client.create_category("Poetry", token=token)
    """

    def __init__(self, http: httpx.Client, login_path: str = "/user/login") -> None:
        self.http = http
        self.login_path = login_path

    @classmethod
    def from_settings(cls, settings: HarnessSettings | None = None) -> "BookStoreClient":
        """Build a client with its own httpx.Client from harness settings."""
        settings = settings or get_harness_settings()
        http = httpx.Client(base_url=settings.base_url, timeout=settings.timeout)
        return cls(http, login_path=settings.login_path)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "BookStoreClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------
    def send(
        self,
        method: str,
        path: str,
        *,
        json_body: dict | None = None,
        token: str | None = None,
    ) -> ApiResponse:
        """
        Send one request and capture the response without judging it.

        Raises:
            TransportError: connection refused, timeout or another httpx failure
        """
        try:
            response = self.http.request(
                method,
                path,
                json=json_body,
                headers=bearer(token),
            )
        except httpx.HTTPError as e:
            raise TransportError(method, path, str(e) or type(e).__name__) from e
        logger.debug(f"{method} {path} -> {response.status_code}")
        return ApiResponse(
            method=method,
            path=path,
            status_code=response.status_code,
            text=response.text,
        )

    def _call(self, method: str, path: str, **kwargs) -> Any:
        return self.send(method, path, **kwargs).expect_ok().json()

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    def authenticate(self, email: str, password: str) -> str:
        """
        Log in and return the bearer token.

        Raises:
            AuthenticationError: non-200 answer, or no non-empty token in it
        """
        response = self.send(
            "POST",
            self.login_path,
            json_body={"email": email, "password": password},
        )
        if not response.ok:
            raise AuthenticationError(
                response.method, response.path, response.status_code, response.text
            )

        data = response.json()
        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthenticationError(
                response.method, response.path, response.status_code, response.text
            )
        return token

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------
    def list_categories(self) -> list[dict]:
        return self._call("GET", "/category")

    def get_category(self, category_id: str) -> dict | None:
        """Fetch one category; None when the server answers null."""
        return self._call("GET", f"/category/{category_id}")

    def create_category(self, title: str, *, token: str) -> dict:
        return self._call("POST", "/category", json_body={"title": title}, token=token)

    def update_category(self, category_id: str, title: str, *, token: str) -> dict:
        return self._call(
            "PUT", f"/category/{category_id}", json_body={"title": title}, token=token
        )

    def delete_category(self, category_id: str, *, token: str) -> Any:
        return self._call("DELETE", f"/category/{category_id}", token=token)

    # -------------------------------------------------------------------------
    # Books
    # -------------------------------------------------------------------------
    def list_books(self) -> list[dict]:
        return self._call("GET", "/book")

    def get_book(self, book_id: str) -> dict | None:
        """Fetch one book; None when the server answers null."""
        return self._call("GET", f"/book/{book_id}")

    def create_book(self, book: dict, *, token: str) -> dict:
        """
        Create a book.

        Args:
            book: title, author, description, price, pages and category (an id)
        """
        return self._call("POST", "/book", json_body=book, token=token)

    def update_book(self, book_id: str, changes: dict, *, token: str) -> dict:
        """Send a partial update; only the keys in `changes` are touched."""
        return self._call("PUT", f"/book/{book_id}", json_body=changes, token=token)

    def delete_book(self, book_id: str, *, token: str) -> Any:
        return self._call("DELETE", f"/book/{book_id}", token=token)

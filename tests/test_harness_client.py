"""
Tests for the harness HTTP client.

Uses httpx.MockTransport to fake server answers, so error handling can be
checked without a running server.
"""

import json

import httpx
import pytest

from harness import (
    ApiContext,
    ApiError,
    AuthenticationError,
    BookStoreClient,
    ContractViolation,
    HarnessSettings,
    MalformedResponseError,
    TransportError,
    create_context,
)
from harness.checks import expect_book_values, expect_null_body
from harness.scenarios import run_scenarios


def make_client(handler) -> BookStoreClient:
    http = httpx.Client(base_url="http://bookstore.test", transport=httpx.MockTransport(handler))
    return BookStoreClient(http)


class TestTransport:
    """Tests for request building and response parsing."""

    def test_write_request_sends_bearer_and_json(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"_id": "a" * 24, "title": "Poetry"})

        client = make_client(handler)
        category = client.create_category("Poetry", token="abc")

        assert category["title"] == "Poetry"
        assert seen == {
            "method": "POST",
            "path": "/category",
            "auth": "Bearer abc",
            "body": {"title": "Poetry"},
        }

    def test_read_request_sends_no_auth(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=[])

        assert make_client(handler).list_books() == []
        assert seen["auth"] is None

    def test_null_body_becomes_none(self):
        client = make_client(lambda request: httpx.Response(200, text="null"))

        assert client.get_book("a" * 24) is None

    def test_non_ok_status_raises_api_error(self):
        client = make_client(
            lambda request: httpx.Response(404, json={"detail": "Book not found"})
        )

        with pytest.raises(ApiError) as exc_info:
            client.delete_book("a" * 24, token="abc")

        assert exc_info.value.status_code == 404
        assert "Book not found" in exc_info.value.body

    def test_html_body_raises_malformed(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(MalformedResponseError):
            client.list_categories()

    def test_send_keeps_raw_text(self):
        client = make_client(lambda request: httpx.Response(200, text="null"))

        response = client.send("GET", "/category/" + "a" * 24)

        assert response.ok
        expect_null_body(response)


class TestAuthenticate:
    """Tests for BookStoreClient.authenticate()."""

    def test_returns_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"token": "jwt-token"})

        token = make_client(handler).authenticate("john.doe@example.com", "password123")

        assert token == "jwt-token"
        assert seen["path"] == "/user/login"
        assert seen["body"] == {"email": "john.doe@example.com", "password": "password123"}

    def test_rejected_login(self):
        client = make_client(
            lambda request: httpx.Response(401, json={"detail": "Incorrect email or password"})
        )

        with pytest.raises(AuthenticationError) as exc_info:
            client.authenticate("john.doe@example.com", "wrong")

        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("body", [{}, {"token": ""}, {"token": None}, []])
    def test_missing_token(self, body):
        client = make_client(lambda request: httpx.Response(200, json=body))

        with pytest.raises(AuthenticationError):
            client.authenticate("john.doe@example.com", "password123")

    def test_create_context_uses_login_path(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            return httpx.Response(200, json={"token": "jwt-token"})

        http = httpx.Client(base_url="http://bookstore.test", transport=httpx.MockTransport(handler))
        settings = HarnessSettings(base_url="http://bookstore.test/", login_path="auth/login")

        ctx = create_context(http=http, settings=settings)

        assert ctx.token == "jwt-token"
        assert seen["path"] == "/auth/login"
        assert settings.base_url == "http://bookstore.test"


class TestChecks:
    """Tests for the contract assertion helpers."""

    def test_expect_book_values_compares_numbers(self):
        book = {"price": 10.0, "pages": 99, "category": {"_id": "c" * 24}}

        expect_book_values(book, {"price": 10, "pages": 99.0, "category": "c" * 24})

    def test_expect_book_values_reports_field(self):
        with pytest.raises(ContractViolation, match="book author"):
            expect_book_values({"author": "Someone"}, {"author": "Ivo Petrov"})

    def test_expect_null_body_rejects_object(self):
        client = make_client(lambda request: httpx.Response(200, json={"_id": "a" * 24}))

        with pytest.raises(ContractViolation, match="expected body 'null'"):
            expect_null_body(client.send("GET", "/book/" + "a" * 24))


CATEGORY_ID = "c" * 24
BOOK_ID = "b" * 24


class FakeBookServer:
    """
    Minimal in-memory stand-in for a bookstore server.

    With embed_category_on_read=False, GET /book/{id} answers the category
    as a bare id instead of an object. With category_listing_lags=True,
    GET /category only ever lists the most recently created category.
    """

    def __init__(self, embed_category_on_read: bool = True, category_listing_lags: bool = False):
        self.embed_category_on_read = embed_category_on_read
        self.category_listing_lags = category_listing_lags
        self.category = {"_id": CATEGORY_ID, "title": "Classic Literature"}
        self.categories = [self.category]
        self.books = {
            "a" * 24: {
                "_id": "a" * 24,
                "title": "The Great Gatsby",
                "author": "F. Scott Fitzgerald",
                "description": "A portrait of the Jazz Age.",
                "price": 10.99,
                "pages": 180,
                "category": self.category,
            }
        }
        self.deleted_books = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path

        if path == "/user/login":
            return httpx.Response(200, json={"token": "jwt-token"})
        if path == "/category" and method == "GET":
            return httpx.Response(200, json=self.categories)
        if path == "/category" and method == "POST":
            created = {"_id": "d" * 24, "title": json.loads(request.content)["title"]}
            if self.category_listing_lags:
                self.categories = [created]
            else:
                self.categories.append(created)
            return httpx.Response(200, json=created)
        if path == "/book" and method == "GET":
            return httpx.Response(200, json=list(self.books.values()))
        if path == "/book" and method == "POST":
            book = {**json.loads(request.content), "_id": BOOK_ID, "category": self.category}
            self.books[BOOK_ID] = book
            return httpx.Response(200, json=book)

        book_id = path.rsplit("/", 1)[-1]
        if path.startswith("/book/") and method == "GET":
            book = self.books.get(book_id)
            if book is not None and not self.embed_category_on_read:
                book = {**book, "category": book["category"]["_id"]}
            return httpx.Response(200, json=book)
        if path.startswith("/book/") and method == "PUT":
            if book_id not in self.books:
                return httpx.Response(404, json={"detail": "Book not found"})
            self.books[book_id].update(json.loads(request.content))
            return httpx.Response(200, json=self.books[book_id])
        if path.startswith("/book/") and method == "DELETE":
            if book_id not in self.books:
                return httpx.Response(404, json={"detail": "Book not found"})
            self.deleted_books.append(book_id)
            return httpx.Response(200, json=self.books.pop(book_id))

        return httpx.Response(404, json={"detail": "Not Found"})


def context_for(handler):
    return lambda: ApiContext(make_client(handler), "jwt-token")


class TestRunScenariosRecordsFailures:
    """run_scenarios() keeps going when a scenario cannot complete."""

    def test_connection_error_becomes_transport_error(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TransportError, match="GET /book failed: refused"):
            make_client(refuse).list_books()

    def test_unreachable_server_fails_each_scenario(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        outcomes = run_scenarios(context_for(refuse), names=["book_listing", "seeded_book"])

        assert [o.name for o in outcomes] == ["book_listing", "seeded_book"]
        assert not any(o.passed for o in outcomes)
        assert "refused" in outcomes[0].message

    def test_timeout_is_recorded(self):
        def too_slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        outcomes = run_scenarios(context_for(too_slow), names=["book_listing"])

        assert not outcomes[0].passed
        assert "timed out" in outcomes[0].message

    def test_unexpanded_category_is_a_contract_failure(self):
        server = FakeBookServer(embed_category_on_read=False)

        outcomes = run_scenarios(context_for(server), names=["book_lifecycle", "book_listing"])

        lifecycle, listing = outcomes
        assert not lifecycle.passed
        assert "category" in lifecycle.message
        assert listing.passed

    def test_failed_book_lifecycle_deletes_its_book(self):
        server = FakeBookServer(embed_category_on_read=False)

        run_scenarios(context_for(server), names=["book_lifecycle"])

        assert server.deleted_books == [BOOK_ID]
        assert BOOK_ID not in server.books

    def test_book_lifecycle_passes_against_conforming_server(self):
        server = FakeBookServer()

        outcomes = run_scenarios(context_for(server), names=["book_lifecycle"], seed=7)

        assert outcomes[0].passed, outcomes[0].message

    def test_category_listing_must_hold_more_than_the_new_category(self):
        server = FakeBookServer(category_listing_lags=True)

        outcomes = run_scenarios(context_for(server), names=["category_lifecycle"])

        assert not outcomes[0].passed
        assert "at least 2" in outcomes[0].message

"""
Contract checks.

Small assertion helpers shared by the scenarios. Each raises
ContractViolation with a message naming the property that broke.
"""

from typing import Any, Iterable

from harness.client import ApiResponse
from harness.exceptions import ContractViolation

BOOK_FIELDS = ("title", "author", "description", "price", "pages", "category")


def expect(condition: bool, message: str) -> None:
    if not condition:
        raise ContractViolation(message)


def is_blank(value: Any) -> bool:
    """True for None and for values whose text form is empty."""
    return value is None or str(value).strip() == ""


def expect_id(item: Any, what: str) -> str:
    """Return item['_id'], requiring it to be a non-empty string."""
    expect(isinstance(item, dict), f"{what} should be a JSON object, got {item!r}")
    item_id = item.get("_id")
    expect(
        isinstance(item_id, str) and item_id != "",
        f"{what} should have a non-empty _id",
    )
    return item_id


def expect_array(data: Any, what: str, min_length: int = 0) -> list:
    expect(isinstance(data, list), f"{what}: the response should be an array")
    expect(
        len(data) >= min_length,
        f"{what}: expected at least {min_length} item(s), got {len(data)}",
    )
    return data


def expect_category(category: Any, title: str | None = None) -> str:
    """Check a category object and return its id."""
    category_id = expect_id(category, "category")
    expect(not is_blank(category.get("title")), "category title should not be empty")
    if title is not None:
        expect(
            category["title"] == title,
            f"category title should be {title!r}, got {category['title']!r}",
        )
    return category_id


def expect_book(book: Any) -> str:
    """Check that a book carries every field with a non-empty value."""
    book_id = expect_id(book, "book")
    for field in BOOK_FIELDS:
        expect(not is_blank(book.get(field)), f"Property {field} should not be empty")
    return book_id


def expect_book_values(book: dict, expected: dict) -> None:
    """
    Compare book fields to expected values.

    `category` may be given as an id; it is compared to book.category._id.
    Numbers are compared numerically so 10 and 10.0 are equal.
    """
    expect(isinstance(book, dict), f"book should be a JSON object, got {book!r}")
    for field, want in expected.items():
        got = book.get(field)
        if field == "category":
            got = got.get("_id") if isinstance(got, dict) else got
        if isinstance(want, (int, float)) and isinstance(got, (int, float)):
            matches = float(got) == float(want)
        else:
            matches = got == want
        expect(matches, f"book {field} should be {want!r}, got {got!r}")


def expect_null_body(response: ApiResponse) -> None:
    """A deleted or unknown id reads back as 200 with a literal null body."""
    expect(
        response.status_code == 200,
        f"{response.method} {response.path}: expected status code OK (200), "
        f"got {response.status_code}",
    )
    expect(
        response.text.strip() == "null",
        f"{response.method} {response.path}: expected body 'null', got {response.text!r}",
    )


def expect_non_empty_body(response: ApiResponse) -> None:
    expect(
        response.status_code == 200,
        f"{response.method} {response.path}: expected status code OK (200), "
        f"got {response.status_code}",
    )
    expect(
        response.text.strip() != "",
        f"{response.method} {response.path}: response content should not be empty",
    )


def find_by(items: Iterable[dict], field: str, value: Any) -> dict | None:
    """First item whose field equals value, or None."""
    return next(
        (item for item in items if isinstance(item, dict) and item.get(field) == value),
        None,
    )

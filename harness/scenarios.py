"""
Contract scenarios.

Each scenario takes an ApiContext (and optionally a random.Random for the
generated titles), drives the server through one flow and raises
ContractViolation or a HarnessError on the first broken expectation.

State flows explicitly: steps that create something return its id and
later steps receive that id as an argument. No scenario depends on
another one having run first.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable

from harness import checks
from harness.checks import expect
from harness.context import ApiContext
from harness.exceptions import HarnessError

logger = logging.getLogger(__name__)

SEEDED_TITLE = "The Great Gatsby"
SEEDED_AUTHOR = "F. Scott Fitzgerald"


def random_suffix(rng: random.Random) -> int:
    return rng.randint(99, 998)


# =============================================================================
# Categories
# =============================================================================
@dataclass(frozen=True)
class CategoryLifecycle:
    category_id: str
    created_title: str
    updated_title: str


def category_lifecycle(ctx: ApiContext, rng: random.Random | None = None) -> CategoryLifecycle:
    """
    Create, list, update, re-read, delete and re-read a category.

    Returns:
        The id and both titles of the category that was created and deleted
    """
    rng = rng or random.Random()
    client, token = ctx.client, ctx.token

    # Step 1: create
    title = f"RandomTitle_{random_suffix(rng)}"
    created = client.create_category(title, token=token)
    category_id = checks.expect_category(created, title)

    # Step 2: the new category shows up in the listing
    categories = checks.expect_array(
        client.list_categories(), "GET /category", min_length=2
    )
    expect(
        checks.find_by(categories, "_id", category_id) is not None,
        f"created category {category_id} missing from GET /category",
    )

    # Step 3: update the title
    updated_title = f"Updated_RandomTitle_{random_suffix(rng)}"
    updated = client.update_category(category_id, updated_title, token=token)
    expect(
        checks.expect_category(updated, updated_title) == category_id,
        "update must not change the category id",
    )

    # Step 4: the update is visible on read
    fetched = client.get_category(category_id)
    expect(fetched is not None, f"category {category_id} should still exist after update")
    expect(
        checks.expect_category(fetched, updated_title) == category_id,
        "GET /category/{id} returned a different category",
    )

    # Step 5: delete
    checks.expect_non_empty_body(
        client.send("DELETE", f"/category/{category_id}", token=token)
    )

    # Step 6: a deleted category reads back as null
    checks.expect_null_body(client.send("GET", f"/category/{category_id}"))

    return CategoryLifecycle(category_id, title, updated_title)


def category_listing_grows(
    ctx: ApiContext,
    rng: random.Random | None = None,
    count: int = 3,
) -> list[str]:
    """
    Creating N categories grows GET /category by exactly N.

    Assumes nobody else writes categories meanwhile. The created
    categories are deleted again before returning.
    """
    rng = rng or random.Random()
    client, token = ctx.client, ctx.token

    before = checks.expect_array(client.list_categories(), "GET /category")

    created_ids = []
    try:
        for _ in range(count):
            created = client.create_category(
                f"RandomTitle_{random_suffix(rng)}", token=token
            )
            created_ids.append(checks.expect_id(created, "created category"))

        after = checks.expect_array(client.list_categories(), "GET /category")
        expect(
            len(after) == len(before) + count,
            f"expected {len(before) + count} categories after creating {count}, "
            f"got {len(after)}",
        )
        listed_ids = {item.get("_id") for item in after if isinstance(item, dict)}
        missing = [cid for cid in created_ids if cid not in listed_ids]
        expect(not missing, f"created categories missing from listing: {missing}")
    finally:
        for category_id in created_ids:
            client.delete_category(category_id, token=token)

    return created_ids


# =============================================================================
# Books
# =============================================================================
def check_book_listing(ctx: ApiContext) -> list[dict]:
    """GET /book is a non-empty array of books with every field filled in."""
    books = checks.expect_array(ctx.client.list_books(), "GET /book", min_length=1)
    for book in books:
        checks.expect_book(book)
    return books


def find_book_by_title(ctx: ApiContext, title: str) -> dict:
    """Look a book up by exact title in GET /book."""
    books = checks.expect_array(ctx.client.list_books(), "GET /book")
    book = checks.find_by(books, "title", title)
    expect(book is not None, f"no book titled {title!r} in GET /book")
    return book


def seeded_book_present(ctx: ApiContext) -> dict:
    """The demo catalogue contains The Great Gatsby by F. Scott Fitzgerald."""
    book = find_book_by_title(ctx, SEEDED_TITLE)
    expect(
        book.get("author") == SEEDED_AUTHOR,
        f"{SEEDED_TITLE!r} should be by {SEEDED_AUTHOR}, got {book.get('author')!r}",
    )
    return book


def pick_category_id(ctx: ApiContext) -> str:
    """Id of the first category the server lists."""
    categories = checks.expect_array(
        ctx.client.list_categories(), "GET /category", min_length=1
    )
    return checks.expect_id(categories[0], "first category")


def _discard_book(ctx: ApiContext, book_id: str) -> None:
    """Best-effort removal of a book left behind by a failed scenario."""
    try:
        ctx.client.delete_book(book_id, token=ctx.token)
    except HarnessError as e:
        logger.warning(f"Could not delete leftover book {book_id}: {e}")


def add_book(
    ctx: ApiContext,
    category_id: str,
    rng: random.Random | None = None,
) -> dict:
    """
    Create a book in the given category and check the echoed fields.

    Returns:
        The created book as returned by the server
    """
    rng = rng or random.Random()
    payload = {
        "title": f"Random_{random_suffix(rng)}",
        "author": "Ivo Petrov",
        "description": "Test description",
        "price": 10,
        "pages": 99,
        "category": category_id,
    }

    created = ctx.client.create_book(payload, token=ctx.token)
    book_id = checks.expect_id(created, "created book")
    try:
        checks.expect_book(created)
        checks.expect_book_values(created, payload)
        expect(
            isinstance(created["category"], dict),
            "book category should be expanded into an object",
        )
    except (AssertionError, HarnessError):
        _discard_book(ctx, book_id)
        raise
    return created


def update_book(
    ctx: ApiContext,
    book_id: str,
    rng: random.Random | None = None,
) -> dict:
    """
    Change only title and author, then verify every other field survived.

    Returns:
        The book as read back after the update
    """
    rng = rng or random.Random()
    client = ctx.client

    before = client.get_book(book_id)
    expect(before is not None, f"book {book_id} should exist before the update")
    checks.expect_book(before)
    expect(
        isinstance(before["category"], dict),
        f"GET /book/{book_id}: category should be expanded into an object",
    )

    changes = {
        "title": f"Updated_Random_{random_suffix(rng)}",
        "author": "Updated Ivo Petrov",
    }
    updated = client.update_book(book_id, changes, token=ctx.token)
    checks.expect_book_values(updated, changes)

    after = client.get_book(book_id)
    expect(after is not None, f"book {book_id} should exist after the update")
    checks.expect_book_values(after, changes)

    untouched = {
        field: before[field] for field in ("description", "price", "pages")
    }
    untouched["category"] = before["category"]["_id"]
    checks.expect_book_values(after, untouched)

    return after


def delete_book(ctx: ApiContext, book_id: str) -> None:
    """Delete a book and check that it reads back as null."""
    client = ctx.client
    checks.expect_non_empty_body(
        client.send("DELETE", f"/book/{book_id}", token=ctx.token)
    )
    checks.expect_null_body(client.send("GET", f"/book/{book_id}"))


@dataclass(frozen=True)
class BookLifecycle:
    book_id: str
    category_id: str
    final_title: str


def book_lifecycle(ctx: ApiContext, rng: random.Random | None = None) -> BookLifecycle:
    """
    List books, add one, find it by title, update it and delete it.

    Each step receives the id produced by the step before it. If a step
    after the create fails, the book is still deleted before the error
    propagates.
    """
    rng = rng or random.Random()

    check_book_listing(ctx)

    category_id = pick_category_id(ctx)
    created = add_book(ctx, category_id, rng)
    book_id = checks.expect_id(created, "created book")

    deleted = False
    try:
        expect(
            created["category"].get("_id") == category_id,
            f"book.category._id should be {category_id}",
        )

        found = find_book_by_title(ctx, created["title"])
        expect(
            found.get("_id") == book_id,
            "GET /book lists a different book under that title",
        )

        updated = update_book(ctx, book_id, rng)
        delete_book(ctx, book_id)
        deleted = True
    finally:
        if not deleted:
            _discard_book(ctx, book_id)

    return BookLifecycle(book_id, category_id, updated["title"])


# =============================================================================
# Runner
# =============================================================================
Scenario = Callable[[ApiContext, random.Random], object]

SCENARIOS: dict[str, Scenario] = {
    "category_lifecycle": category_lifecycle,
    "category_listing_grows": lambda ctx, rng: category_listing_grows(ctx, rng),
    "book_listing": lambda ctx, rng: check_book_listing(ctx),
    "seeded_book": lambda ctx, rng: seeded_book_present(ctx),
    "book_lifecycle": book_lifecycle,
}


@dataclass(frozen=True)
class ScenarioOutcome:
    name: str
    passed: bool
    message: str = ""


def run_scenarios(
    context_factory: Callable[[], ApiContext],
    names: list[str] | None = None,
    seed: int | None = None,
) -> list[ScenarioOutcome]:
    """
    Run scenarios one by one, each with its own fresh context.

    A failing scenario is recorded and the next one still runs.

    Args:
        context_factory: Builds a new authenticated ApiContext
        names: Scenario names to run (default: all, in SCENARIOS order)
        seed: Seed for generated titles, for reproducible runs
    """
    rng = random.Random(seed)
    outcomes = []

    for name in names or list(SCENARIOS):
        scenario = SCENARIOS[name]
        try:
            with context_factory() as ctx:
                scenario(ctx, rng)
        except (AssertionError, HarnessError) as e:
            logger.warning(f"Scenario {name} failed: {e}")
            outcomes.append(ScenarioOutcome(name, False, str(e)))
        else:
            logger.info(f"Scenario {name} passed")
            outcomes.append(ScenarioOutcome(name, True))

    return outcomes

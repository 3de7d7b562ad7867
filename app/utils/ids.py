"""
Identifier helpers.

Resources are addressed by opaque 24-character lowercase hex ids,
the same shape clients of the bookstore API already expect (`_id`).
Ids are random, so a deleted resource's id is never handed out again.
"""

import re
import secrets
from datetime import UTC, datetime

ID_LENGTH = 24

_ID_PATTERN = re.compile(rf"^[0-9a-f]{{{ID_LENGTH}}}$")


def generate_id() -> str:
    """
    Generate a new opaque resource id.

    Example:
        >>> len(generate_id())
        24
    """
    return secrets.token_hex(ID_LENGTH // 2)


def is_valid_id(value: str) -> bool:
    """Check whether a string has the shape of a resource id."""
    return bool(_ID_PATTERN.match(value))


def utc_now() -> datetime:
    return datetime.now(UTC)

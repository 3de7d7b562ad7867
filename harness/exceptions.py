"""
Harness Exceptions

HarnessError
├── TransportError           no HTTP answer (connection refused, timeout)
├── ApiError                 non-OK status code
│   └── AuthenticationError  login rejected or no token returned
└── MalformedResponseError   body is not the JSON the contract promises

ContractViolation is an AssertionError so pytest reports it as a plain
test failure rather than an error.
"""


class HarnessError(Exception):
    """Base class for errors raised while talking to the server."""


class TransportError(HarnessError):
    """The request never got an HTTP answer."""

    def __init__(self, method: str, path: str, reason: str) -> None:
        self.method = method
        self.path = path
        self.reason = reason
        super().__init__(f"{method} {path} failed: {reason}")


class ApiError(HarnessError):
    """The server answered with an unexpected status code."""

    def __init__(self, method: str, path: str, status_code: int, body: str) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{method} {path} returned {status_code}: {body[:200]}"
        )


class AuthenticationError(ApiError):
    """Login failed or did not produce a usable token."""


class MalformedResponseError(HarnessError):
    """The response body could not be parsed as JSON."""

    def __init__(self, method: str, path: str, body: str) -> None:
        self.method = method
        self.path = path
        self.body = body
        super().__init__(f"{method} {path} returned non-JSON body: {body[:200]!r}")


class ContractViolation(AssertionError):
    """A response broke the bookstore contract."""

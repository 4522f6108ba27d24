"""Exceptions raised by the BFF resource client.

Each failure mode gets its own type so callers can tell a malformed address
from a network outage, a rejected request or a body that does not match the
expected schema.
"""

import asyncio
from typing import Optional


class ResourceClientError(Exception):
    """Base exception for all resource client errors."""

    pass


class InvalidLocation(ResourceClientError):
    """Raised when a location cannot be resolved to a network address.

    No request has been sent when this is raised.
    """

    def __init__(self, location: object, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Invalid location {location!r}: {reason}")


class TransportFailure(ResourceClientError):
    """Raised when the request failed without producing a usable response."""

    def __init__(self, method: str, url: str, cause: Exception = None):
        self.method = method
        self.url = url
        self.cause = cause
        message = f"{method} {url} failed without a response"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class UnexpectedStatus(ResourceClientError):
    """Raised when the response status is outside the operation's success set."""

    def __init__(self, method: str, url: str, status_code: int, body: Optional[str] = None):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        message = f"{method} {url} returned unexpected status {status_code}"
        if body:
            message += f": {body[:500]}"
        super().__init__(message)


class DecodeFailure(ResourceClientError):
    """Raised when a response body does not conform to the expected schema."""

    def __init__(self, url: str, schema: str, cause: Exception = None):
        self.url = url
        self.schema = schema
        self.cause = cause
        message = f"Response from {url} could not be decoded as {schema}"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class Cancelled(ResourceClientError, asyncio.CancelledError):
    """Raised when the awaiting task is cancelled mid-operation.

    Also an :class:`asyncio.CancelledError`, so task cancellation keeps working.
    """

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} was cancelled")

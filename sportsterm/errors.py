"""Fetch failures.

Every way a request to the data source can go wrong collapses into one of
these. They are never fatal: the navigator stores them as the error of the
slot the request was meant to fill and the renderer shows the message.
"""

from typing import Optional


class FetchFailure(Exception):
    """Base class for data source failures. ``str(err)`` is shown to the user."""


class TransportFailure(FetchFailure):
    """Network level failure (DNS, refused connection, reset...)."""


class TimedOut(TransportFailure):
    """The request did not complete within the configured timeout."""

    def __init__(self, timeout: float):
        super().__init__(f"request timed out after {timeout:g}s")
        self.timeout = timeout


class ProtocolFailure(FetchFailure):
    """The API answered with a non-success status code."""

    def __init__(self, status: int, url: Optional[str] = None):
        super().__init__(f"API returned status code: {status}")
        self.status = status
        self.url = url


class DecodeFailure(FetchFailure):
    """The payload was not the JSON document we expected."""

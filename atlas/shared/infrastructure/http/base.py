"""Error types raised by HTTP data sources."""

from __future__ import annotations


class DataFetchError(Exception):
    """A remote list could not be fetched or understood."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def description(self) -> str:
        """Human-readable reason, shown to the user as-is."""
        return self.message


class TransportError(DataFetchError):
    """The endpoint answered with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to load countries: HTTP {status_code}")
        self.status_code = status_code


class ParseError(DataFetchError):
    """The response body is not the expected JSON array of objects."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to parse countries response: {reason}")
        self.reason = reason

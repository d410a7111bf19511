"""Exception hierarchy for the sentence fetcher pipeline."""

from __future__ import annotations


class SentenceFetcherError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InputError(SentenceFetcherError):
    """Level specification or export option could not be used."""


class AuthError(SentenceFetcherError):
    """API token missing. Raised before any network call."""


class NetworkError(SentenceFetcherError):
    """Non-success HTTP status or transport failure."""

    def __init__(self, message: str, status_code: int | None = None, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)

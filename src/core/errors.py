"""Error types shared by adapters and views.

There is a single failure kind, ``FetchError``: network failures and
non-2xx answers surface identically, as a human-readable message that the
views store in the affected channel.
"""

from __future__ import annotations


class FetchError(Exception):
    """A request could not be completed or was answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class DraftValidationError(FetchError):
    """A CRUD draft is not submittable; raised before any request is issued."""

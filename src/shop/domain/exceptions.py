"""Domain-level exceptions.

All store failures are expressed as subclasses of DomainException
so collaborators (CLI, HTTP routers) can catch them uniformly and map
them to their own responses.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Required fields are missing or a field value is not allowed."""

    def __init__(self, message: str, missing_fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])

    @classmethod
    def missing(cls, fields: list[str]) -> ValidationError:
        return cls(f"Missing fields: {', '.join(fields)}", missing_fields=fields)


class DuplicateKeyError(DomainException):
    """A unique key (product code) is already taken by a live record."""


class NotFoundError(DomainException):
    """A requested record does not exist."""


class PersistenceError(DomainException):
    """The backing file could not be written; the in-memory change was undone."""

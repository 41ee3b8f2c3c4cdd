"""
Error taxonomy for the Eterna backend.

Every error carries the HTTP status and error code the request layer should
answer with; see eterna.utils.http.translate_exceptions.
"""

from __future__ import annotations


class EternaError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"


class NotFoundError(EternaError):
    """The referenced artifact or comment id does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind.capitalize()} '{item_id}' does not exist")


class StorageUnavailableError(EternaError):
    """Any failure to read or write the record store."""

    status_code = 503
    error_code = "STORAGE_UNAVAILABLE"


class ConcurrentUpdateError(EternaError):
    """A conditional write kept losing to concurrent writers."""

    status_code = 409
    error_code = "CONCURRENT_UPDATE"


class InvalidActionError(EternaError, ValueError):
    """A support action outside the closed set of actions."""

    status_code = 400
    error_code = "INVALID_ACTION"


class InvalidReactionError(EternaError, ValueError):
    """A comment reaction outside the closed set of reactions."""

    status_code = 400
    error_code = "INVALID_REACTION"


class ValidationError(EternaError, ValueError):
    """A request payload failed validation."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

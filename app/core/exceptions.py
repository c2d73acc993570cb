"""
Domain errors raised by the service layer.

Routes translate these into HTTP responses:
- ValidationError -> 400
- NotFoundError   -> 404
- StorageFailure  -> 500

ClassificationFailure never leaves the classification package.
"""


class CivicIssueError(Exception):
    """Base class for all service-level errors."""


class ValidationError(CivicIssueError):
    """Malformed or missing input supplied by the caller."""


class NotFoundError(CivicIssueError):
    """Unknown record identifier."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind.capitalize()} {record_id} not found")


class ClassificationFailure(CivicIssueError):
    """The external classifier could not produce a usable answer."""


class StorageFailure(CivicIssueError):
    """The record store failed to read or write."""

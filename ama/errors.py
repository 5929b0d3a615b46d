"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to at the request boundary.
``AuthError`` and ``NotFoundError`` share status, kind and public detail so a
wrong token can never be told apart from a missing record.
"""

NOT_FOUND_DETAIL = "Not found or invalid token"


class AMAError(Exception):
    """Base exception for the AMA service."""

    status_code = 500
    kind = "error"

    @property
    def public_detail(self) -> str:
        return str(self)


class ValidationError(AMAError):
    """Raised when input is malformed or out of range."""

    status_code = 400
    kind = "validation"


class StateError(AMAError):
    """Raised when an operation is invalid for the current publish/answer state."""

    status_code = 400
    kind = "state"


class ConflictError(AMAError):
    """Raised when an identical action already happened (duplicate vote or answer)."""

    status_code = 409
    kind = "conflict"


class NotFoundError(AMAError):
    """Raised when no record matches."""

    status_code = 404
    kind = "not_found"

    @property
    def public_detail(self) -> str:
        return NOT_FOUND_DETAIL


class AuthError(NotFoundError):
    """Raised when a token does not grant the role an operation requires."""

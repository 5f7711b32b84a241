class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when credentials or tokens are rejected."""

    status_code = 401


class InvalidCredentials(AuthenticationError):
    """Unknown username or wrong password."""


class InvalidToken(AuthenticationError):
    """Token signature is bad, the token is malformed or it has expired."""


class ConflictError(DomainError):
    """Raised when the current state does not allow the requested change."""


class DuplicateUser(ConflictError):
    status_code = 409


class AlreadyActive(ConflictError):
    """A week with no end time already exists for the user."""


class NoActiveWeek(ConflictError):
    pass


class NotRunning(ConflictError):
    pass


class NotPaused(ConflictError):
    pass


class InternalError(Exception):
    """Database or connectivity failure."""

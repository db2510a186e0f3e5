class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class ConflictError(DomainError):
    """Raised when a record would violate a uniqueness rule."""


class ConcurrentClockError(ConflictError):
    """Raised when another request changed the clock state first."""


class AuthenticationError(DomainError):
    """Base class for failed authentication."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid."""


class MissingTokenError(AuthenticationError):
    """Raised when a protected endpoint is called without a token."""


class InvalidTokenError(AuthenticationError):
    """Raised when a token fails signature, expiry or claim checks."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

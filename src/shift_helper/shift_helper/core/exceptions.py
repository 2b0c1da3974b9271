class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are rejected by the auth provider."""


class AuthorizationError(DomainError):
    """Raised when a request has no signed-in session."""


class StoreError(DomainError):
    """Raised when the remote table store rejects a query."""

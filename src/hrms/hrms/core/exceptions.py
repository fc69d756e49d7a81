class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransition(DomainError):
    """Raised when an attendance event is not allowed in the current day state."""

    def __init__(self, message: str, *, state=None, event_type=None):
        super().__init__(message)
        self.state = state
        self.event_type = event_type


class AuthenticationError(DomainError):
    """Raised when no authenticated principal is available."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

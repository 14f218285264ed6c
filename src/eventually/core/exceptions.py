"""Custom exceptions for eventually."""


class EventuallyError(Exception):
    """Base exception for all eventually errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(EventuallyError):
    """Raised when there's a configuration problem."""

    pass


class InvalidHandlerError(EventuallyError, TypeError):
    """Raised when a callable cannot be used as an event handler.

    This is a wiring mistake in the calling code, not a runtime data
    problem, so nothing inside the library ever recovers from it.
    """

    pass


class InvalidEventError(EventuallyError, ValueError):
    """Raised when a published value is not an event record."""

    pass


class MissingCollaboratorError(EventuallyError, LookupError):
    """Raised when no publisher or dispatcher is bound to the current context."""

    pass

"""Core types, validation rules and exceptions for eventually."""

from eventually.core.exceptions import (
    ConfigurationError,
    EventuallyError,
    InvalidEventError,
    InvalidHandlerError,
    MissingCollaboratorError,
)
from eventually.core.types import Event, EventHandler, Publisher, Reactor
from eventually.core.validation import (
    is_record_type,
    validate_event,
    validate_handler,
)

__all__ = [
    # Types
    "Event",
    "EventHandler",
    "Publisher",
    "Reactor",
    # Validation
    "is_record_type",
    "validate_event",
    "validate_handler",
    # Exceptions
    "EventuallyError",
    "ConfigurationError",
    "InvalidHandlerError",
    "InvalidEventError",
    "MissingCollaboratorError",
]

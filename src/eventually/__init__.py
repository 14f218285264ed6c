"""eventually — in-process, type-routed event dispatch.

An event is an instance of a record type (a dataclass, ``NamedTuple`` or
pydantic model); its class is the routing key. A handler is a one-argument
callable annotated with the record type it accepts::

    @dataclass(frozen=True)
    class OrderCompleted:
        order_id: str

    def notify(event: OrderCompleted) -> None:
        print("order completed:", event.order_id)

    mux = PubMux()
    mux.react(notify)
    mux.publish(OrderCompleted(order_id="1234"))

Dispatch is synchronous and follows registration order. Handler
exceptions propagate to the publisher and stop the remaining handlers.
"""

from eventually.context import (
    context_with_publisher,
    current_publisher,
    handle_event,
    publish,
    publish_if_bound,
    raise_event,
    react,
    use_publisher,
)
from eventually.core import (
    ConfigurationError,
    Event,
    EventHandler,
    EventuallyError,
    InvalidEventError,
    InvalidHandlerError,
    MissingCollaboratorError,
    Publisher,
    Reactor,
    is_record_type,
    validate_event,
    validate_handler,
)
from eventually.mux import PubMux
from eventually.recorder import Recorder
from eventually.registry import HandlerRegistry, Subscription
from eventually.replay import Eventually

__version__ = "2.0.0"

__all__ = [
    # Dispatchers
    "PubMux",
    "Eventually",
    "Recorder",
    "HandlerRegistry",
    "Subscription",
    # Context
    "use_publisher",
    "context_with_publisher",
    "current_publisher",
    "publish",
    "publish_if_bound",
    "react",
    "raise_event",
    "handle_event",
    # Types
    "Event",
    "EventHandler",
    "Publisher",
    "Reactor",
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

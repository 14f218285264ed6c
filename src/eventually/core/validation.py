"""Handler and event validation.

An event is an instance of a *record type*: a dataclass, a
``typing.NamedTuple`` or a pydantic model. A handler is a callable with a
single positional parameter whose annotation names the record type it
accepts, and which returns nothing. Lambdas cannot carry annotations, so
every entry point also takes an explicit ``event_type``.
"""

from __future__ import annotations

import dataclasses
import inspect
from types import GenericAlias
from typing import Any

from pydantic import BaseModel

from eventually.core.exceptions import InvalidEventError, InvalidHandlerError

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_NO_RETURN = (inspect.Signature.empty, None, type(None))


def is_record_type(tp: Any) -> bool:
    """Return True if *tp* is a class whose instances can be events."""
    if isinstance(tp, GenericAlias) or not isinstance(tp, type):
        return False
    if dataclasses.is_dataclass(tp):
        return True
    if issubclass(tp, tuple) and hasattr(tp, "_fields"):
        return True
    return issubclass(tp, BaseModel) and tp is not BaseModel


def type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


def handler_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _kind(value: Any) -> str:
    return type(value).__name__


def validate_handler(fn: Any, event_type: type | None = None) -> type:
    """Check that *fn* can handle events and return the type it accepts.

    Raises:
        InvalidHandlerError: naming the first rule *fn* breaks.
    """
    if isinstance(fn, type) or not callable(fn):
        raise InvalidHandlerError(
            f"handler is not a function (got: {_kind(fn)})",
            details={"rule": "callable"},
        )

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise InvalidHandlerError(
            f"handler signature cannot be inspected ({e})",
            details={"rule": "callable"},
        ) from e

    params = list(signature.parameters.values())
    if len(params) != 1:
        raise InvalidHandlerError(
            f"handler should have 1 input parameter (got: {len(params)})",
            details={"rule": "arity", "count": len(params)},
        )
    if params[0].kind not in _POSITIONAL:
        raise InvalidHandlerError(
            f"handler input parameter should be positional (got: {params[0].kind.description})",
            details={"rule": "arity", "count": 1},
        )

    try:
        signature = inspect.signature(fn, eval_str=True)
    except Exception as e:
        raise InvalidHandlerError(
            f"handler annotations cannot be resolved ({e})",
            details={"rule": "parameter"},
        ) from e

    annotation = next(iter(signature.parameters.values())).annotation
    if annotation is inspect.Parameter.empty:
        annotation = None

    if event_type is not None and annotation is not None and annotation is not event_type:
        raise InvalidHandlerError(
            f"handler input parameter is {type_name(annotation)}"
            f" but event_type is {type_name(event_type)}",
            details={"rule": "parameter"},
        )

    accepted = event_type if event_type is not None else annotation
    if accepted is None:
        raise InvalidHandlerError(
            "handler input parameter should be annotated with a record type (got: no annotation)",
            details={"rule": "parameter"},
        )
    if not is_record_type(accepted):
        raise InvalidHandlerError(
            f"handler input parameter should be a record (got: {type_name(accepted)})",
            details={"rule": "parameter"},
        )

    if signature.return_annotation not in _NO_RETURN:
        raise InvalidHandlerError(
            f"handler should have no return value (got: {type_name(signature.return_annotation)})",
            details={"rule": "return"},
        )

    return accepted


def validate_event(event: Any) -> type:
    """Return the routing type of *event*.

    Raises:
        InvalidEventError: when *event* is not an instance of a record type.
    """
    event_type = type(event)
    if isinstance(event, type) or not is_record_type(event_type):
        raise InvalidEventError(
            f"event should be a record (got: {_kind(event)})",
            details={"kind": _kind(event)},
        )
    return event_type

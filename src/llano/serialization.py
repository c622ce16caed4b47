"""Event serialization — JSON round-trip for Llano event sequences.

Converts typed events to/from JSON-compatible dicts. Useful for:
- Feeding the renderer from a parser written in another language
- Recording event streams as test fixtures
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from llano import parse_events
    from llano.serialization import to_json, from_json

    events = parse_events("# Hello **World**")
    restored = from_json(to_json(events))
    assert events == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from llano.errors import SerializationError
from llano.events import (
    BLOCK_KINDS,
    INLINE_KINDS,
    BlockEnd,
    BlockStart,
    CodeText,
    Event,
    HardBreak,
    InlineEnd,
    InlineStart,
    SoftBreak,
    Text,
)

_EVENT_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        BlockStart,
        BlockEnd,
        InlineStart,
        InlineEnd,
        Text,
        CodeText,
        SoftBreak,
        HardBreak,
    )
}

_KIND_TYPES: dict[str, type] = {cls.__name__: cls for cls in (*BLOCK_KINDS, *INLINE_KINDS)}

_CONTAINER_EVENTS = (BlockStart, BlockEnd, InlineStart, InlineEnd)


def to_dict(event: Event) -> dict[str, Any]:
    """Convert an event to a JSON-compatible dict.

    Includes a ``_type`` discriminator on the event and on its kind.

    """
    result: dict[str, Any] = {"_type": type(event).__name__}
    for f in fields(event):
        value = getattr(event, f.name)
        if f.name == "kind":
            value = _kind_to_dict(value)
        result[f.name] = value
    return result


def _kind_to_dict(kind: Any) -> dict[str, Any]:
    result: dict[str, Any] = {"_type": type(kind).__name__}
    for f in fields(kind):
        result[f.name] = getattr(kind, f.name)
    return result


def from_dict(data: dict[str, Any]) -> Event:
    """Reconstruct a typed event from a dict.

    Raises:
        SerializationError: If a ``_type`` is missing or unknown, or a
            container event lacks its kind.

    """
    event_cls = _lookup(_EVENT_TYPES, data, "event")
    if event_cls in _CONTAINER_EVENTS:
        kind_data = data.get("kind")
        if not isinstance(kind_data, dict):
            msg = f"{event_cls.__name__} requires a 'kind' object"
            raise SerializationError(msg)
        return event_cls(kind=_kind_from_dict(kind_data))
    return _build(event_cls, data)


def _kind_from_dict(data: dict[str, Any]) -> Any:
    kind_cls = _lookup(_KIND_TYPES, data, "kind")
    return _build(kind_cls, data)


def _lookup(registry: dict[str, type], data: dict[str, Any], what: str) -> type:
    type_name = data.get("_type")
    if type_name is None:
        msg = f"Missing '_type' field in serialized {what}"
        raise SerializationError(msg)
    cls = registry.get(type_name)
    if cls is None:
        msg = f"Unknown {what} type: {type_name!r}"
        raise SerializationError(msg)
    return cls


def _build(cls: type, data: dict[str, Any]) -> Any:
    kwargs = {f.name: data[f.name] for f in fields(cls) if f.name in data}
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise SerializationError(f"Invalid fields for {cls.__name__}: {exc}") from exc


def to_json(events: Iterable[Event], *, indent: int | None = None) -> str:
    """Serialize an event sequence to a JSON array string.

    Args:
        events: Events to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(event) for event in events], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Event]:
    """Deserialize an event sequence from a JSON array string.

    Raises:
        SerializationError: If the input is not valid JSON or not an array
            of event objects.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of events, got {type(raw).__name__}"
        raise SerializationError(msg)
    events: list[Event] = []
    for item in raw:
        if not isinstance(item, dict):
            msg = f"Expected an event object, got {type(item).__name__}"
            raise SerializationError(msg)
        events.append(from_dict(item))
    return events

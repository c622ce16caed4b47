"""Exception classes for Llano.

Provides standardized exceptions for error handling throughout Llano.
"""

from __future__ import annotations


class LlanoError(Exception):
    """Base exception for all Llano errors.

    Subclass this for specific error categories.
    """

    pass


class MalformedDocument(LlanoError):
    """Event sequence violates the balanced-container contract.

    Raised by the renderer when an end event has no open container,
    closes a container of a different kind, or when containers are
    still open once the event stream is exhausted. Fatal to that call.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize malformed-document error with optional position.

        Args:
            message: Error description
            index: Position of the offending event in the sequence (0-indexed)
        """
        self.message = message
        self.index = index

        location = f"event {index}: " if index is not None else ""
        super().__init__(f"{location}{message}")


class SerializationError(LlanoError, ValueError):
    """Error reading a serialized event sequence.

    Raised for unknown event or kind names and missing fields.
    """

    pass

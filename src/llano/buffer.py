"""OutputBuffer for O(n) plain-text accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Also remembers how many newlines the
buffer currently ends with, so block separators can be topped up to the
required count instead of stacking on top of literal newlines.

Thread Safety:
OutputBuffer instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class OutputBuffer:
    """Append-only text accumulator.

    Usage:
            >>> buf = OutputBuffer()
            >>> buf.append("Hello")
            >>> buf.ensure_newlines(2)
            >>> buf.append("World")
            >>> buf.build()
            'Hello\\n\\nWorld'

    """

    __slots__ = ("_parts", "_trailing_newlines")

    def __init__(self) -> None:
        """Initialize empty OutputBuffer."""
        self._parts: list[str] = []
        self._trailing_newlines = 0

    def append(self, s: str) -> OutputBuffer:
        """Append a string to the buffer.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if not s:
            return self
        self._parts.append(s)
        stripped = s.rstrip("\n")
        if stripped:
            self._trailing_newlines = len(s) - len(stripped)
        else:
            self._trailing_newlines += len(s)
        return self

    def ensure_newlines(self, count: int) -> OutputBuffer:
        """Make the buffer end with at least ``count`` newlines.

        A no-op on an empty buffer: output never starts with a separator.

        Args:
            count: Required number of trailing newlines

        Returns:
            self for method chaining
        """
        if self._parts and count > self._trailing_newlines:
            self.append("\n" * (count - self._trailing_newlines))
        return self

    @property
    def trailing_newlines(self) -> int:
        """Number of newlines at the end of the buffer."""
        return self._trailing_newlines

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)

"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Tracks the running length so callers can
record attribute run offsets while appending.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with offset tracking.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("Hello").append(", ")
            >>> len(sb)
            7
            >>> sb.append("World").build()
            'Hello, World'

    Thread Safety:
        Instance is local to each render() call.
        No shared mutable state.

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string
        """
        return "".join(self._parts)

    def clear(self) -> None:
        """Clear all accumulated content."""
        self._parts.clear()
        self._length = 0

    def __len__(self) -> int:
        """Number of characters appended so far."""
        return self._length

    def __bool__(self) -> bool:
        """Check if builder has content."""
        return bool(self._parts)

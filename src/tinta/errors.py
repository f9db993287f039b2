"""Exception classes for Tinta.

Provides standardized exceptions for error handling throughout Tinta.

Malformed markup is never an error: the scanner degrades to a plainer style
instead. Exceptions cover non-text input, unreadable sources, and internal
scanner invariants.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors.

    Subclass this for specific error categories.
    """

    pass


class InputError(TintaError, TypeError):
    """Input handed to the converter is not decoded text.

    Raised when ``convert()`` receives bytes or any other non-``str`` value.
    Decode bytes first, or use ``convert_file()``.
    """

    def __init__(self, value: object) -> None:
        self.value_type = type(value).__name__
        super().__init__(
            f"expected decoded text (str), got {self.value_type}; "
            "decode the source before converting"
        )


class SourceReadError(TintaError, OSError):
    """A source file could not be read or decoded.

    The underlying ``OSError`` or ``UnicodeDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize read error.

        Args:
            path: Path of the file that failed to load
            reason: Short description of the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't read {path}: {reason}")

    def __str__(self) -> str:
        return f"Couldn't read {self.path}: {self.reason}"


class ScanError(TintaError):
    """Internal scanner invariant was violated.

    Signals a logic error in the inline scanner (for example a cursor that
    stopped advancing), never a problem with the user's markup.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class SerializationError(TintaError, ValueError):
    """Serialized output could not be turned back into typed nodes.

    Raised for a missing or unknown ``_type`` discriminator or an unknown
    enum member name.
    """

    pass

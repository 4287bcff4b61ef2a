"""Exception classes for InputMask.

Only format compilation can fail. Applying a mask to user input never
raises: non-conforming characters are dropped and overflow is truncated.
"""

from __future__ import annotations

from enum import Enum


class InputMaskError(Exception):
    """Base exception for all InputMask errors.

    Subclass this for specific error categories.
    """

    pass


class FormatErrorKind(Enum):
    """Reasons a format string can be rejected by the compiler."""

    UNBALANCED_DELIMITERS = "unbalanced-delimiters"
    UNKNOWN_CLASS_SYMBOL = "unknown-class-symbol"
    DUPLICATE_NOTATION_SYMBOL = "duplicate-notation-symbol"


class FormatError(InputMaskError):
    """Malformed format string or notation set.

    Raised by the format compiler (and the notation registry builder) before
    any mask is constructed. This is a configuration mistake, so callers
    should let it propagate instead of falling back to unmasked input.
    """

    def __init__(
        self,
        kind: FormatErrorKind,
        message: str,
        format_string: str | None = None,
        position: int | None = None,
        symbol: str | None = None,
    ) -> None:
        """Initialize format error with optional location.

        Args:
            kind: Category of the failure
            message: Error description
            format_string: The offending format string (optional)
            position: Zero-based index into format_string (optional)
            symbol: Notation symbol involved in a collision (optional)
        """
        self.kind = kind
        self.message = message
        self.format_string = format_string
        self.position = position
        self.symbol = symbol

        location = ""
        if position is not None:
            location = f" at position {position}"
        if format_string is not None:
            location += f" in {format_string!r}"

        super().__init__(f"{kind.value}{location}: {message}")

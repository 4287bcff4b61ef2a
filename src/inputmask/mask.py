"""Compiled masks and the values exchanged with callers.

CaretString is what a text input reports after an edit (its text plus the
caret position); MaskResult is what applying a mask produces.

Thread Safety:
All three types are frozen (immutable) and safe to share across threads.
A CompiledMask is shared by every caller that compiles the same format with
the same notations (see inputmask.cache).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inputmask.notation import Notation
    from inputmask.states import State


@dataclass(frozen=True, slots=True)
class CaretString:
    """Text plus the caret position inside it.

    The caret defaults to the end of the text. Positions are character
    offsets, 0 <= caret_index <= len(text).

    Examples:
        >>> CaretString("123")
        CaretString(text='123', caret_index=3)
        >>> CaretString("123", 1).caret_index
        1

    """

    text: str
    caret_index: int = -1

    def __post_init__(self) -> None:
        if self.caret_index == -1:
            object.__setattr__(self, "caret_index", len(self.text))
        elif not 0 <= self.caret_index <= len(self.text):
            msg = f"Caret index {self.caret_index} outside of text of length {len(self.text)}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MaskResult:
    """Outcome of applying a mask to edited text.

    Attributes:
        formatted_text: Formatted text with the relocated caret
        extracted_value: Valuable characters, in the order they were matched
        complete: Whether at least acceptable_value_length valuable
            characters were filled
        affinity: Accepted input characters minus rejected ones (dropped
            or truncated); used by the whole-string affinity strategy

    """

    formatted_text: CaretString
    extracted_value: str
    complete: bool
    affinity: int = 0


@dataclass(frozen=True, slots=True, eq=False)
class CompiledMask:
    """Immutable automaton compiled from a format string and notations.

    Create with inputmask.compiler.compile_format or, preferably, the cached
    inputmask.cache.get_or_create_mask.

    Attributes:
        format_string: Source format
        notations: Custom notations the format was compiled with
        head: First state of the chain (END for an empty format)
        placeholder: Formatted text for empty input with autocomplete
        acceptable_text_length: States up to and including the last
            non-optional one
        total_text_length: Literal plus valuable states
        acceptable_value_length: Mandatory valuable states
        total_value_length: All valuable states

    """

    format_string: str
    notations: frozenset[Notation]
    head: State = field(repr=False)
    placeholder: str
    acceptable_text_length: int
    total_text_length: int
    acceptable_value_length: int
    total_value_length: int

    def apply(self, text: CaretString | str, autocomplete: bool = False) -> MaskResult:
        """Apply this mask to edited text.

        Args:
            text: Edited text; a plain string puts the caret at its end
            autocomplete: Append literals that follow the last matched state

        Returns:
            Fresh MaskResult. Never raises on user input.
        """
        from inputmask.applicator import apply_mask

        if isinstance(text, str):
            text = CaretString(text)
        return apply_mask(self, text, autocomplete)

    def states(self) -> Iterator[State]:
        """Iterate over the chain, excluding the terminal END state."""
        return iter(self.head)

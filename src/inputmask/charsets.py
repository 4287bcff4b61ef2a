"""Character classes used by the built-in notations.

Digits and letters are Unicode-aware: a class is a predicate over a single
character rather than an enumerated set, so "٣" is a digit and "é" a letter.
Custom notations use explicit frozensets instead (see inputmask.notation).

Usage:
    from inputmask.charsets import DIGIT

    if DIGIT.accepts(char):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CharacterClass:
    """Named set of characters a valuable state accepts.

    Either ``predicate`` or ``characters`` decides membership. Frozen and
    safe to share between compiled masks.
    """

    name: str
    characters: frozenset[str] = frozenset()
    predicate: Callable[[str], bool] | None = None

    def accepts(self, char: str) -> bool:
        if self.predicate is not None:
            return self.predicate(char)
        return char in self.characters


DIGIT = CharacterClass("digit", predicate=str.isdecimal)
LETTER = CharacterClass("letter", predicate=str.isalpha)
ANY_SYMBOL = CharacterClass("any", predicate=lambda char: len(char) == 1)

# Characters with syntactic meaning in a format string
SEGMENT_OPEN = "["
SEGMENT_CLOSE = "]"
ESCAPE = "\\"
RESERVED_SYMBOLS: frozenset[str] = frozenset((SEGMENT_OPEN, SEGMENT_CLOSE, ESCAPE))

# Built-in class symbols: symbol -> (class, is_optional)
BUILTIN_SYMBOLS: dict[str, tuple[CharacterClass, bool]] = {
    "0": (DIGIT, False),
    "9": (DIGIT, True),
    "A": (LETTER, False),
    "a": (LETTER, True),
    "_": (ANY_SYMBOL, False),
    "-": (ANY_SYMBOL, True),
}

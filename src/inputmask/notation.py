"""Custom character-class notations and their registry.

A Notation binds a single symbol, usable inside a ``[...]`` segment of a
format string, to a set of accepted characters.

Thread Safety:
Notation and NotationRegistry are immutable after creation. Safe to share.
Use NotationRegistryBuilder for mutable construction.

Example:
    >>> hex_digit = Notation("h", frozenset("0123456789abcdef"))
    >>> registry = NotationRegistryBuilder().register(hex_digit).build()
    >>> registry.get("h") is hex_digit
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from inputmask.charsets import BUILTIN_SYMBOLS, RESERVED_SYMBOLS, CharacterClass
from inputmask.errors import FormatError, FormatErrorKind


@dataclass(frozen=True, slots=True)
class Notation:
    """Custom character class bound to a format symbol.

    Attributes:
        symbol: Single character used inside ``[...]`` segments
        character_set: Characters accepted at positions using this symbol
        is_optional: Whether positions using this symbol may stay empty

    """

    symbol: str
    character_set: frozenset[str]
    is_optional: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            msg = f"Notation symbol must be a single character, got {self.symbol!r}"
            raise ValueError(msg)
        # Accept any iterable of characters (str, set, list) but store a frozenset
        object.__setattr__(self, "character_set", frozenset(self.character_set))

    @property
    def character_class(self) -> CharacterClass:
        return CharacterClass(f"notation {self.symbol!r}", characters=self.character_set)


class NotationRegistry:
    """Immutable symbol -> Notation lookup.

    Use NotationRegistryBuilder (or ``NotationRegistry.of``) to create
    instances; the builder enforces symbol uniqueness.
    """

    __slots__ = ("_by_symbol", "_notations")

    def __init__(self, notations: tuple[Notation, ...], by_symbol: dict[str, Notation]) -> None:
        self._notations = notations
        self._by_symbol = by_symbol

    @classmethod
    def of(cls, notations: Iterable[Notation] | NotationRegistry | None) -> NotationRegistry:
        """Build a registry from notations, or return an existing registry as is.

        Raises:
            FormatError: If two notations share a symbol or a notation
                reuses a built-in or reserved symbol
        """
        if isinstance(notations, NotationRegistry):
            return notations
        if not notations:
            return EMPTY_REGISTRY
        builder = NotationRegistryBuilder()
        # A set cannot hold the same notation twice; mirror that for sequences
        for notation in dict.fromkeys(notations):
            builder.register(notation)
        return builder.build()

    def get(self, symbol: str) -> Notation | None:
        return self._by_symbol.get(symbol)

    @property
    def symbols(self) -> frozenset[str]:
        return frozenset(self._by_symbol)

    @property
    def notations(self) -> tuple[Notation, ...]:
        return self._notations

    @property
    def key(self) -> frozenset[Notation]:
        """Order-independent identity of the notation set, used for caching."""
        return frozenset(self._notations)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._by_symbol

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __repr__(self) -> str:
        return f"NotationRegistry({sorted(self._by_symbol)!r})"


class NotationRegistryBuilder:
    """Mutable builder for NotationRegistry.

    Example:
        >>> builder = NotationRegistryBuilder()
        >>> builder.register(Notation("h", frozenset("0123456789abcdef")))
        >>> builder.register(Notation("s", frozenset("+-"), is_optional=True))
        >>> registry = builder.build()
    """

    __slots__ = ("_by_symbol", "_notations")

    def __init__(self) -> None:
        self._notations: list[Notation] = []
        self._by_symbol: dict[str, Notation] = {}

    def register(self, notation: Notation) -> NotationRegistryBuilder:
        """Register a notation.

        Args:
            notation: Notation to add

        Returns:
            Self for chaining

        Raises:
            FormatError: If the symbol is built-in, reserved, or already registered
        """
        symbol = notation.symbol
        if symbol in BUILTIN_SYMBOLS:
            msg = f"Notation symbol {symbol!r} collides with a built-in symbol"
            raise FormatError(FormatErrorKind.DUPLICATE_NOTATION_SYMBOL, msg, symbol=symbol)
        if symbol in RESERVED_SYMBOLS:
            msg = f"Notation symbol {symbol!r} is reserved by the format syntax"
            raise FormatError(FormatErrorKind.DUPLICATE_NOTATION_SYMBOL, msg, symbol=symbol)
        if symbol in self._by_symbol:
            msg = f"Notation symbol {symbol!r} is already registered"
            raise FormatError(FormatErrorKind.DUPLICATE_NOTATION_SYMBOL, msg, symbol=symbol)

        self._by_symbol[symbol] = notation
        self._notations.append(notation)
        return self

    def build(self) -> NotationRegistry:
        """Build immutable registry from registered notations."""
        return NotationRegistry(tuple(self._notations), dict(self._by_symbol))


EMPTY_REGISTRY = NotationRegistry((), {})

"""Format compiler: format string + notations -> CompiledMask.

Grammar:
    Text outside brackets is literal and is copied to the formatted output
    but never to the extracted value. ``[...]`` encloses a valuable segment,
    one class symbol per position. ``\\`` escapes the next literal character.

Built-in symbols:
    ``0`` digit, ``9`` optional digit, ``A`` letter, ``a`` optional letter,
    ``_`` any symbol, ``-`` optional any symbol.

Example:
    >>> mask = compile_format("+1 ([000]) [000]-[0000]")
    >>> mask.total_value_length
    10
    >>> mask.placeholder
    '+1 ('

The compiler performs a single left-to-right scan and either returns a
complete mask or raises FormatError; it never hands out a partial chain.
Prefer inputmask.cache.get_or_create_mask, which memoizes this function.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from inputmask.charsets import (
    BUILTIN_SYMBOLS,
    ESCAPE,
    SEGMENT_CLOSE,
    SEGMENT_OPEN,
    CharacterClass,
)
from inputmask.errors import FormatError, FormatErrorKind
from inputmask.mask import CompiledMask
from inputmask.notation import Notation, NotationRegistry
from inputmask.states import State, StateKind, literal, valuable
from inputmask.utils.logger import get_logger

logger = get_logger(__name__)


class _Slot(NamedTuple):
    """A state waiting to be linked; the chain is built back to front."""

    kind: StateKind
    char: str = ""
    symbol: str = ""
    character_class: CharacterClass | None = None


def compile_format(
    format_string: str,
    notations: Iterable[Notation] | NotationRegistry | None = None,
) -> CompiledMask:
    """Compile a format string into a mask automaton.

    Args:
        format_string: Format such as ``"+1 ([000]) [000]-[0000]"``
        notations: Custom notations usable inside ``[...]`` segments

    Returns:
        New CompiledMask (uncached)

    Raises:
        FormatError: On unbalanced delimiters, unknown class symbols or
            notation symbol collisions
    """
    registry = resolve_notations(format_string, notations)
    slots = _scan(format_string, registry)

    acceptable_text_length = 0
    acceptable_value_length = 0
    total_value_length = 0
    for index, slot in enumerate(slots):
        if slot.kind is StateKind.VALUABLE_OPTIONAL:
            total_value_length += 1
            continue
        acceptable_text_length = index + 1
        if slot.kind is StateKind.VALUABLE_MANDATORY:
            acceptable_value_length += 1
            total_value_length += 1

    head = State(StateKind.END)
    for slot in reversed(slots):
        if slot.kind is StateKind.LITERAL:
            head = literal(slot.char, head)
        else:
            assert slot.character_class is not None
            optional = slot.kind is StateKind.VALUABLE_OPTIONAL
            head = valuable(slot.symbol, slot.character_class, optional, head)

    placeholder = "".join(state.char for state in _leading_literals(head))

    logger.debug(
        "Compiled format %r: %d states, %d/%d valuable",
        format_string,
        len(slots),
        acceptable_value_length,
        total_value_length,
    )

    return CompiledMask(
        format_string=format_string,
        notations=registry.key,
        head=head,
        placeholder=placeholder,
        acceptable_text_length=acceptable_text_length,
        total_text_length=len(slots),
        acceptable_value_length=acceptable_value_length,
        total_value_length=total_value_length,
    )


def resolve_notations(
    format_string: str,
    notations: Iterable[Notation] | NotationRegistry | None,
) -> NotationRegistry:
    """Build the notation registry a format is compiled with.

    Symbol collisions are reported against ``format_string``, at the first
    index where the colliding symbol appears (or at the end of the format
    when it never does).

    Raises:
        FormatError: On a notation symbol collision
    """
    try:
        return NotationRegistry.of(notations)
    except FormatError as err:
        position = len(format_string)
        if err.symbol is not None and err.symbol in format_string:
            position = format_string.index(err.symbol)
        raise FormatError(
            err.kind, err.message, format_string, position, err.symbol
        ) from err


def _scan(format_string: str, registry: NotationRegistry) -> list[_Slot]:
    slots: list[_Slot] = []
    segment_start = -1  # index of the open bracket while inside [...]
    pos = 0
    length = len(format_string)

    while pos < length:
        char = format_string[pos]

        if segment_start >= 0:
            if char == SEGMENT_CLOSE:
                segment_start = -1
            elif char == SEGMENT_OPEN:
                raise _unbalanced("Nested '[' inside a valuable segment", format_string, pos)
            elif char == ESCAPE:
                msg = "Escapes are not allowed inside a valuable segment"
                raise _unbalanced(msg, format_string, pos)
            else:
                slots.append(_resolve_symbol(char, registry, format_string, pos))
        elif char == SEGMENT_OPEN:
            segment_start = pos
        elif char == SEGMENT_CLOSE:
            raise _unbalanced("']' without a matching '['", format_string, pos)
        elif char == ESCAPE:
            pos += 1
            if pos >= length:
                raise _unbalanced("Dangling escape at end of format", format_string, pos - 1)
            slots.append(_Slot(StateKind.LITERAL, char=format_string[pos]))
        else:
            slots.append(_Slot(StateKind.LITERAL, char=char))

        pos += 1

    if segment_start >= 0:
        raise _unbalanced("'[' is never closed", format_string, segment_start)

    return slots


def _resolve_symbol(
    symbol: str, registry: NotationRegistry, format_string: str, pos: int
) -> _Slot:
    """Resolve a class symbol against built-ins first, then custom notations."""
    builtin = BUILTIN_SYMBOLS.get(symbol)
    if builtin is not None:
        character_class, optional = builtin
    else:
        notation = registry.get(symbol)
        if notation is None:
            raise FormatError(
                FormatErrorKind.UNKNOWN_CLASS_SYMBOL,
                f"No built-in class or notation for symbol {symbol!r}",
                format_string,
                pos,
            )
        character_class, optional = notation.character_class, notation.is_optional

    kind = StateKind.VALUABLE_OPTIONAL if optional else StateKind.VALUABLE_MANDATORY
    return _Slot(kind, symbol=symbol, character_class=character_class)


def _leading_literals(head: State) -> list[State]:
    run = []
    for state in head:
        if not state.is_literal:
            break
        run.append(state)
    return run


def _unbalanced(message: str, format_string: str, pos: int) -> FormatError:
    return FormatError(FormatErrorKind.UNBALANCED_DELIMITERS, message, format_string, pos)

"""States of a compiled mask automaton.

A compiled mask is a straight chain of states: every non-terminal state owns
a reference to exactly one successor and the chain always ends with a single
END state. There is no branching and no backtracking.

Thread Safety:
State is frozen (immutable) and safe to share across threads.
StateKind is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from inputmask.charsets import CharacterClass


class StateKind(Enum):
    """Kinds of states produced by the format compiler."""

    LITERAL = auto()  # decorative character, never part of the value
    VALUABLE_MANDATORY = auto()  # [0], [A], [_] and mandatory notations
    VALUABLE_OPTIONAL = auto()  # [9], [a], [-] and optional notations
    END = auto()


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class State:
    """One node of the compiled automaton.

    Attributes:
        kind: What the state matches
        child: Successor state (None only for END)
        char: The literal character (LITERAL only)
        character_class: Accepted characters (valuable states only)
        symbol: Format symbol the state was compiled from (valuable states only)

    """

    kind: StateKind
    child: State | None = None
    char: str = ""
    character_class: CharacterClass | None = None
    symbol: str = ""

    @property
    def is_end(self) -> bool:
        return self.kind is StateKind.END

    @property
    def is_literal(self) -> bool:
        return self.kind is StateKind.LITERAL

    @property
    def is_valuable(self) -> bool:
        return self.kind is StateKind.VALUABLE_MANDATORY or self.kind is StateKind.VALUABLE_OPTIONAL

    @property
    def is_optional(self) -> bool:
        return self.kind is StateKind.VALUABLE_OPTIONAL

    def accepts(self, char: str) -> bool:
        """Check whether ``char`` can be consumed by this state."""
        if self.kind is StateKind.LITERAL:
            return char == self.char
        if self.character_class is not None:
            return self.character_class.accepts(char)
        return False

    def __iter__(self) -> Iterator[State]:
        """Walk the chain from this state, excluding the END state."""
        state: State | None = self
        while state is not None and state.kind is not StateKind.END:
            yield state
            state = state.child

    def __repr__(self) -> str:
        if self.kind is StateKind.LITERAL:
            return f"State(LITERAL, {self.char!r})"
        if self.is_valuable:
            return f"State({self.kind.name}, {self.symbol!r})"
        return "State(END)"


def literal(char: str, child: State) -> State:
    return State(StateKind.LITERAL, child=child, char=char)


def valuable(symbol: str, character_class: CharacterClass, optional: bool, child: State) -> State:
    kind = StateKind.VALUABLE_OPTIONAL if optional else StateKind.VALUABLE_MANDATORY
    return State(kind, child=child, character_class=character_class, symbol=symbol)

"""Affinity strategies: how well does a mask explain the text typed so far?

Each strategy is a member of the closed AffinityStrategy enum and exposes
the same ``score(mask, text) -> int`` capability. A masking session picks
one strategy up front and keeps it; scores are only compared with other
scores from the same strategy.

All strategies apply the candidate mask without autocomplete.

Thread Safety:
    Strategies are enum members (immutable) and scoring is pure.

"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from inputmask.mask import CaretString

if TYPE_CHECKING:
    from inputmask.mask import CompiledMask

# Score for a mask that cannot hold the text at all
MIN_AFFINITY = -(2**63)


class AffinityStrategy(Enum):
    """Named affinity calculation policies."""

    WHOLE_STRING = "whole_string"  # accepted minus rejected characters
    PREFIX = "prefix"  # common prefix of formatted and raw text
    CAPACITY = "capacity"  # room left for text in the mask
    EXTRACTED_VALUE_CAPACITY = "extracted_value_capacity"  # room left for the value

    def score(self, mask: CompiledMask, text: CaretString | str) -> int:
        """Score ``mask`` against ``text``; higher means a better fit."""
        if isinstance(text, str):
            text = CaretString(text)
        return _SCORERS[self](mask, text)

    @classmethod
    def from_name(cls, name: str | AffinityStrategy) -> AffinityStrategy:
        """Look up a strategy by value or member name, case-insensitively.

        Raises:
            ValueError: If no strategy has that name
        """
        if isinstance(name, AffinityStrategy):
            return name
        normalized = name.strip().lower().replace("-", "_")
        for strategy in cls:
            if strategy.value == normalized:
                return strategy
        msg = f"Unknown affinity strategy {name!r}; expected one of {[s.value for s in cls]}"
        raise ValueError(msg)


def _whole_string(mask: CompiledMask, text: CaretString) -> int:
    return mask.apply(text, autocomplete=False).affinity


def _prefix(mask: CompiledMask, text: CaretString) -> int:
    formatted = mask.apply(text, autocomplete=False).formatted_text.text
    common = 0
    for produced, typed in zip(formatted, text.text):
        if produced != typed:
            break
        common += 1
    return common


def _capacity(mask: CompiledMask, text: CaretString) -> int:
    if len(text.text) > mask.total_text_length:
        return MIN_AFFINITY
    return len(text.text) - mask.total_text_length


def _extracted_value_capacity(mask: CompiledMask, text: CaretString) -> int:
    value = mask.apply(text, autocomplete=False).extracted_value
    if len(value) > mask.total_value_length:
        return MIN_AFFINITY
    return len(value) - mask.total_value_length


_SCORERS: dict[AffinityStrategy, Callable[[CompiledMask, CaretString], int]] = {
    AffinityStrategy.WHOLE_STRING: _whole_string,
    AffinityStrategy.PREFIX: _prefix,
    AffinityStrategy.CAPACITY: _capacity,
    AffinityStrategy.EXTRACTED_VALUE_CAPACITY: _extracted_value_capacity,
}


def calculate_affinity(
    mask: CompiledMask,
    text: CaretString | str,
    strategy: AffinityStrategy = AffinityStrategy.WHOLE_STRING,
) -> int:
    """Score ``mask`` against ``text`` with ``strategy`` (whole string by default)."""
    return strategy.score(mask, text)

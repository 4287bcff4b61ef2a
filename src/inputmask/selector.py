"""Mask selection among a primary format and its alternatives.

The primary mask wins ties and wins whenever no alternative strictly
outscores it. Among alternatives that do, the highest score wins and
earlier-declared alternatives win ties among themselves.

Example:
    >>> primary = get_or_create_mask("+7 ([000]) [000]-[00]-[00]")
    >>> alternative = get_or_create_mask("8 ([000]) [000]-[00]-[00]")
    >>> select_mask(primary, [alternative], CaretString("8 (999")) is alternative
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from inputmask.affinity import AffinityStrategy
from inputmask.mask import CaretString, CompiledMask
from inputmask.utils.logger import get_logger

logger = get_logger(__name__)


class MaskAndAffinity(NamedTuple):
    mask: CompiledMask
    affinity: int


def rank_masks(
    primary: CompiledMask,
    alternatives: Sequence[CompiledMask],
    text: CaretString | str,
    strategy: AffinityStrategy = AffinityStrategy.WHOLE_STRING,
) -> list[MaskAndAffinity]:
    """Order the primary mask and its alternatives by affinity, best first.

    Alternatives are sorted by descending affinity (stable, so declaration
    order breaks ties). The primary is inserted before the first
    alternative it equals or outscores, or appended if every alternative
    strictly outscores it.
    """
    if isinstance(text, str):
        text = CaretString(text)

    primary_affinity = strategy.score(primary, text)
    ranked = sorted(
        (MaskAndAffinity(mask, strategy.score(mask, text)) for mask in alternatives),
        key=lambda pair: pair.affinity,
        reverse=True,
    )

    insert_index = len(ranked)
    for index, pair in enumerate(ranked):
        if pair.affinity <= primary_affinity:
            insert_index = index
            break

    ranked.insert(insert_index, MaskAndAffinity(primary, primary_affinity))
    return ranked


def select_mask(
    primary: CompiledMask,
    alternatives: Sequence[CompiledMask],
    text: CaretString | str,
    strategy: AffinityStrategy = AffinityStrategy.WHOLE_STRING,
) -> CompiledMask:
    """Pick the mask that best fits ``text``.

    Args:
        primary: Mask used when nothing fits better
        alternatives: Candidate masks in declaration order
        text: Text typed so far
        strategy: Affinity calculation policy

    Returns:
        The winning mask. With no alternatives, ``primary`` is returned
        without scoring anything.
    """
    if not alternatives:
        return primary

    ranked = rank_masks(primary, alternatives, text, strategy)
    winner = ranked[0]
    logger.debug(
        "Selected mask %r (affinity %d) out of %d candidates",
        winner.mask.format_string,
        winner.affinity,
        len(ranked),
    )
    return winner.mask

"""
InputMask: masked text input for Python

Formats raw keystrokes into a declared shape in real time, extracts the
meaningful characters separately from decorative ones, relocates the caret
after each edit and reports whether every mandatory position is filled.
Zero runtime dependencies.

Quick Start:
    >>> from inputmask import apply_format
    >>> result = apply_format("+1 ([000]) [000]-[0000]", "2025551234")
    >>> result.formatted_text.text
    '+1 (202) 555-1234'
    >>> result.extracted_value
    '2025551234'
    >>> result.complete
    True

    >>> # Or drive a session from text-field edit events
    >>> from inputmask import MaskConfig, MaskedInput
    >>> session = MaskedInput(MaskConfig(primary_format="[00].[00]"))

Custom Notations:
    >>> from inputmask import Notation, get_or_create_mask
    >>> hex_digit = Notation("h", frozenset("0123456789abcdef"))
    >>> mask = get_or_create_mask("#[hhhhhh]", [hex_digit])
    >>> mask.apply("ff00aa").formatted_text.text
    '#ff00aa'

Installation:
    pip install inputmask
"""

from collections.abc import Iterable

from inputmask.affinity import MIN_AFFINITY, AffinityStrategy, calculate_affinity
from inputmask.applicator import apply_mask
from inputmask.cache import MaskCache, default_mask_cache, get_or_create_mask
from inputmask.charsets import ANY_SYMBOL, BUILTIN_SYMBOLS, DIGIT, LETTER, CharacterClass
from inputmask.compiler import compile_format
from inputmask.config import MaskConfig
from inputmask.errors import FormatError, FormatErrorKind, InputMaskError
from inputmask.mask import CaretString, CompiledMask, MaskResult
from inputmask.notation import Notation, NotationRegistry, NotationRegistryBuilder
from inputmask.profiling import MaskAccumulator, get_mask_accumulator, profiled_masking
from inputmask.selector import MaskAndAffinity, rank_masks, select_mask
from inputmask.session import MaskedInput
from inputmask.states import State, StateKind

__version__ = "0.1.0"


def apply_format(
    format_string: str,
    text: CaretString | str,
    *,
    notations: Iterable[Notation] | None = None,
    autocomplete: bool = False,
) -> MaskResult:
    """Format text with a (cached) mask in one call.

    Args:
        format_string: Mask format, e.g. ``"[00]/[00]/[0000]"``
        text: Raw text; a plain string puts the caret at its end
        notations: Custom notations used by the format
        autocomplete: Append the literals following the last filled position

    Returns:
        MaskResult with formatted text, caret, extracted value and completeness

    Raises:
        FormatError: If the format is malformed

    Example:
        >>> apply_format("[00]/[00]", "1231", autocomplete=True).formatted_text.text
        '12/31'
    """
    mask = get_or_create_mask(format_string, notations)
    return mask.apply(text, autocomplete)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "apply_format",
    "apply_mask",
    "compile_format",
    "get_or_create_mask",
    # Data types
    "CaretString",
    "CompiledMask",
    "MaskResult",
    "State",
    "StateKind",
    # Character classes and notations
    "CharacterClass",
    "ANY_SYMBOL",
    "BUILTIN_SYMBOLS",
    "DIGIT",
    "LETTER",
    "Notation",
    "NotationRegistry",
    "NotationRegistryBuilder",
    # Mask cache
    "MaskCache",
    "default_mask_cache",
    # Affinity and selection
    "AffinityStrategy",
    "MIN_AFFINITY",
    "calculate_affinity",
    "MaskAndAffinity",
    "rank_masks",
    "select_mask",
    # Session
    "MaskConfig",
    "MaskedInput",
    # Profiling
    "MaskAccumulator",
    "get_mask_accumulator",
    "profiled_masking",
    # Errors
    "InputMaskError",
    "FormatError",
    "FormatErrorKind",
]

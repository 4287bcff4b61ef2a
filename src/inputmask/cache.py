"""Process-wide cache of compiled masks.

Maps (format string, notation set) -> CompiledMask. Entries are created
lazily on first request and never evicted: an application uses a small,
finite number of formats.

Thread Safety:
    Lookups are plain dict reads. Population uses ``dict.setdefault``, an
    atomic insert-if-absent, so two threads missing on the same key at once
    both compile, but only the first published mask is ever handed out.
    Published masks are immutable, so readers never coordinate with writers.

Example:
    >>> from inputmask import get_or_create_mask
    >>> mask1 = get_or_create_mask("[000]-[00]")
    >>> mask2 = get_or_create_mask("[000]-[00]")  # Cache hit, no re-compile
    >>> mask1 is mask2
    True
"""

from __future__ import annotations

from collections.abc import Iterable

from inputmask.compiler import compile_format, resolve_notations
from inputmask.mask import CompiledMask
from inputmask.notation import Notation, NotationRegistry
from inputmask.utils.logger import get_logger

logger = get_logger(__name__)

CacheKey = tuple[str, frozenset[Notation]]


class MaskCache:
    """In-memory mask cache with insert-if-absent publication."""

    __slots__ = ("_masks",)

    def __init__(self) -> None:
        self._masks: dict[CacheKey, CompiledMask] = {}

    def get_or_create(
        self,
        format_string: str,
        notations: Iterable[Notation] | NotationRegistry | None = None,
    ) -> CompiledMask:
        """Return the cached mask for this key, compiling it on a miss.

        Raises:
            FormatError: If the format or notations are malformed. Nothing
                is cached in that case.
        """
        registry = resolve_notations(format_string, notations)
        key = (format_string, registry.key)

        mask = self._masks.get(key)
        if mask is not None:
            return mask

        logger.debug("Mask cache miss for %r", format_string)
        return self._masks.setdefault(key, compile_format(format_string, registry))

    def get(
        self,
        format_string: str,
        notations: Iterable[Notation] | NotationRegistry | None = None,
    ) -> CompiledMask | None:
        """Return the cached mask if present, else None. Never compiles."""
        key = (format_string, resolve_notations(format_string, notations).key)
        return self._masks.get(key)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._masks

    def __len__(self) -> int:
        return len(self._masks)


# Created on import, lives for the whole process
_DEFAULT_CACHE = MaskCache()


def default_mask_cache() -> MaskCache:
    """Get the process-wide mask cache."""
    return _DEFAULT_CACHE


def get_or_create_mask(
    format_string: str,
    notations: Iterable[Notation] | NotationRegistry | None = None,
) -> CompiledMask:
    """Compile ``format_string`` once per process and reuse the result.

    Args:
        format_string: Mask format
        notations: Custom notations; order does not affect the cache key

    Returns:
        Shared, immutable CompiledMask

    Raises:
        FormatError: If the format or notations are malformed
    """
    return _DEFAULT_CACHE.get_or_create(format_string, notations)

"""InputMask MaskAccumulator: opt-in profiling for mask application.

This module provides accumulated metrics while masks are applied:
- Number of apply calls
- Input characters processed
- Characters dropped because no state accepted them
- Characters truncated because the mask was already full

Zero overhead when disabled (get_mask_accumulator() returns None).

Example:
    from inputmask import get_or_create_mask
    from inputmask.profiling import profiled_masking

    mask = get_or_create_mask("[000]-[000]")
    with profiled_masking() as metrics:
        mask.apply("123x456")

    print(metrics.summary())
    # {"total_ms": 0.1, "apply_calls": 1, "input_length": 7, "dropped": 1, "truncated": 0}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class MaskAccumulator:
    """Accumulated metrics during mask application.

    Attributes:
        start_time: Profiling start timestamp.
        apply_calls: Number of apply calls recorded.
        input_length: Total input characters seen.
        dropped: Characters rejected by a valuable state.
        truncated: Characters left over once the mask was full.

    """

    start_time: float = field(default_factory=perf_counter)
    apply_calls: int = 0
    input_length: int = 0
    dropped: int = 0
    truncated: int = 0

    def record_apply(self, input_length: int, dropped: int, truncated: int) -> None:
        """Record one apply call."""
        self.apply_calls += 1
        self.input_length += input_length
        self.dropped += dropped
        self.truncated += truncated

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of masking metrics.

        Returns:
            Dict with total_ms, apply_calls, input_length, dropped, truncated.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "apply_calls": self.apply_calls,
            "input_length": self.input_length,
            "dropped": self.dropped,
            "truncated": self.truncated,
        }


_accumulator: ContextVar[MaskAccumulator | None] = ContextVar(
    "mask_accumulator",
    default=None,
)


def get_mask_accumulator() -> MaskAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_masking() -> Iterator[MaskAccumulator]:
    """Context manager for profiled mask application.

    Creates a MaskAccumulator and makes it available via
    get_mask_accumulator() for the duration of the with block.

    Yields:
        MaskAccumulator that will be populated by apply calls.

    """
    acc = MaskAccumulator()
    token: Token[MaskAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)

"""Headless masked-input session.

MaskedInput turns the edit events of a text field (insert, delete, replace,
focus, clear) into MaskResults, choosing among the configured formats on
every edit. It does not touch any widget: the caller writes
``result.formatted_text`` back into its field and moves the caret.

Listeners are notified with ``(complete, extracted_value)`` after every
edit that produces a result.

Thread Safety:
    A session holds only immutable configuration plus its listener list.
    Drive one session from one thread (as a UI toolkit does); any number of
    sessions can share the process-wide mask cache concurrently.

Example:
    >>> session = MaskedInput(MaskConfig(primary_format="+1 ([000]) [000]-[0000]"))
    >>> session.focus("").formatted_text.text
    '+1 ('
    >>> result = session.edit("+1 (", start=4, length=0, replacement="202")
    >>> result.formatted_text
    CaretString(text='+1 (202) ', caret_index=9)
"""

from __future__ import annotations

from collections.abc import Callable

from inputmask.cache import get_or_create_mask
from inputmask.config import MaskConfig
from inputmask.mask import CaretString, CompiledMask, MaskResult
from inputmask.selector import select_mask
from inputmask.utils.logger import get_logger

logger = get_logger(__name__)

MaskListener = Callable[[bool, str], None]


class MaskedInput:
    """Masking session driven by text-field edit events.

    Usage:
        >>> session = MaskedInput(
        ...     MaskConfig(
        ...         primary_format="[00]/[00]/[0000]",
        ...         affine_formats=("[00]/[0000]",),
        ...     ),
        ...     on_change=lambda value, complete: print(value, complete),
        ... )
        >>> session.put("12252024").formatted_text.text
        12252024 True
        '12/25/2024'

    """

    __slots__ = ("_config", "_listeners", "_on_change")

    def __init__(
        self,
        config: MaskConfig | None = None,
        *,
        on_change: Callable[[str, bool], None] | None = None,
    ) -> None:
        """Initialize the session and validate every configured format.

        Args:
            config: Session configuration (empty primary format if None)
            on_change: Optional callback receiving ``(value, complete)``

        Raises:
            FormatError: If any configured format or notation is malformed
        """
        self._config = config or MaskConfig()
        self._listeners: list[MaskListener] = []
        self._on_change = on_change

        # Fail fast: a broken format must never degrade to unmasked input
        self.primary_mask  # noqa: B018
        alternatives = self._affine_masks()
        logger.debug(
            "Masked input for %r with %d alternative format(s)",
            self._config.primary_format,
            len(alternatives),
        )

    @property
    def config(self) -> MaskConfig:
        return self._config

    @property
    def primary_mask(self) -> CompiledMask:
        return get_or_create_mask(self._config.primary_format, self._config.custom_notations)

    @property
    def placeholder(self) -> str:
        """Formatted text of an empty field with autocomplete."""
        return self.primary_mask.placeholder

    @property
    def acceptable_text_length(self) -> int:
        """Minimal text length with every mandatory position filled."""
        return self.primary_mask.acceptable_text_length

    @property
    def total_text_length(self) -> int:
        """Maximal text length of the field."""
        return self.primary_mask.total_text_length

    @property
    def acceptable_value_length(self) -> int:
        """Minimal extracted value length with every mandatory position filled."""
        return self.primary_mask.acceptable_value_length

    @property
    def total_value_length(self) -> int:
        """Maximal extracted value length."""
        return self.primary_mask.total_value_length

    def add_listener(self, listener: MaskListener) -> None:
        """Register ``listener(complete, value)``; called after every edit."""
        self._listeners.append(listener)

    def remove_listener(self, listener: MaskListener) -> None:
        """Unregister a listener.

        Raises:
            ValueError: If the listener was never registered
        """
        self._listeners.remove(listener)

    def pick_mask(self, text: CaretString) -> CompiledMask:
        """Choose the primary mask or the alternative that fits ``text`` better.

        Candidates are scored without autocomplete, so the choice is the same
        whichever flag the winner is then applied with.
        """
        return select_mask(
            self.primary_mask,
            self._affine_masks(),
            text,
            self._config.affinity_strategy,
        )

    def put(self, text: str, autocomplete: bool | None = None) -> MaskResult:
        """Replace the whole field content with ``text``; caret goes to the end.

        Args:
            text: New raw content
            autocomplete: Overrides the configured autocomplete policy

        Returns:
            MaskResult for the new content
        """
        if autocomplete is None:
            autocomplete = self._config.autocomplete
        caret_string = CaretString(text)
        mask = self.pick_mask(caret_string)
        result = mask.apply(caret_string, autocomplete)
        self._notify(result)
        return result

    def edit(self, text: str, start: int, length: int, replacement: str) -> MaskResult:
        """Apply an edit event to the current field content.

        Args:
            text: Field content before the edit
            start: Offset where the edited range begins
            length: Length of the replaced range (0 for a pure insertion)
            replacement: Inserted characters ("" for a deletion)

        Returns:
            MaskResult for the edited content. For a deletion the caret is
            reported at ``start``, where the user left it.

        Raises:
            ValueError: If the range lies outside ``text``
        """
        if start < 0 or length < 0 or start + length > len(text):
            msg = f"Edit range [{start}, {start + length}) outside of text of length {len(text)}"
            raise ValueError(msg)

        updated = text[:start] + replacement + text[start + length :]
        if _is_deletion(length, replacement):
            result = self._delete(updated, start)
        else:
            result = self._modify(updated, start + len(replacement))
        self._notify(result)
        return result

    def focus(self, text: str) -> MaskResult | None:
        """Handle focus gain: pre-fill an empty field when configured to.

        Returns:
            MaskResult for the pre-filled field, or None when nothing changed
        """
        if self._config.autocomplete_on_focus and not text:
            return self.put("", autocomplete=True)
        return None

    def clear(self) -> MaskResult:
        """Handle an explicit clear of the field."""
        return self.put("", autocomplete=False)

    def _delete(self, updated: str, caret: int) -> MaskResult:
        caret_string = CaretString(updated, caret)
        mask = self.pick_mask(caret_string)
        result = mask.apply(caret_string, autocomplete=False)
        formatted = result.formatted_text.text
        # Keep the caret at the deletion site rather than where the mask moved it
        return MaskResult(
            formatted_text=CaretString(formatted, min(caret, len(formatted))),
            extracted_value=result.extracted_value,
            complete=result.complete,
            affinity=result.affinity,
        )

    def _modify(self, updated: str, caret: int) -> MaskResult:
        caret_string = CaretString(updated, caret)
        mask = self.pick_mask(caret_string)
        return mask.apply(caret_string, self._config.autocomplete)

    def _affine_masks(self) -> list[CompiledMask]:
        notations = self._config.custom_notations
        return [get_or_create_mask(fmt, notations) for fmt in self._config.affine_formats]

    def _notify(self, result: MaskResult) -> None:
        for listener in tuple(self._listeners):
            listener(result.complete, result.extracted_value)
        if self._on_change is not None:
            self._on_change(result.extracted_value, result.complete)


def _is_deletion(length: int, replacement: str) -> bool:
    return length > 0 and not replacement

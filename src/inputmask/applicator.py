"""Mask application: run a compiled mask over edited text.

Single pass with two cursors, one over the input characters and one over
the state chain:

- A literal state consumes the input character when it equals the literal,
  otherwise the literal is inserted without consuming input.
- A valuable state consumes a character of its class and appends it to both
  the output and the extracted value; any other character is dropped and
  the same state is retried on the next character.
- Once the chain reaches END, the rest of the input is truncated.

With autocomplete, literals that directly follow the last matched state
are appended as well (e.g. ") " after the area code of a phone number).

Applying a mask never raises on user input.

Thread Safety:
    ``apply_mask`` is a pure function, safe to call from any thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inputmask.mask import CaretString, MaskResult
from inputmask.profiling import get_mask_accumulator
from inputmask.states import StateKind

if TYPE_CHECKING:
    from inputmask.mask import CompiledMask


def apply_mask(mask: CompiledMask, text: CaretString, autocomplete: bool) -> MaskResult:
    """Format ``text`` with ``mask``.

    Args:
        mask: Compiled mask to drive
        text: Edited text and the caret position after the edit
        autocomplete: Append the literal run following the last matched state

    Returns:
        Formatted text with relocated caret, extracted value, completeness
        and whole-string affinity.
    """
    source = text.text
    caret = text.caret_index
    length = len(source)

    output: list[str] = []
    value: list[str] = []
    new_caret = -1
    accepted = 0
    dropped = 0

    state = mask.head
    pos = 0
    while state.kind is not StateKind.END and pos < length:
        # Caret lands before any literal inserted ahead of the character under it
        if new_caret < 0 and pos >= caret:
            new_caret = len(output)

        char = source[pos]
        if state.kind is StateKind.LITERAL:
            if char == state.char:
                pos += 1
                accepted += 1
            output.append(state.char)
            state = state.child
        elif state.accepts(char):
            output.append(char)
            value.append(char)
            pos += 1
            accepted += 1
            state = state.child
        else:
            pos += 1
            dropped += 1

    if autocomplete:
        while state.kind is StateKind.LITERAL:
            output.append(state.char)
            state = state.child

    formatted = "".join(output)
    if new_caret < 0:
        new_caret = len(formatted)

    truncated = length - pos
    acc = get_mask_accumulator()
    if acc is not None:
        acc.record_apply(input_length=length, dropped=dropped, truncated=truncated)

    return MaskResult(
        formatted_text=CaretString(formatted, new_caret),
        extracted_value="".join(value),
        complete=len(value) >= mask.acceptable_value_length,
        affinity=accepted - dropped - truncated,
    )

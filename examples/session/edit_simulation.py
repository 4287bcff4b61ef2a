"""Drive a masked field with edit events, the way a text widget would."""

from inputmask import MaskConfig, MaskedInput

session = MaskedInput(
    MaskConfig(primary_format="[00]/[00]/[0000]"),
    on_change=lambda value, complete: print(f"  value={value!r} complete={complete}"),
)

text = ""
for char in "12252024":
    caret = len(text)
    result = session.edit(text, start=caret, length=0, replacement=char)
    text = result.formatted_text.text
    print(f"typed {char!r}: {text!r} caret at {result.formatted_text.caret_index}")

# Backspace over the last "/" leaves the digits where they were
result = session.edit(text, start=5, length=1, replacement="")
print("after deleting '/':", result.formatted_text)

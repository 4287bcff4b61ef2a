"""Format a phone number in one call, no configuration."""

from inputmask import apply_format

result = apply_format("+1 ([000]) [000]-[0000]", "2025551234")
print(result.formatted_text.text)  # +1 (202) 555-1234
print(result.extracted_value, result.complete)  # 2025551234 True

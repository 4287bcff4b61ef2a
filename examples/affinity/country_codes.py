"""Pick between phone layouts as the user types."""

from inputmask import AffinityStrategy, MaskConfig, MaskedInput

session = MaskedInput(
    MaskConfig(
        primary_format="+7 ([000]) [000]-[00]-[00]",
        affine_formats=("8 ([000]) [000]-[00]-[00]",),
        affinity_strategy=AffinityStrategy.WHOLE_STRING,
    )
)

for typed in ("9991234567", "89991234567", "+79991234567"):
    print(f"{typed:>14} -> {session.put(typed).formatted_text.text}")

"""Masking session configuration.

MaskConfig is the whole configuration surface of a masked input: the
primary format, alternative formats, custom notations, the affinity
strategy and the autocomplete policy. It is supplied once per session and
re-read on every edit.

Usage:
    config = MaskConfig(
        primary_format="+1 ([000]) [000]-[0000]",
        affine_formats=("[000]-[0000]",),
    )
    session = MaskedInput(config)

    # Or from an external source (YAML, JSON, settings module)
    config = MaskConfig.from_dict({"primary_format": "[00]/[00]", "autocomplete": False})

"""

from dataclasses import dataclass
from typing import Any

from inputmask.affinity import AffinityStrategy
from inputmask.notation import Notation


@dataclass(frozen=True, slots=True)
class MaskConfig:
    """Immutable masking session configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        primary_format: Format used unless an alternative fits better
        affine_formats: Alternative formats, in order of preference
        custom_notations: Notations usable in any of the formats
        affinity_strategy: Policy used to rank formats against input
        autocomplete: Append literals ahead of the caret while typing
        autocomplete_on_focus: Pre-fill the leading literals when an
            empty field gains focus

    """

    primary_format: str = ""
    affine_formats: tuple[str, ...] = ()
    custom_notations: tuple[Notation, ...] = ()
    affinity_strategy: AffinityStrategy = AffinityStrategy.WHOLE_STRING
    autocomplete: bool = True
    autocomplete_on_focus: bool = True

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as tuples
        object.__setattr__(self, "affine_formats", tuple(self.affine_formats))
        object.__setattr__(self, "custom_notations", tuple(self.custom_notations))
        object.__setattr__(
            self, "affinity_strategy", AffinityStrategy.from_name(self.affinity_strategy)
        )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "MaskConfig":
        """Create MaskConfig from dictionary.

        Only includes keys that are valid MaskConfig fields; unknown keys
        are silently ignored. ``affinity_strategy`` may be a strategy name
        and ``custom_notations`` may contain plain dicts with ``symbol``,
        ``character_set`` and optional ``is_optional`` keys.

        Example:
            >>> config = MaskConfig.from_dict({
            ...     "primary_format": "[0000]",
            ...     "affinity_strategy": "prefix",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.affinity_strategy
            <AffinityStrategy.PREFIX: 'prefix'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "custom_notations" in filtered:
            filtered["custom_notations"] = tuple(
                n if isinstance(n, Notation) else Notation(**n)
                for n in filtered["custom_notations"]
            )
        return cls(**filtered)

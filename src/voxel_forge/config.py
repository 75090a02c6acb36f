"""
Generation Configuration

Optional knobs for a generation call. The defaults reproduce the
canonical seed-to-model mapping; changing them changes the output for a
given seed.
"""

from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GenerationConfig:
    """
    Settings shared by all category generators.

    Attributes:
        decorate: Apply surface decoration passes. When False the
            decoration draws are still consumed, so geometry is unchanged
            and only colors differ.
        palette: Palette name overriding the drawn palette (the draw still
            happens)
        weird_probability: Chance of the animal generator taking the weird
            branch before the override roll
    """

    decorate: bool = True
    palette: Optional[str] = None
    weird_probability: float = 0.4

    def __post_init__(self):
        if not 0.0 <= self.weird_probability <= 1.0:
            raise ValueError(
                f"weird_probability must be in [0, 1], got {self.weird_probability}"
            )

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> "GenerationConfig":
        """
        Build a config from a keyword dictionary.

        Raises:
            TypeError: On unknown keys
        """
        values = dict(values or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = GenerationConfig()

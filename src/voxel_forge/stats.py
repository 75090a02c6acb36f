"""
Creation Statistics

In-memory tally of generated objects: total count, count per category,
and first/last creation timestamps (epoch milliseconds).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

CATEGORIES = ("robot", "spaceship", "animal", "monster")


def _empty_counts() -> Dict[str, int]:
    return {category: 0 for category in CATEGORIES}


@dataclass
class GenerationStats:
    """Running statistics over generated objects."""

    total_creations: int = 0
    by_category: Dict[str, int] = field(default_factory=_empty_counts)
    first_creation: Optional[int] = None
    last_creation: Optional[int] = None

    def track(self, obj) -> None:
        """
        Record one generated object.

        Args:
            obj: GeneratedObject (needs ``category`` and ``created_at``)
        """
        self.total_creations += 1
        self.by_category[obj.category] = self.by_category.get(obj.category, 0) + 1
        if self.first_creation is None:
            self.first_creation = obj.created_at
        self.last_creation = obj.created_at

    def reset(self) -> None:
        self.total_creations = 0
        self.by_category = _empty_counts()
        self.first_creation = None
        self.last_creation = None

    def to_dict(self) -> dict:
        return {
            "totalCreations": self.total_creations,
            "byCategory": dict(self.by_category),
            "firstCreation": self.first_creation,
            "lastCreation": self.last_creation,
        }

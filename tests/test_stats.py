"""
Unit tests for creation statistics.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge import generate
from voxel_forge.stats import GenerationStats


class TestStats(unittest.TestCase):
    """Tests for creation statistics."""

    def test_track(self):
        stats = GenerationStats()
        first = generate("robot", 1)
        second = generate("monster", 2)
        stats.track(first)
        stats.track(second)
        assert stats.total_creations == 2
        assert stats.by_category["robot"] == 1
        assert stats.by_category["monster"] == 1
        assert stats.by_category["animal"] == 0
        assert stats.first_creation == first.created_at
        assert stats.last_creation == second.created_at

    def test_track_unknown_category(self):
        stats = GenerationStats()
        stats.track(generate("dragon", 4))
        assert stats.by_category["dragon"] == 1
        assert stats.total_creations == 1

    def test_reset_and_dict(self):
        stats = GenerationStats()
        stats.track(generate("animal", 1))
        stats.reset()
        assert stats.to_dict() == {
            "totalCreations": 0,
            "byCategory": {"robot": 0, "spaceship": 0, "animal": 0, "monster": 0},
            "firstCreation": None,
            "lastCreation": None,
        }


if __name__ == "__main__":
    unittest.main()

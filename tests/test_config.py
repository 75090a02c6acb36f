"""
Unit tests for generation settings.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.config import GenerationConfig


class TestConfig(unittest.TestCase):
    """Tests for GenerationConfig."""

    def test_defaults(self):
        config = GenerationConfig()
        assert config.decorate is True
        assert config.palette is None
        assert config.weird_probability == 0.4

    def test_from_dict(self):
        config = GenerationConfig.from_dict({"decorate": False})
        assert config.decorate is False
        assert config.to_dict()["weird_probability"] == 0.4

    def test_from_dict_unknown_key(self):
        with self.assertRaises(TypeError):
            GenerationConfig.from_dict({"colour": "red"})

    def test_probability_range(self):
        with self.assertRaises(ValueError):
            GenerationConfig(weird_probability=1.5)


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for hex color helpers.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.color import hex_to_rgb, rgb_to_hex, shade, is_hex_color


class TestColor(unittest.TestCase):
    """Tests for hex color helpers."""

    def test_roundtrip(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert rgb_to_hex(255, 128, 0) == "#FF8000"
        assert rgb_to_hex(300, -5, 16) == "#FF0010"

    def test_invalid(self):
        assert not is_hex_color("red")
        with self.assertRaises(ValueError):
            hex_to_rgb("#12345")

    def test_shade(self):
        assert shade("#808080", 0.5) == "#404040"
        assert shade("#000000", 2.0) == "#FFFFFF"
        assert shade("#102030", 1.0) == "#102030"


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the palette table.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.palettes import Palette, get_palette, get_palette_by_name, palettes_for, DEFAULT_PALETTES
from voxel_forge.rng import SeededRNG


class TestPalettes(unittest.TestCase):
    """Tests for the palette table."""

    def test_get_palette_single_draw(self):
        rng = SeededRNG(3)
        palette = get_palette("animal", rng)
        assert palette in palettes_for("animal")
        other = SeededRNG(3)
        other.next()
        assert rng.state == other.state

    def test_unknown_category_uses_default(self):
        assert palettes_for("vehicle") is DEFAULT_PALETTES
        assert get_palette("vehicle", SeededRNG(1)) in DEFAULT_PALETTES

    def test_lookup_by_name(self):
        assert get_palette_by_name("Industrial").name == "industrial"
        with self.assertRaises(KeyError):
            get_palette_by_name("plaid")

    def test_invalid_slot(self):
        with self.assertRaises(ValueError):
            Palette("bad", "#FFFFFF", "blue", "#000000", "#000000", "#000000")


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the component library.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge import components
from voxel_forge.model import VoxelModel
from voxel_forge.palettes import ROBOT_PALETTES, ANIMAL_PALETTES
from voxel_forge.rng import SeededRNG

PALETTE = ROBOT_PALETTES[0]


class TestRobotComponents(unittest.TestCase):
    """Tests for robot parts."""

    def test_every_weapon_builds(self):
        for weapon in components.WEAPON_TYPES:
            model = VoxelModel()
            components.generate_weapon(model, SeededRNG(1), weapon, 0, 0, 0, PALETTE)
            assert len(model) > 0, weapon

    def test_only_blade_draws(self):
        for weapon in components.WEAPON_TYPES:
            rng = SeededRNG(9)
            components.generate_weapon(VoxelModel(), rng, weapon, 0, 0, 0, PALETTE)
            drew = rng.state != SeededRNG(9).state
            assert drew == (weapon == "blade"), weapon

    def test_every_tool_builds(self):
        for tool in components.TOOL_TYPES:
            model = VoxelModel()
            components.generate_tool(model, tool, 0, 0, 0, PALETTE)
            assert len(model) > 0, tool

    def test_every_head_builds(self):
        for head in components.ROBOT_HEAD_TYPES:
            model = VoxelModel()
            w, h, d = components.generate_robot_head(model, SeededRNG(4), head, 0, 10, 0, PALETTE)
            assert 3 <= w <= 5 and 3 <= h <= 5 and 3 <= d <= 5
            assert len(model) >= w * h * d

    def test_hand_hangs_below_wrist(self):
        model = VoxelModel()
        components.generate_hand(model, SeededRNG(2), "left", 0, 10, 0, PALETTE)
        (_, _, _), (_, max_y, _) = model.bounds()
        assert max_y <= 10

    def test_leg_stands_on_ground(self):
        model = VoxelModel()
        components.generate_robot_leg(model, "left", -4, 0, 6, 2, PALETTE)
        (_, min_y, _), (_, max_y, _) = model.bounds()
        assert min_y == 0
        assert max_y == 6

    def test_torso_front(self):
        model = VoxelModel()
        front = components.generate_robot_torso(model, SeededRNG(3), 0, 5, 0, 6, 6, 4, PALETTE)
        assert front in (1, 2)
        assert model.has_voxel(0, 7, front)

    def test_components_are_deterministic(self):
        a = VoxelModel()
        b = VoxelModel()
        for model in (a, b):
            rng = SeededRNG(123)
            components.generate_backpack(model, rng, 0, 5, -2, 6, 6, PALETTE)
            components.generate_hand(model, rng, "right", 4, 5, 0, PALETTE)
        assert a.voxels() == b.voxels()


class TestAnimalComponents(unittest.TestCase):
    """Tests for animal parts."""

    palette = ANIMAL_PALETTES[0]

    def test_every_head_builds(self):
        for head in components.ANIMAL_HEAD_TYPES:
            model = VoxelModel()
            size = components.generate_animal_head(model, SeededRNG(8), head, 0, 5, 0, self.palette)
            assert len(model) > size ** 3 - 1, head

    def test_every_tail_grows_backward(self):
        for tail in components.TAIL_TYPES:
            model = VoxelModel()
            components.generate_animal_tail(model, tail, 0, 5, 0, 4, self.palette)
            (_, _, min_z), (_, _, max_z) = model.bounds()
            assert min_z < 0, tail
            assert max_z <= 1, tail

    def test_long_neck_top(self):
        model = VoxelModel()
        top_y, top_z = components.generate_long_neck(model, 0, 5, 0, 6, self.palette, lean=1)
        assert top_y == 11
        assert top_z == 1

    def test_coat_pattern_only_recolors(self):
        for pattern in components.COAT_PATTERNS:
            model = VoxelModel()
            model.add_box(0, 0, 0, 4, 2, 8, self.palette.primary)
            before = model.coordinates()
            recolored = components.apply_coat_pattern(
                model, SeededRNG(6), pattern, 0, 1, 0, 4, 8, self.palette
            )
            assert recolored > 0, pattern
            assert model.coordinates() == before

    def test_wings_extend_outward(self):
        model = VoxelModel()
        components.generate_wings(model, SeededRNG(1), "left", 0, 5, 0, 4, self.palette)
        (min_x, _, _), (max_x, _, _) = model.bounds()
        assert min_x == -4
        assert max_x == 0


class TestShipAndMonsterComponents(unittest.TestCase):
    """Tests for ship and monster parts."""

    def test_engine_glow_behind(self):
        model = VoxelModel()
        components.generate_engine(model, 0, 0, 0, 1, 3, PALETTE)
        assert model.get_color(0, 0, -1) == PALETTE.accent
        assert model.get_color(0, 0, 2) == PALETTE.secondary

    def test_spike_count(self):
        model = VoxelModel()
        count = components.generate_spikes(model, SeededRNG(5), 0, 3, 0, 4, 4, PALETTE.accent)
        assert 3 <= count <= 8
        (_, min_y, _), _ = model.bounds()
        assert min_y == 3

    def test_tentacles(self):
        model = VoxelModel()
        components.generate_tentacles(model, 4, 0, 10, 0, 5, PALETTE)
        assert len(model) > 4 * 5


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the voxel model and its primitives.
"""

import sys
from pathlib import Path
import numpy as np
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.model import Voxel, VoxelModel
from voxel_forge.rasterize import sphere_offsets, disc_offsets, tapered_layers

RED = "#FF0000"
BLUE = "#0000FF"


class TestVoxelModel(unittest.TestCase):
    """Tests for single-cell operations."""

    def test_add_and_query(self):
        model = VoxelModel()
        assert model.add_voxel(1, 2, 3, RED)
        assert model.has_voxel(1, 2, 3)
        assert (1, 2, 3) in model
        assert model.get_color(1, 2, 3) == RED
        assert model.get_color(0, 0, 0) is None
        assert len(model) == 1

    def test_first_writer_wins(self):
        """Adding to an occupied cell keeps the first color."""
        model = VoxelModel()
        model.add_voxel(0, 0, 0, RED)
        assert not model.add_voxel(0, 0, 0, BLUE)
        assert model.get_color(0, 0, 0) == RED
        assert len(model) == 1

    def test_recolor(self):
        model = VoxelModel()
        model.add_voxel(0, 0, 0, RED)
        model.add_voxel(1, 0, 0, RED)
        assert model.recolor_voxel(0, 0, 0, BLUE)
        assert model.get_color(0, 0, 0) == BLUE
        assert model.coordinates() == [(0, 0, 0), (1, 0, 0)]
        assert len(model) == 2

    def test_recolor_missing_cell(self):
        model = VoxelModel()
        assert not model.recolor_voxel(5, 5, 5, BLUE)
        assert len(model) == 0

    def test_float_coordinates_floored(self):
        model = VoxelModel()
        model.add_voxel(1.5, -0.5, 2.9, RED)
        assert model.has_voxel(1, -1, 2)

    def test_voxels_are_copies(self):
        model = VoxelModel()
        model.add_voxel(0, 0, 0, RED)
        voxels = model.voxels()
        assert voxels == [Voxel(0, 0, 0, RED)]
        assert voxels[0].to_dict() == {"x": 0, "y": 0, "z": 0, "color": RED}
        model.recolor_voxel(0, 0, 0, BLUE)
        assert voxels[0].color == RED

    def test_copy_is_independent(self):
        model = VoxelModel()
        model.add_voxel(0, 0, 0, RED)
        other = model.copy()
        other.add_voxel(1, 1, 1, RED)
        assert len(model) == 1
        assert len(other) == 2


class TestPrimitives(unittest.TestCase):
    """Tests for shape primitives."""

    def test_box_half_open(self):
        model = VoxelModel()
        model.add_box(0, 0, 0, 2, 3, 4, RED)
        assert len(model) == 24
        assert model.has_voxel(1, 2, 3)
        assert not model.has_voxel(2, 0, 0)

    def test_box_empty_extent(self):
        model = VoxelModel()
        model.add_box(0, 0, 0, 0, 3, 3, RED)
        model.add_box(0, 0, 0, -2, 3, 3, RED)
        assert len(model) == 0

    def test_symmetric_box_mirror(self):
        """Cell x mirrors to -1 - x around axis 0."""
        model = VoxelModel()
        model.add_symmetric_box(2, 0, 0, 1, 1, 1, RED, axis_x=0)
        assert set(model.coordinates()) == {(2, 0, 0), (-3, 0, 0)}

    def test_symmetric_box_overlap_dedup(self):
        model = VoxelModel()
        model.add_symmetric_box(-1, 0, 0, 2, 1, 1, RED)
        assert set(model.coordinates()) == {(-1, 0, 0), (0, 0, 0)}

    def test_sphere(self):
        model = VoxelModel()
        model.add_sphere(0, 0, 0, 1, RED)
        # Center plus six face neighbours
        assert len(model) == 7
        assert model.has_voxel(0, 1, 0)
        assert not model.has_voxel(1, 1, 0)

    def test_sphere_radius_zero(self):
        model = VoxelModel()
        model.add_sphere(3, 3, 3, 0, RED)
        assert model.coordinates() == [(3, 3, 3)]

    def test_cylinder_axes(self):
        for axis, expected in (("y", (0, 2, 1)), ("x", (2, 0, 1)), ("z", (0, 1, 2))):
            model = VoxelModel()
            model.add_cylinder(0, 0, 0, 1, 3, RED, axis=axis)
            assert len(model) == 15
            assert model.has_voxel(*expected)

    def test_cylinder_bad_axis(self):
        model = VoxelModel()
        with self.assertRaises(ValueError):
            model.add_cylinder(0, 0, 0, 1, 3, RED, axis="w")

    def test_tapered_box(self):
        model = VoxelModel()
        model.add_tapered_box(0, 0, 0, 4, 3, 4, 2, 2, RED)
        # Layers 4x4, 3x3, 2x2
        assert len(model) == 16 + 9 + 4
        # Top layer centered on the base footprint
        assert model.has_voxel(1, 2, 1)
        assert model.has_voxel(2, 2, 2)
        assert not model.has_voxel(0, 2, 0)

    def test_tapered_single_layer(self):
        model = VoxelModel()
        model.add_tapered_box(0, 0, 0, 3, 1, 3, 1, 1, RED)
        # t = 0 on the only layer
        assert len(model) == 9

    def test_irregular_shape(self):
        model = VoxelModel()
        model.add_irregular_shape([(0, 0, 0), (1, 0, 0), (0, 0, 0)], RED)
        assert model.coordinates() == [(0, 0, 0), (1, 0, 0)]

    def test_insertion_order_deterministic(self):
        a = VoxelModel()
        b = VoxelModel()
        for model in (a, b):
            model.add_sphere(0, 0, 0, 2, RED)
            model.add_cylinder(0, 0, 0, 2, 2, BLUE)
        assert a.voxels() == b.voxels()


class TestArrays(unittest.TestCase):
    """Tests for array export and bounds."""

    def test_bounds(self):
        model = VoxelModel()
        model.add_box(-2, 0, 1, 3, 2, 1, RED)
        assert model.bounds() == ((-2, 0, 1), (1, 2, 2))

    def test_bounds_empty(self):
        assert VoxelModel().bounds() == ((0, 0, 0), (0, 0, 0))

    def test_to_arrays(self):
        model = VoxelModel()
        model.add_voxel(1, 2, 3, "#FF8000")
        coords, colors = model.to_arrays()
        assert coords.shape == (1, 3)
        assert colors.dtype == np.uint8
        assert list(coords[0]) == [1, 2, 3]
        assert list(colors[0]) == [255, 128, 0, 255]

    def test_to_arrays_empty(self):
        coords, colors = VoxelModel().to_arrays()
        assert coords.shape == (0, 3)
        assert colors.shape == (0, 4)


class TestKernels(unittest.TestCase):
    """Tests for the compiled offset kernels."""

    def test_sphere_offsets_order(self):
        offsets = sphere_offsets(1)
        assert offsets.shape == (7, 3)
        assert list(offsets[0]) == [-1, 0, 0]
        assert list(offsets[-1]) == [1, 0, 0]

    def test_disc_offsets(self):
        offsets = disc_offsets(2)
        assert offsets.shape == (13, 2)

    def test_tapered_layers(self):
        layers = tapered_layers(4.0, 3, 4.0, 2.0, 2.0)
        assert layers.tolist() == [[4, 4, 0, 0], [3, 3, 0, 0], [2, 2, 1, 1]]


if __name__ == "__main__":
    unittest.main()

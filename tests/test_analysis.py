"""
Unit tests for model analysis.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge import generate
from voxel_forge.analysis import (
    color_histogram,
    count_components,
    exposed_voxel_count,
    summarize,
    to_dense,
)
from voxel_forge.model import VoxelModel

RED = "#FF0000"
BLUE = "#0000FF"


class TestAnalysis(unittest.TestCase):
    """Tests for dense-grid statistics."""

    def test_to_dense(self):
        model = VoxelModel()
        model.add_voxel(-1, 0, 2, RED)
        model.add_voxel(1, 1, 2, RED)
        occupancy, origin = to_dense(model)
        assert occupancy.shape == (3, 2, 1)
        assert origin == (-1, 0, 2)
        assert occupancy[0, 0, 0] and occupancy[2, 1, 0]
        assert occupancy.sum() == 2

    def test_to_dense_empty(self):
        occupancy, origin = to_dense(VoxelModel())
        assert occupancy.size == 0
        assert origin == (0, 0, 0)

    def test_components(self):
        model = VoxelModel()
        model.add_box(0, 0, 0, 2, 2, 2, RED)
        model.add_box(5, 0, 0, 1, 1, 1, RED)
        # Diagonal neighbours are separate pieces
        model.add_voxel(6, 1, 0, RED)
        assert count_components(model) == 3
        assert count_components(VoxelModel()) == 0

    def test_exposed_voxels(self):
        model = VoxelModel()
        model.add_box(0, 0, 0, 3, 3, 3, RED)
        # Only the center cell is fully enclosed
        assert exposed_voxel_count(model) == 26

    def test_histogram(self):
        model = VoxelModel()
        model.add_box(0, 0, 0, 2, 1, 1, RED)
        model.add_voxel(5, 5, 5, BLUE)
        assert color_histogram(model) == {RED: 2, BLUE: 1}

    def test_summarize_generated(self):
        obj = generate("robot", 12345)
        summary = summarize(obj.model)
        assert summary["voxel_count"] == obj.voxel_count
        assert summary["components"] >= 1
        assert 0 < summary["exposed_voxels"] <= obj.voxel_count
        assert sum(summary["colors"].values()) == obj.voxel_count
        assert summary["size"] == [
            summary["bounds_max"][i] - summary["bounds_min"][i] for i in range(3)
        ]


if __name__ == "__main__":
    unittest.main()

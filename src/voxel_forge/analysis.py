"""
Model Analysis

Dense views and structural statistics of a sparse VoxelModel:
- Occupancy grid: boolean array cropped to the model bounds
- Connected components: face-connected pieces (scipy.ndimage.label)
- Exposed voxels: cells with at least one face open to air
  (occupancy minus its binary erosion)

Used by tests and the CLI summary; generation never depends on it.
"""

from collections import Counter
from typing import Dict, Tuple
import numpy as np
from scipy import ndimage

from .model import VoxelModel


# 6-connectivity: cells touching by a face belong together
FACE_STRUCTURE = ndimage.generate_binary_structure(3, 1)


def to_dense(model: VoxelModel) -> Tuple[np.ndarray, Tuple[int, int, int]]:
    """
    Build a boolean occupancy grid.

    Args:
        model: Source model

    Returns:
        Tuple of (occupancy, origin) where occupancy has shape
        (size_x, size_y, size_z) and origin is the world coordinate of
        occupancy[0, 0, 0]
    """
    (min_x, min_y, min_z), (max_x, max_y, max_z) = model.bounds()
    shape = (max_x - min_x, max_y - min_y, max_z - min_z)
    occupancy = np.zeros(shape, dtype=bool)

    if len(model) == 0:
        return occupancy, (0, 0, 0)

    coords, _ = model.to_arrays()
    local = coords - np.array([min_x, min_y, min_z], dtype=np.int64)
    occupancy[local[:, 0], local[:, 1], local[:, 2]] = True
    return occupancy, (min_x, min_y, min_z)


def count_components(model: VoxelModel) -> int:
    """Number of face-connected pieces in the model."""
    occupancy, _ = to_dense(model)
    if not occupancy.any():
        return 0
    _, count = ndimage.label(occupancy, structure=FACE_STRUCTURE)
    return int(count)


def exposed_voxel_count(model: VoxelModel) -> int:
    """Number of voxels with at least one face open to air."""
    occupancy, _ = to_dense(model)
    if not occupancy.any():
        return 0
    interior = ndimage.binary_erosion(
        occupancy, structure=FACE_STRUCTURE, border_value=0
    )
    return int(np.count_nonzero(occupancy & ~interior))


def color_histogram(model: VoxelModel) -> Dict[str, int]:
    """Voxel count per color, most common first."""
    return dict(Counter(model.colors()).most_common())


def summarize(model: VoxelModel) -> dict:
    """
    Collect model statistics.

    Returns:
        Dictionary with voxel count, bounds, size, component count,
        exposed voxel count and color histogram
    """
    (min_xyz, max_xyz) = model.bounds()
    return {
        "voxel_count": len(model),
        "bounds_min": list(min_xyz),
        "bounds_max": list(max_xyz),
        "size": [max_xyz[i] - min_xyz[i] for i in range(3)],
        "components": count_components(model),
        "exposed_voxels": exposed_voxel_count(model),
        "colors": color_histogram(model),
    }

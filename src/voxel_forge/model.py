"""
Voxel Model and Rasterization Primitives

This module provides:
- Voxel: immutable (x, y, z, color) record handed to consumers
- VoxelModel: sparse, insertion-ordered voxel store with shape primitives

Storage is a single dict keyed by (x, y, z) tuples. Python dicts keep
insertion order, so iteration order is the order cells were first added,
and recoloring a cell updates its value in place without moving it.

Invariants:
- No two voxels share a coordinate
- add_* never overwrites an occupied cell (first writer wins)
- recolor_voxel only touches occupied cells
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union
import numpy as np

from .color import hex_colors_to_rgba
from .rasterize import sphere_offsets, disc_offsets, tapered_layers


Coord = Tuple[int, int, int]
Number = Union[int, float]

AXES = ("x", "y", "z")


def _cell(value: Number) -> int:
    """Snap a coordinate or size to the integer grid (floor)."""
    if isinstance(value, int):
        return value
    return math.floor(value)


@dataclass(frozen=True)
class Voxel:
    """A unit cube at an integer grid coordinate."""

    x: int
    y: int
    z: int
    color: str

    @property
    def position(self) -> Coord:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z, "color": self.color}


class VoxelModel:
    """
    Sparse voxel model with rasterization primitives.

    Coordinates are unbounded integers. Non-integer positions and sizes
    passed to the primitives are floored, so callers may use half sizes
    such as ``x - width / 2``.

    Coordinate system: X-right, Y-up, Z-forward (front faces at max Z)
    """

    def __init__(self):
        self._cells: Dict[Coord, str] = {}

    # ------------------------------------------------------------------
    # Single-cell operations

    def add_voxel(self, x: Number, y: Number, z: Number, color: str) -> bool:
        """
        Add a voxel if the cell is free.

        Args:
            x, y, z: Cell coordinates
            color: Hex color string

        Returns:
            True if a new voxel was added, False if the cell was occupied
        """
        key = (_cell(x), _cell(y), _cell(z))
        if key in self._cells:
            return False
        self._cells[key] = color
        return True

    def has_voxel(self, x: Number, y: Number, z: Number) -> bool:
        """Check if a voxel exists at the given coordinates."""
        return (_cell(x), _cell(y), _cell(z)) in self._cells

    def get_color(self, x: Number, y: Number, z: Number) -> Optional[str]:
        """Get the color at a cell, or None if empty."""
        return self._cells.get((_cell(x), _cell(y), _cell(z)))

    def recolor_voxel(self, x: Number, y: Number, z: Number, color: str) -> bool:
        """
        Change the color of an existing voxel.

        This is the only way to change a color. It never creates a voxel.

        Returns:
            True if the cell was occupied and recolored, False otherwise
        """
        key = (_cell(x), _cell(y), _cell(z))
        if key not in self._cells:
            return False
        self._cells[key] = color
        return True

    # ------------------------------------------------------------------
    # Primitives

    def add_box(
        self,
        x: Number, y: Number, z: Number,
        w: Number, h: Number, d: Number,
        color: str
    ):
        """
        Fill the half-open cuboid [x, x+w) x [y, y+h) x [z, z+d).

        Args:
            x, y, z: Minimum corner
            w, h, d: Extent along x, y, z (non-positive extents add nothing)
            color: Hex color string
        """
        x0, y0, z0 = _cell(x), _cell(y), _cell(z)
        x1, y1, z1 = x0 + _cell(w), y0 + _cell(h), z0 + _cell(d)
        cells = self._cells
        for cx in range(x0, x1):
            for cy in range(y0, y1):
                for cz in range(z0, z1):
                    key = (cx, cy, cz)
                    if key not in cells:
                        cells[key] = color

    def add_symmetric_box(
        self,
        x: Number, y: Number, z: Number,
        w: Number, h: Number, d: Number,
        color: str,
        axis_x: Number = 0
    ):
        """
        Add a box and its mirror image across the plane X = axis_x.

        The mirror starts at ``axis_x - (x + w - axis_x)``.
        """
        self.add_box(x, y, z, w, h, d, color)
        mirror_x = _cell(axis_x) - (_cell(x) + _cell(w) - _cell(axis_x))
        self.add_box(mirror_x, y, z, w, h, d, color)

    def add_sphere(self, cx: Number, cy: Number, cz: Number, radius: Number, color: str):
        """
        Fill all cells with dx² + dy² + dz² <= radius².

        Args:
            cx, cy, cz: Center cell
            radius: Radius in voxels
            color: Hex color string
        """
        cx, cy, cz = _cell(cx), _cell(cy), _cell(cz)
        cells = self._cells
        for dx, dy, dz in sphere_offsets(_cell(radius)).tolist():
            key = (cx + dx, cy + dy, cz + dz)
            if key not in cells:
                cells[key] = color

    def add_cylinder(
        self,
        cx: Number, cy: Number, cz: Number,
        radius: Number,
        height: Number,
        color: str,
        axis: str = "y"
    ):
        """
        Stack ``height`` discs along an axis.

        Args:
            cx, cy, cz: Center of the first disc
            radius: Disc radius
            height: Number of layers, growing in the positive axis direction
            color: Hex color string
            axis: "x", "y" or "z"
        """
        if axis not in AXES:
            raise ValueError(f"Unknown axis: {axis}")

        cx, cy, cz = _cell(cx), _cell(cy), _cell(cz)
        disc = disc_offsets(_cell(radius)).tolist()
        cells = self._cells
        for layer in range(_cell(height)):
            for a, b in disc:
                if axis == "y":
                    key = (cx + a, cy + layer, cz + b)
                elif axis == "x":
                    key = (cx + layer, cy + a, cz + b)
                else:
                    key = (cx + a, cy + b, cz + layer)
                if key not in cells:
                    cells[key] = color

    def add_tapered_box(
        self,
        x: Number, y: Number, z: Number,
        w1: Number, h: Number, d1: Number,
        w2: Number, d2: Number,
        color: str
    ):
        """
        Box whose cross-section interpolates from (w1, d1) to (w2, d2).

        Layers grow along +Y. Each layer is centered on the base footprint.

        Args:
            x, y, z: Minimum corner of the base layer
            w1, d1: Base width and depth
            h: Number of layers
            w2, d2: Top width and depth
            color: Hex color string
        """
        x0, y0, z0 = _cell(x), _cell(y), _cell(z)
        layers = tapered_layers(float(w1), _cell(h), float(d1), float(w2), float(d2))
        cells = self._cells
        for layer, (w, d, offset_x, offset_z) in enumerate(layers.tolist()):
            for lx in range(w):
                for lz in range(d):
                    key = (x0 + offset_x + lx, y0 + layer, z0 + offset_z + lz)
                    if key not in cells:
                        cells[key] = color

    def add_irregular_shape(self, points: Iterable[Sequence[Number]], color: str):
        """Add each (x, y, z) point in order."""
        for px, py, pz in points:
            self.add_voxel(px, py, pz, color)

    # ------------------------------------------------------------------
    # Read access

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, position) -> bool:
        return self.has_voxel(*position)

    def __iter__(self) -> Iterator[Voxel]:
        for (x, y, z), color in self._cells.items():
            yield Voxel(x, y, z, color)

    @property
    def count(self) -> int:
        """Number of voxels."""
        return len(self._cells)

    def voxels(self) -> List[Voxel]:
        """All voxels in insertion order."""
        return list(self)

    def coordinates(self) -> List[Coord]:
        """All coordinates in insertion order."""
        return list(self._cells.keys())

    def colors(self) -> List[str]:
        """All colors in insertion order."""
        return list(self._cells.values())

    def bounds(self) -> Tuple[Coord, Coord]:
        """
        Tight bounds around occupied cells.

        Returns:
            (min_xyz, max_xyz) with an exclusive upper bound, or
            ((0, 0, 0), (0, 0, 0)) for an empty model
        """
        if not self._cells:
            return ((0, 0, 0), (0, 0, 0))
        coords = np.array(self.coordinates(), dtype=np.int64)
        min_coords = coords.min(axis=0)
        max_coords = coords.max(axis=0) + 1
        return (
            tuple(int(v) for v in min_coords),
            tuple(int(v) for v in max_coords),
        )

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Convert to array representation.

        Returns:
            Tuple of (coordinates, colors) where:
            - coordinates: Array of shape (N, 3), int64, insertion order
            - colors: Array of shape (N, 4), uint8 RGBA
        """
        coords = np.array(self.coordinates(), dtype=np.int64).reshape(-1, 3)
        colors = hex_colors_to_rgba(self._cells.values())
        return coords, colors

    def copy(self) -> "VoxelModel":
        """Independent copy with the same cells and order."""
        other = VoxelModel()
        other._cells = dict(self._cells)
        return other

    def __repr__(self) -> str:
        return f"VoxelModel(voxels={len(self._cells)})"

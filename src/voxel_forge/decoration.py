"""
Surface Decoration System

Recolor-only emblems, symbols and stripes. A pattern is computed in the
two free axes of a face and applied with VoxelModel.recolor_voxel, so
decoration can change colors but never adds geometry. Pattern cells with
no voxel underneath are skipped; coverage therefore depends on the local
shape of the hull.

Face orientation (the axis held constant) and its free axes (u, v):
- "x": u -> z, v -> y   (side faces)
- "y": u -> x, v -> z   (top/bottom faces)
- "z": u -> x, v -> y   (front/back faces)
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .model import VoxelModel


FILL = 0
TRIM = 1

Cell = Tuple[int, int, int]  # (du, dv, role)

EMBLEM_TYPES = ("shield", "circle", "diamond", "star")
SYMBOL_TYPES = ("cross", "arrow", "triangle", "square", "circle", "lightning")


@dataclass(frozen=True)
class Surface:
    """
    A face of a shape to decorate.

    Attributes:
        axis: Axis held constant ("x", "y" or "z")
        fixed: Coordinate of the face along that axis
        center_u: Pattern center along the first free axis
        center_v: Pattern center along the second free axis
    """

    axis: str
    fixed: int
    center_u: int
    center_v: int

    def __post_init__(self):
        if self.axis not in ("x", "y", "z"):
            raise ValueError(f"Unknown surface orientation: {self.axis}")

    def to_world(self, du: int, dv: int) -> Tuple[int, int, int]:
        """Map a pattern offset to a world cell."""
        u = self.center_u + du
        v = self.center_v + dv
        if self.axis == "x":
            return (self.fixed, v, u)
        if self.axis == "y":
            return (u, self.fixed, v)
        return (u, v, self.fixed)


# ----------------------------------------------------------------------
# Emblem patterns: (du, dv, role) with role FILL or TRIM

def _shield_pattern(size: int) -> List[Cell]:
    cells = []
    for dv in range(size, -size - 1, -1):
        # Straight upper half, tapering to a point below the center
        half = size if dv >= 0 else size + dv
        for du in range(-half, half + 1):
            edge = abs(du) == half or dv == size
            cells.append((du, dv, TRIM if edge else FILL))
    return cells


def _circle_emblem_pattern(size: int) -> List[Cell]:
    cells = []
    outer = size * size
    inner = (size - 1) * (size - 1)
    for dv in range(size, -size - 1, -1):
        for du in range(-size, size + 1):
            dist = du * du + dv * dv
            if dist <= outer:
                cells.append((du, dv, TRIM if dist > inner else FILL))
    return cells


def _diamond_pattern(size: int) -> List[Cell]:
    cells = []
    for dv in range(size, -size - 1, -1):
        for du in range(-size, size + 1):
            dist = abs(du) + abs(dv)
            if dist <= size:
                cells.append((du, dv, TRIM if dist == size else FILL))
    return cells


def _star_pattern(size: int) -> List[Cell]:
    cells = []
    for dv in range(size, -size - 1, -1):
        for du in range(-size, size + 1):
            if du == 0 or dv == 0 or abs(du) == abs(dv):
                center = abs(du) <= 1 and abs(dv) <= 1
                cells.append((du, dv, TRIM if center else FILL))
    return cells


EMBLEM_PATTERNS: Dict[str, Callable[[int], List[Cell]]] = {
    "shield": _shield_pattern,
    "circle": _circle_emblem_pattern,
    "diamond": _diamond_pattern,
    "star": _star_pattern,
}


# ----------------------------------------------------------------------
# Symbol patterns: single color, role is always FILL

def _cross_pattern(size: int) -> List[Cell]:
    cells = [(0, dv, FILL) for dv in range(size, -size - 1, -1)]
    cells.extend((du, 0, FILL) for du in range(-size, size + 1) if du != 0)
    return cells


def _arrow_pattern(size: int) -> List[Cell]:
    # Points toward +v
    cells = [(0, dv, FILL) for dv in range(size, -size - 1, -1)]
    for k in range(1, max(1, size // 2) + 1):
        cells.append((-k, size - k, FILL))
        cells.append((k, size - k, FILL))
    return cells


def _triangle_pattern(size: int) -> List[Cell]:
    cells = []
    for dv in range(size, -size - 1, -1):
        half = (size - dv) // 2
        for du in range(-half, half + 1):
            cells.append((du, dv, FILL))
    return cells


def _square_pattern(size: int) -> List[Cell]:
    cells = []
    for dv in range(size, -size - 1, -1):
        for du in range(-size, size + 1):
            if max(abs(du), abs(dv)) == size:
                cells.append((du, dv, FILL))
    return cells


def _ring_pattern(size: int) -> List[Cell]:
    cells = []
    low = size * size - size
    high = size * size + size
    for dv in range(size, -size - 1, -1):
        for du in range(-size, size + 1):
            if low <= du * du + dv * dv <= high:
                cells.append((du, dv, FILL))
    return cells


def _lightning_pattern(size: int) -> List[Cell]:
    cells = []
    for dv in range(size, -size - 1, -1):
        if dv > 0:
            cells.append((1, dv, FILL))
        elif dv == 0:
            cells.extend((du, 0, FILL) for du in (1, 0, -1))
        else:
            cells.append((-1, dv, FILL))
    return cells


SYMBOL_PATTERNS: Dict[str, Callable[[int], List[Cell]]] = {
    "cross": _cross_pattern,
    "arrow": _arrow_pattern,
    "triangle": _triangle_pattern,
    "square": _square_pattern,
    "circle": _ring_pattern,
    "lightning": _lightning_pattern,
}


def _apply(model: VoxelModel, surface: Surface, cells: List[Cell], colors: Tuple[str, str]) -> int:
    recolored = 0
    for du, dv, role in cells:
        x, y, z = surface.to_world(du, dv)
        if model.recolor_voxel(x, y, z, colors[role]):
            recolored += 1
    return recolored


def add_emblem(
    model: VoxelModel,
    surface: Surface,
    emblem: str,
    size: int,
    color: str,
    trim_color: str
) -> int:
    """
    Paint an emblem (coat of arms) onto a face.

    Args:
        model: Model to recolor
        surface: Target face and pattern center
        emblem: One of EMBLEM_TYPES
        size: Pattern half-extent in voxels
        color: Fill color
        trim_color: Border/accent color

    Returns:
        Number of voxels recolored
    """
    pattern = EMBLEM_PATTERNS.get(emblem)
    if pattern is None:
        raise ValueError(f"Unknown emblem: {emblem}")
    return _apply(model, surface, pattern(size), (color, trim_color))


def add_symbol(model: VoxelModel, surface: Surface, symbol: str, size: int, color: str) -> int:
    """
    Paint a single-color symbol onto a face.

    Returns:
        Number of voxels recolored
    """
    pattern = SYMBOL_PATTERNS.get(symbol)
    if pattern is None:
        raise ValueError(f"Unknown symbol: {symbol}")
    return _apply(model, surface, pattern(size), (color, color))


def add_stripe(
    model: VoxelModel,
    surface: Surface,
    length: int,
    color: str,
    thickness: int = 1
) -> int:
    """
    Paint a straight stripe along u, starting at the surface center.

    Returns:
        Number of voxels recolored
    """
    cells = [
        (du, dv, FILL)
        for dv in range(thickness)
        for du in range(length)
    ]
    return _apply(model, surface, cells, (color, color))


def add_warning_stripes(
    model: VoxelModel,
    surface: Surface,
    length: int,
    height: int,
    color_a: str,
    color_b: str,
    period: int = 2
) -> int:
    """
    Paint diagonal hazard stripes over a length x height patch.

    Returns:
        Number of voxels recolored
    """
    period = max(1, period)
    recolored = 0
    for dv in range(height):
        for du in range(length):
            color = color_a if ((du + dv) // period) % 2 == 0 else color_b
            x, y, z = surface.to_world(du, dv)
            if model.recolor_voxel(x, y, z, color):
                recolored += 1
    return recolored

"""
Voxel Forge
===========

Seeded procedural generation of voxel models: robots, spaceships,
animals and monsters.

Every model is a pure function of (category, seed): the same pair
always yields the same voxel positions and colors, on any platform.

Key Features:
- Portable 32-bit seeded random stream (integer or text seeds)
- Deduplicated, insertion-ordered voxel model with box, sphere,
  cylinder and tapered-box primitives (Numba-compiled offset kernels)
- Component library of reusable parts (limbs, heads, weapons, engines)
- Recolor-only surface decoration (emblems, symbols, stripes)
- Weighted archetype tables per category
- Dense-grid analysis with SciPy (connectivity, exposed surface)

Example Usage:
    from voxel_forge import generate

    robot = generate("robot", seed=12345)
    print(robot.name, robot.voxel_count)
    record = robot.to_dict()
"""

__version__ = "1.0.0"
__author__ = "Voxel Forge Team"

from .rng import SeededRNG, hash_seed, generate_seed
from .model import Voxel, VoxelModel
from .palettes import Palette, get_palette, get_palette_by_name
from .config import GenerationConfig
from .stats import GenerationStats
from .generators import (
    GENERATORS,
    GeneratedObject,
    generate,
    get_generator,
)
from .analysis import summarize

CATEGORIES = tuple(GENERATORS)

__all__ = [
    "SeededRNG",
    "hash_seed",
    "generate_seed",
    "Voxel",
    "VoxelModel",
    "Palette",
    "get_palette",
    "get_palette_by_name",
    "GenerationConfig",
    "GenerationStats",
    "GeneratedObject",
    "CATEGORIES",
    "generate",
    "get_generator",
    "summarize",
]

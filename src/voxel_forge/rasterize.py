"""
Rasterization Kernels with Numba JIT Compilation

Offset tables for the curved primitives of the voxel model. Each kernel
returns integer offsets in the exact order a nested loop visits them,
so the model's insertion order (and therefore its first-writer-wins
dedup) is fully deterministic.

Kernels:
1. Sphere: all (dx, dy, dz) with dx² + dy² + dz² <= r², x-major order
2. Disc: all (a, b) with a² + b² <= r², a-major order
3. Tapered layers: per-layer (width, depth, offset_x, offset_z)
"""

import numpy as np
from numba import njit


@njit(cache=True)
def sphere_offsets(radius: int) -> np.ndarray:
    """
    Integer offsets inside a sphere.

    Args:
        radius: Sphere radius in voxels (negative gives no cells)

    Returns:
        Array of shape (N, 3), int64, ordered by dx, then dy, then dz
    """
    radius_sq = radius * radius
    count = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            for dz in range(-radius, radius + 1):
                if dx * dx + dy * dy + dz * dz <= radius_sq:
                    count += 1

    result = np.empty((count, 3), dtype=np.int64)
    i = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            for dz in range(-radius, radius + 1):
                if dx * dx + dy * dy + dz * dz <= radius_sq:
                    result[i, 0] = dx
                    result[i, 1] = dy
                    result[i, 2] = dz
                    i += 1
    return result


@njit(cache=True)
def disc_offsets(radius: int) -> np.ndarray:
    """
    Integer offsets inside a disc.

    Args:
        radius: Disc radius in voxels

    Returns:
        Array of shape (N, 2), int64, ordered by first then second offset
    """
    radius_sq = radius * radius
    count = 0
    for a in range(-radius, radius + 1):
        for b in range(-radius, radius + 1):
            if a * a + b * b <= radius_sq:
                count += 1

    result = np.empty((count, 2), dtype=np.int64)
    i = 0
    for a in range(-radius, radius + 1):
        for b in range(-radius, radius + 1):
            if a * a + b * b <= radius_sq:
                result[i, 0] = a
                result[i, 1] = b
                i += 1
    return result


@njit(cache=True)
def tapered_layers(w1: int, h: int, d1: int, w2: int, d2: int) -> np.ndarray:
    """
    Cross-section of every layer of a tapered box.

    Layer t = layer / (h - 1), or layer / 1 for single-layer boxes.
    Width and depth are floored; the section is centered on the base
    footprint with floored offsets.

    Args:
        w1, d1: Base width and depth
        h: Number of layers
        w2, d2: Top width and depth

    Returns:
        Array of shape (h, 4), int64: (width, depth, offset_x, offset_z)
    """
    n = max(h, 0)
    result = np.empty((n, 4), dtype=np.int64)
    divisor = h - 1
    if divisor == 0:
        divisor = 1
    for layer in range(n):
        t = layer / divisor
        w = int(np.floor(w1 + (w2 - w1) * t))
        d = int(np.floor(d1 + (d2 - d1) * t))
        result[layer, 0] = w
        result[layer, 1] = d
        result[layer, 2] = int(np.floor((w1 - w) / 2))
        result[layer, 3] = int(np.floor((d1 - d) / 2))
    return result

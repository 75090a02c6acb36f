"""
Spaceship Generator

Thirteen hull archetypes, each returning the bounding box of its main
hull. After any archetype the same hull-wide decoration pass runs:
coat of arms on the sides (and optionally the top), symbols, racing
stripes, hull markings, warning stripes and vents.

Conventions: the ship faces +Z, Y is up, and mirrored parts use
``add_symmetric_box`` around x = 0 (cell x mirrors to -1 - x), so hull
widths are kept even.
"""

import logging
import math
from typing import NamedTuple

from ..components import (
    generate_cockpit,
    generate_engine,
    generate_wing_cannon,
    generate_wing_light,
)
from ..decoration import (
    EMBLEM_TYPES,
    SYMBOL_TYPES,
    Surface,
    add_emblem,
    add_stripe,
    add_symbol,
    add_warning_stripes,
)
from ..model import VoxelModel
from ..palettes import Palette
from ..rng import SeededRNG
from .base import Archetype, BaseGenerator

logger = logging.getLogger(__name__)

HULL_Y = 4
CORVETTE_VARIANTS = ("blockade-runner", "gunship", "courier")


class Hull(NamedTuple):
    """Bounding box of a ship's main hull (min corner plus extents)."""

    x0: int
    y0: int
    z0: int
    width: int
    height: int
    depth: int

    @property
    def top(self) -> int:
        return self.y0 + self.height - 1

    @property
    def front(self) -> int:
        return self.z0 + self.depth - 1

    @property
    def right(self) -> int:
        return self.x0 + self.width - 1


def _mirror(x: int) -> int:
    """Cell mirrored across the ship's center plane."""
    return -1 - x


def _engine_pair(model: VoxelModel, x: int, y: int, z: int, radius: int, length: int, palette: Palette):
    generate_engine(model, x, y, z, radius, length, palette)
    generate_engine(model, _mirror(x), y, z, radius, length, palette)


def _light_pair(model: VoxelModel, x: int, y: int, z: int, color: str):
    generate_wing_light(model, x, y, z, color)
    generate_wing_light(model, _mirror(x), y, z, color)


class SpaceshipGenerator(BaseGenerator):
    """Spaceships from fighters to capital ships."""

    category = "spaceship"
    ARCHETYPES = (
        Archetype("fighter", 3, "build_fighter"),
        Archetype("freighter", 2, "build_freighter"),
        Archetype("explorer", 2, "build_explorer"),
        Archetype("destroyer", 2, "build_destroyer"),
        Archetype("oval", 1, "build_oval"),
        Archetype("saucer", 1, "build_saucer"),
        Archetype("triangular", 2, "build_triangular"),
        Archetype("cylindrical", 1, "build_cylindrical"),
        Archetype("x-wing", 2, "build_x_wing"),
        Archetype("tie-fighter", 2, "build_tie_fighter"),
        Archetype("star-destroyer", 1, "build_star_destroyer"),
        Archetype("ornithopter", 1, "build_ornithopter"),
        Archetype("corvette", 2, "build_corvette"),
    )
    NAME_PREFIXES = ("Star", "Void", "Nova", "Comet", "Nebula", "Astral", "Solar")
    NAME_SUFFIXES = ("Runner", "Hawk", "Wing", "Lance", "Drifter", "")

    # ------------------------------------------------------------------
    # Archetypes

    def build_fighter(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = rng.range(1, 2)
        length = rng.range(10, 16)
        height = rng.range(2, 3)
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)

        # Cockpit toward the nose
        generate_cockpit(model, 0, hull.y0 + height, hull.front - rng.range(4, 6), half * 2, 3, palette)

        # Wings
        span = rng.range(5, 9)
        wing_depth = rng.range(3, 6)
        wing_z = hull.z0 + rng.range(2, 4)
        model.add_symmetric_box(hull.x0 - span, hull.y0, wing_z, span, 1, wing_depth, palette.secondary)
        # Leading-edge trim
        model.add_symmetric_box(hull.x0 - span, hull.y0, wing_z + wing_depth, span, 1, 1, palette.detail)

        tip_x = hull.x0 - span
        if rng.boolean(0.6):
            cannon_length = rng.range(2, 4)
            for x in (tip_x + 1, _mirror(tip_x + 1)):
                generate_wing_cannon(model, x, hull.y0 - 1, wing_z + wing_depth, cannon_length, palette)
        _light_pair(model, tip_x, hull.y0 + 1, wing_z, palette.accent)

        # Twin engines
        _engine_pair(model, hull.x0, hull.y0 + 1, hull.z0 - 2, 1, 3, palette)
        return hull

    def build_freighter(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = rng.range(3, 4)
        length = rng.range(14, 20)
        height = rng.range(4, 6)
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)

        # Cargo pods along both flanks
        pod_count = rng.range(2, 3)
        pod_length = max(2, (length - 4) // pod_count - 1)
        for i in range(pod_count):
            pod_z = hull.z0 + 2 + i * (pod_length + 1)
            model.add_symmetric_box(hull.x0 - 2, hull.y0, pod_z, 2, height - 1, pod_length, palette.secondary)

        # Bridge on the front of the roof
        bridge_width = max(2, half)
        model.add_box(-(bridge_width // 2), hull.y0 + height, hull.front - 3, bridge_width, 2, 3, palette.detail)
        model.add_box(-(bridge_width // 2), hull.y0 + height + 1, hull.front, bridge_width, 1, 1, palette.accent)

        # Engine bank
        for x in range(hull.x0 + 1, 0, 2):
            _engine_pair(model, x, hull.y0 + height // 2, hull.z0 - 2, 1, 2, palette)
        return hull

    def build_explorer(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = 1
        length = rng.range(12, 18)
        height = rng.range(2, 3)
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)

        # Sensor dish on the nose
        dish_radius = rng.range(2, 3)
        model.add_cylinder(0, hull.y0 + 1, hull.front + 1, dish_radius, 1, palette.secondary, axis="z")
        model.add_voxel(0, hull.y0 + 1, hull.front + 2, palette.accent)

        # Habitat ring around the middle
        ring_radius = rng.range(3, 5)
        ring_z = hull.z0 + length // 2
        for i in range(16):
            angle = (i / 16) * math.pi * 2
            rx = round(math.cos(angle) * ring_radius)
            ry = round(math.sin(angle) * ring_radius)
            model.add_box(rx, hull.y0 + 1 + ry, ring_z, 1, 1, 2, palette.detail)

        # Antenna mast
        mast_height = rng.range(2, 4)
        model.add_box(0, hull.y0 + height, hull.z0 + 2, 1, mast_height, 1, palette.dark)
        model.add_voxel(0, hull.y0 + height + mast_height, hull.z0 + 2, palette.accent)

        generate_engine(model, 0, hull.y0 + 1, hull.z0 - 3, 1, 3, palette)
        return hull

    def build_destroyer(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = rng.range(2, 3)
        length = rng.range(16, 24)
        height = rng.range(3, 4)
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)

        # Armored prow
        model.add_tapered_box(hull.x0, hull.y0, hull.front + 1, half * 2, height, 3, 2, 1, palette.secondary)

        # Stepped superstructure
        tower_height = rng.range(3, 5)
        model.add_tapered_box(
            hull.x0 + 1, hull.y0 + height, hull.z0 + 2,
            half * 2 - 2, tower_height, length // 3,
            2, 2,
            palette.secondary
        )

        # Dorsal turrets
        turret_count = rng.range(2, 4)
        for i in range(turret_count):
            tz = hull.front - 2 - i * 3
            model.add_cylinder(0, hull.y0 + height, tz, 1, 1, palette.detail, axis="y")
            model.add_box(0, hull.y0 + height + 1, tz, 1, 1, 3, palette.dark)

        # Broadside cannons
        if rng.boolean(0.5):
            for i in range(0, length - 4, 4):
                for x in (hull.x0 - 1, _mirror(hull.x0 - 1)):
                    model.add_voxel(x, hull.y0 + 1, hull.z0 + 2 + i, palette.dark)

        _engine_pair(model, hull.x0 + 1, hull.y0 + 1, hull.z0 - 3, 1, 3, palette)
        return hull

    def build_oval(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        radius = rng.range(2, 4)
        length = rng.range(10, 16)
        center_y = HULL_Y + radius
        z0 = -(length // 2)

        # Ellipsoid built from discs along Z
        for i in range(length):
            r = math.floor(radius * math.sin(math.pi * (i + 0.5) / length) + 0.5)
            model.add_cylinder(0, center_y, z0 + i, r, 1, palette.primary, axis="z")

        # Canopy stripe on top
        canopy_z = z0 + length - length // 3
        model.add_box(-1, center_y + radius, canopy_z, 2, 1, 3, palette.accent)

        # Side fins
        fin_span = rng.range(2, 4)
        model.add_symmetric_box(-radius - fin_span, center_y, z0 + 2, fin_span, 1, 3, palette.secondary)

        generate_engine(model, 0, center_y, z0 - 2, max(1, radius - 1), 2, palette)
        return Hull(-radius, center_y - radius, z0, radius * 2, radius * 2, length)

    def build_saucer(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        radius = rng.range(5, 8)
        center_y = HULL_Y

        # Rim and upper deck
        model.add_cylinder(0, center_y, 0, radius, 1, palette.primary, axis="y")
        model.add_cylinder(0, center_y + 1, 0, radius - 2, 1, palette.secondary, axis="y")
        model.add_cylinder(0, center_y - 1, 0, radius - 3, 1, palette.secondary, axis="y")

        # Dome
        dome_radius = rng.range(2, 3)
        model.add_sphere(0, center_y + 2, 0, dome_radius, palette.accent)

        # Rim lights
        light_count = rng.range(6, 10)
        for i in range(light_count):
            angle = (i / light_count) * math.pi * 2
            lx = round(math.cos(angle) * radius)
            lz = round(math.sin(angle) * radius)
            generate_wing_light(model, lx, center_y + 1, lz, palette.detail)

        # Tractor emitter underneath
        model.add_voxel(0, center_y - 2, 0, palette.accent)
        return Hull(-radius, center_y - 1, -radius, radius * 2, 3, radius * 2)

    def build_triangular(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        base_half = rng.range(4, 7)
        length = rng.range(10, 16)
        height = rng.range(2, 3)
        z0 = -(length // 2)

        # Delta wing narrowing toward the nose
        for i in range(length):
            half_w = max(1, math.floor(base_half * (1 - i / length) + 0.5))
            model.add_box(-half_w, HULL_Y, z0 + i, half_w * 2, height, 1, palette.primary)

        # Raised spine
        model.add_box(-1, HULL_Y + height, z0, 2, 1, length - 2, palette.secondary)
        generate_cockpit(model, 0, HULL_Y + height + 1, z0 + length - 6, 2, 3, palette)

        # Wingtip lights and engines along the trailing edge
        _light_pair(model, -base_half, HULL_Y, z0, palette.accent)
        engine_count = rng.range(1, 2)
        for i in range(engine_count):
            _engine_pair(model, -2 - i * 2, HULL_Y + 1, z0 - 2, 1, 2, palette)
        return Hull(-base_half, HULL_Y, z0, base_half * 2, height, length)

    def build_cylindrical(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        radius = rng.range(2, 3)
        length = rng.range(12, 18)
        center_y = HULL_Y + radius
        z0 = -(length // 2)

        model.add_cylinder(0, center_y, z0, radius, length, palette.primary, axis="z")

        # Reinforcement rings
        ring_spacing = rng.range(3, 5)
        for z in range(z0 + 1, z0 + length - 1, ring_spacing):
            model.add_cylinder(0, center_y, z, radius + 1, 1, palette.detail, axis="z")

        # Nose cone
        for i in range(radius):
            model.add_cylinder(0, center_y, z0 + length + i, radius - 1 - i, 1, palette.secondary, axis="z")

        generate_engine(model, 0, center_y, z0 - 3, radius, 3, palette)
        return Hull(-radius, center_y - radius, z0, radius * 2, radius * 2, length)

    def build_x_wing(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        length = rng.range(12, 16)
        height = 2
        hull = Hull(-1, HULL_Y, -(length // 2), 2, height, length)
        model.add_box(*hull, palette.primary)

        # Tapered nose and canopy
        model.add_box(-1, hull.y0, hull.front + 1, 2, 1, 3, palette.primary)
        generate_cockpit(model, 0, hull.y0 + height, hull.front - 5, 2, 3, palette)

        # Four wings in an X, splayed one cell per step outward
        span = rng.range(5, 8)
        wing_depth = rng.range(2, 4)
        wing_z = hull.z0 + 1
        for i in range(span):
            rise = i // 2
            x = hull.x0 - 1 - i
            model.add_symmetric_box(x, hull.y0 + height - 1 + rise, wing_z, 1, 1, wing_depth, palette.secondary)
            model.add_symmetric_box(x, hull.y0 - rise, wing_z, 1, 1, wing_depth, palette.secondary)

        # Wingtip cannons
        tip_x = hull.x0 - span
        top_y = hull.y0 + height - 1 + (span - 1) // 2
        bottom_y = hull.y0 - (span - 1) // 2
        cannon_length = rng.range(4, 7)
        for x in (tip_x, _mirror(tip_x)):
            generate_wing_cannon(model, x, top_y, wing_z + wing_depth, cannon_length, palette)
            generate_wing_cannon(model, x, bottom_y, wing_z + wing_depth, cannon_length, palette)

        # Four engines at the wing roots
        for y in (hull.y0 + height, hull.y0 - 1):
            _engine_pair(model, hull.x0 - 1, y, hull.z0 - 2, 0, 3, palette)
        return hull

    def build_tie_fighter(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        pod_radius = rng.range(2, 3)
        center_y = HULL_Y + rng.range(3, 5)

        # Ball cockpit with viewport
        model.add_sphere(0, center_y, 0, pod_radius, palette.primary)
        model.add_box(-1, center_y - 1, pod_radius, 2, 2, 1, palette.accent)

        # Struts out to the wing panels
        strut = rng.range(2, 4)
        gap = pod_radius + strut
        model.add_symmetric_box(-gap, center_y, 0, strut, 1, 1, palette.detail)

        # Hexagonal-ish panels: taller in the middle
        panel_half = rng.range(4, 6)
        for dz in range(-panel_half, panel_half + 1):
            reach = panel_half - abs(dz) // 2
            model.add_symmetric_box(
                -gap - 1, center_y - reach, dz,
                1, reach * 2 + 1, 1,
                palette.secondary
            )
        # Panel frame spokes
        model.add_symmetric_box(-gap - 2, center_y, -panel_half, 1, 1, panel_half * 2 + 1, palette.dark)
        model.add_symmetric_box(-gap - 2, center_y - panel_half, 0, 1, panel_half * 2 + 1, 1, palette.dark)

        return Hull(-pod_radius, center_y - pod_radius, -pod_radius, pod_radius * 2, pod_radius * 2, pod_radius * 2)

    def build_star_destroyer(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        base_half = rng.range(6, 9)
        length = rng.range(20, 28)
        height = rng.range(2, 3)
        z0 = -(length // 2)

        # Dagger-shaped lower hull
        for i in range(length):
            half_w = max(1, math.floor(base_half * (1 - i / length) + 0.5))
            model.add_box(-half_w, HULL_Y, z0 + i, half_w * 2, height, 1, palette.primary)
            # Trench line down the middle
            if i % 2 == 0:
                model.add_voxel(0, HULL_Y + height, z0 + i, palette.dark)

        # Stepped upper deck
        deck_half = base_half // 2
        deck_length = length // 2
        model.add_tapered_box(
            -deck_half, HULL_Y + height, z0,
            deck_half * 2, 2, deck_length,
            2, deck_length // 2,
            palette.secondary
        )

        # Command tower with twin sensor domes
        tower_height = rng.range(3, 5)
        tower_top = HULL_Y + height + 2 + tower_height
        model.add_box(-2, HULL_Y + height + 2, z0 + 1, 4, tower_height, 3, palette.secondary)
        model.add_box(-3, tower_top, z0 + 1, 6, 1, 3, palette.detail)
        _light_pair(model, -3, tower_top + 1, z0 + 2, palette.accent)

        # Main engines
        for x in range(-base_half + 1, 0, 3):
            _engine_pair(model, x, HULL_Y + 1, z0 - 3, 1, 3, palette)
        return Hull(-base_half, HULL_Y, z0, base_half * 2, height, length)

    def build_ornithopter(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        length = rng.range(10, 14)
        height = rng.range(2, 3)
        hull = Hull(-1, HULL_Y, -(length // 2), 2, height, length)
        model.add_box(*hull, palette.primary)

        # Bulbous cabin at the front
        model.add_sphere(0, hull.y0 + 1, hull.front, 2, palette.accent)

        # Two pairs of long flapping wings
        span = rng.range(7, 11)
        droop = rng.range(0, 2)
        for pair, wing_z in enumerate((hull.z0 + length // 2, hull.z0 + 2)):
            reach = span - pair * 2
            for i in range(reach):
                y = hull.y0 + height - 1 - (i * droop) // max(1, reach)
                model.add_symmetric_box(hull.x0 - 1 - i, y, wing_z, 1, 1, 2, palette.secondary)
            _light_pair(model, hull.x0 - reach, hull.y0 + height - 1 - droop, wing_z, palette.detail)

        # Segmented tail boom
        tail_length = rng.range(3, 6)
        for i in range(tail_length):
            color = palette.secondary if i % 2 == 0 else palette.detail
            model.add_box(-1, hull.y0 + 1, hull.z0 - 1 - i, 2, 1, 1, color)

        generate_engine(model, 0, hull.y0, hull.z0 - tail_length - 2, 0, 2, palette)
        return hull

    def build_corvette(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        variant = rng.choice(CORVETTE_VARIANTS)
        logger.debug("corvette variant: %s", variant)
        if variant == "blockade-runner":
            return self._blockade_runner(model, rng, palette)
        if variant == "gunship":
            return self._gunship(model, rng, palette)
        return self._courier(model, rng, palette)

    def _blockade_runner(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = 2
        length = rng.range(14, 20)
        height = 3
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)

        # Hammerhead cockpit section
        head_half = rng.range(3, 4)
        model.add_box(-head_half, hull.y0, hull.front + 1, head_half * 2, height, 3, palette.secondary)
        model.add_box(-head_half + 1, hull.y0 + 1, hull.front + 4, head_half * 2 - 2, 1, 1, palette.accent)

        # Wide engine block with a row of thrusters
        block_half = half + 2
        model.add_box(-block_half, hull.y0 - 1, hull.z0 - 4, block_half * 2, height + 2, 4, palette.secondary)
        for x in range(-block_half, 0, 2):
            for y in (hull.y0, hull.y0 + 2):
                _engine_pair(model, x, y, hull.z0 - 6, 0, 2, palette)
        return hull

    def _gunship(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = 3
        length = rng.range(10, 14)
        height = rng.range(3, 4)
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)
        generate_cockpit(model, 0, hull.y0 + height, hull.front - 3, 4, 3, palette)

        # Turret pairs along the flanks
        turret_count = rng.range(2, 4)
        for i in range(turret_count):
            tz = hull.z0 + 1 + i * 3
            model.add_symmetric_box(hull.x0 - 2, hull.y0 + 1, tz, 2, 2, 2, palette.secondary)
            for x in (hull.x0 - 2, _mirror(hull.x0 - 2)):
                generate_wing_cannon(model, x, hull.y0 + 2, tz + 2, 2, palette)

        _engine_pair(model, hull.x0 + 1, hull.y0 + 1, hull.z0 - 2, 1, 2, palette)
        return hull

    def _courier(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Hull:
        half = 1
        length = rng.range(14, 18)
        height = 2
        hull = Hull(-half, HULL_Y, -(length // 2), half * 2, height, length)
        model.add_box(*hull, palette.primary)

        # Swept stabilizers
        fin_span = rng.range(2, 4)
        for i in range(fin_span):
            model.add_symmetric_box(hull.x0 - 1 - i, hull.y0, hull.z0 + i, 1, 1, 3, palette.secondary)
        generate_cockpit(model, 0, hull.y0 + height, hull.front - 4, 2, 3, palette)

        # One oversized engine
        generate_engine(model, 0, hull.y0 + 1, hull.z0 - 4, 2, 4, palette)
        return hull

    # ------------------------------------------------------------------
    # Hull-wide decoration

    def finish(self, model: VoxelModel, rng: SeededRNG, palette: Palette, hull: Hull):
        """
        Decorate the main hull: the same pass for every archetype.

        All draws happen up front so that disabling decoration leaves the
        geometry of the rest of the run unchanged.
        """
        side_emblem = rng.choice(EMBLEM_TYPES)
        top_emblem = rng.choice(EMBLEM_TYPES) if rng.boolean(0.5) else None
        symbols = [rng.choice(SYMBOL_TYPES) for _ in range(rng.range(0, 2))]
        racing_stripe = rng.boolean(0.6)
        hull_markings = rng.boolean(0.5)
        warning = rng.boolean(0.4)
        vent_count = rng.range(0, 3)

        mid_y = hull.y0 + hull.height // 2
        mid_z = hull.z0 + hull.depth // 2
        emblem_size = max(1, min(hull.height, hull.depth) // 3)

        # Coat of arms on both flanks
        for side_x in (hull.x0, hull.right):
            self.decorate(
                add_emblem, model, Surface("x", side_x, mid_z, mid_y),
                side_emblem, emblem_size, palette.accent, palette.detail
            )
        if top_emblem:
            self.decorate(
                add_emblem, model, Surface("y", hull.top, 0, mid_z),
                top_emblem, max(1, min(hull.width, hull.depth) // 4), palette.accent, palette.detail
            )

        for i, symbol in enumerate(symbols):
            self.decorate(
                add_symbol, model, Surface("y", hull.top, 0, hull.front - 2 - i * 4),
                symbol, 1, palette.detail
            )

        if racing_stripe:
            for side_x in (hull.x0, hull.right):
                self.decorate(
                    add_stripe, model, Surface("x", side_x, hull.z0, hull.y0),
                    hull.depth, palette.accent
                )

        if hull_markings:
            # Band across the roof just behind the nose
            self.decorate(
                add_stripe, model, Surface("y", hull.top, hull.x0, hull.front - 1),
                hull.width, palette.dark
            )

        if warning:
            self.decorate(
                add_warning_stripes, model, Surface("z", hull.z0, hull.x0, hull.y0),
                hull.width, hull.height, palette.accent, palette.dark
            )

        for i in range(vent_count):
            self.decorate(
                add_stripe, model, Surface("y", hull.top, -1, hull.z0 + 1 + i * 2),
                2, palette.dark
            )

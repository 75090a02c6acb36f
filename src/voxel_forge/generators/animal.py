"""
Animal Generator

Two families of body plans:
- Recognizable: quadruped, long-necked, large-quadruped, aquatic, avian-biped
- Weird: multi-limbed, tentacled, hybrid, asymmetric

The family is drawn first (weird with ``config.weird_probability``) and
then a 0.15 override roll flips it, so either family can always appear.
Every plan builds a body, limbs, a head of one of five types, a tail of
one of four types, and optional ears and a coat pattern.
"""

import logging
from typing import NamedTuple, Tuple

from ..components import (
    ANIMAL_HEAD_TYPES,
    COAT_PATTERNS,
    EAR_TYPES,
    TAIL_TYPES,
    apply_coat_pattern,
    generate_animal_head,
    generate_animal_legs,
    generate_animal_tail,
    generate_aquatic_body,
    generate_biped_body,
    generate_ears,
    generate_fins,
    generate_flying_body,
    generate_long_neck,
    generate_quadruped_body,
    generate_tentacles,
    generate_trunk,
    generate_wings,
)
from ..model import VoxelModel
from ..palettes import Palette
from ..rng import SeededRNG
from .base import Archetype, BaseGenerator

logger = logging.getLogger(__name__)

RECOGNIZABLE = (
    Archetype("quadruped", 3, "build_quadruped"),
    Archetype("long-necked", 2, "build_long_necked"),
    Archetype("large-quadruped", 2, "build_large_quadruped"),
    Archetype("aquatic", 2, "build_aquatic"),
    Archetype("avian-biped", 2, "build_avian_biped"),
)

WEIRD = (
    Archetype("multi-limbed", 2, "build_multi_limbed"),
    Archetype("tentacled", 2, "build_tentacled"),
    Archetype("hybrid", 2, "build_hybrid"),
    Archetype("asymmetric", 1, "build_asymmetric"),
)

WEIRD_OVERRIDE = 0.15


class Body(NamedTuple):
    """Box footprint of a torso: min corner plus width (X), height (Y), length (Z)."""

    x0: int
    y0: int
    z0: int
    width: int
    height: int
    length: int

    @property
    def top(self) -> int:
        return self.y0 + self.height - 1

    @property
    def front(self) -> int:
        return self.z0 + self.length


def _box_body(y0: int, width: int, height: int, length: int) -> Body:
    return Body(-(width // 2), y0, -(length // 2), width, height, length)


class AnimalGenerator(BaseGenerator):
    """Recognizable and weird creatures."""

    category = "animal"
    ARCHETYPES = RECOGNIZABLE
    NAME_PREFIXES = ("Fluffy", "Spotted", "Swift", "Tiny", "Mighty", "Shadow", "Sunny")
    NAME_SUFFIXES = ("Paw", "Tail", "Fang", "Whisker", "Hoof", "")

    def archetypes(self) -> Tuple[Archetype, ...]:
        return RECOGNIZABLE + WEIRD

    def build(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> str:
        weird = rng.boolean(self.config.weird_probability)
        if rng.boolean(WEIRD_OVERRIDE):
            weird = not weird
        logger.debug("animal family: %s", "weird" if weird else "recognizable")

        archetype = self.select_archetype(rng, WEIRD if weird else RECOGNIZABLE)
        result = self._builder(archetype)(model, rng, palette)
        self.finish(model, rng, palette, result)
        return archetype.name

    # ------------------------------------------------------------------
    # Shared parts

    def _head(
        self,
        model: VoxelModel,
        rng: SeededRNG,
        palette: Palette,
        x: int, y: int, z: int,
        head_types: Tuple[str, ...] = ANIMAL_HEAD_TYPES,
    ) -> int:
        """Head with optional ears; returns the head size."""
        head_type = rng.choice(head_types)
        size = generate_animal_head(model, rng, head_type, x, y, z, palette)
        if rng.boolean(0.6):
            ear_type = rng.choice(EAR_TYPES)
            generate_ears(model, ear_type, x, y + size, z, size, palette)
        return size

    def _tail(self, model: VoxelModel, rng: SeededRNG, palette: Palette, body: Body, tail_types=TAIL_TYPES):
        tail_type = rng.choice(tail_types)
        tail_length = rng.range(3, 6)
        generate_animal_tail(model, tail_type, 0, body.top, body.z0 - 1, tail_length, palette)

    def _coat(self, model: VoxelModel, rng: SeededRNG, palette: Palette, body: Body):
        if rng.boolean(0.5):
            pattern = rng.choice(COAT_PATTERNS)
            apply_coat_pattern(model, rng, pattern, body.x0, body.top, body.z0, body.width, body.length, palette)

    # ------------------------------------------------------------------
    # Recognizable plans

    def build_quadruped(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        leg_height = rng.range(3, 5)
        body = _box_body(leg_height, rng.range(2, 3) * 2, rng.range(3, 4), rng.range(6, 10))
        leg_width = 2 if body.width >= 6 else 1

        generate_quadruped_body(model, 0, body.y0, 0, body.length, body.width, body.height, palette)
        generate_animal_legs(
            model, body.x0, (body.z0, body.z0 + body.length - leg_width),
            body.width, leg_height, leg_width, palette
        )
        self._head(model, rng, palette, 0, body.top - 1, body.front)
        self._tail(model, rng, palette, body)
        self._coat(model, rng, palette, body)
        return body

    def build_long_necked(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        leg_height = rng.range(5, 8)
        body = _box_body(leg_height, 4, rng.range(3, 4), rng.range(6, 8))
        generate_quadruped_body(model, 0, body.y0, 0, body.length, body.width, body.height, palette)
        generate_animal_legs(
            model, body.x0, (body.z0, body.z0 + body.length - 1),
            body.width, leg_height, 1, palette
        )

        neck_length = rng.range(5, 9)
        lean = rng.range(1, 2)
        top_y, top_z = generate_long_neck(model, 0, body.top + 1, body.front - 2, neck_length, palette, lean)
        self._head(model, rng, palette, 0, top_y, top_z, ("snout", "horns", "antlers"))
        self._tail(model, rng, palette, body, ("long", "bushy"))
        self._coat(model, rng, palette, body)
        return body

    def build_large_quadruped(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        leg_height = rng.range(4, 6)
        body = _box_body(leg_height, rng.range(3, 4) * 2, rng.range(5, 7), rng.range(9, 13))
        leg_width = 3

        generate_quadruped_body(model, 0, body.y0, 0, body.length, body.width, body.height, palette)
        generate_animal_legs(
            model, body.x0, (body.z0, body.z0 + body.length - leg_width),
            body.width, leg_height, leg_width, palette
        )

        head_y = body.top - 3
        size = self._head(model, rng, palette, 0, head_y, body.front, ("snout", "horns"))
        if rng.boolean(0.5):
            trunk_length = rng.range(3, 6)
            generate_trunk(model, 0, head_y + size // 2, body.front + size, trunk_length, palette)
        self._tail(model, rng, palette, body, ("long", "bushy"))
        self._coat(model, rng, palette, body)
        return body

    def build_aquatic(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        swim_height = 3
        body = _box_body(swim_height, rng.range(2, 3) * 2, rng.range(3, 5), rng.range(10, 16))
        generate_aquatic_body(model, 0, body.y0, 0, body.length, body.width, body.height, palette)

        # Dorsal fins and pectoral fins
        generate_fins(model, 0, body.top + 1, body.z0 + 2, rng.range(1, 3), palette)
        fin_span = rng.range(2, 3)
        model.add_symmetric_box(body.x0 - fin_span, body.y0, body.z0 + body.length // 2, fin_span, 1, 2, palette.secondary)

        self._head(model, rng, palette, 0, body.y0, body.front, ("snout", "beak", "multiple-eyes"))
        self._tail(model, rng, palette, body, ("fin",))
        self._coat(model, rng, palette, body)
        return body

    def build_avian_biped(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        leg_height = rng.range(3, 5)
        width = rng.range(2, 3) * 2
        height = rng.range(4, 6)
        depth = rng.range(3, 5)
        body = Body(-(width // 2), leg_height, -(depth // 2), width, height, depth)

        # Thin legs with forward toes
        for leg_x in (-2, 1):
            model.add_box(leg_x, 1, 0, 1, leg_height - 1, 1, palette.detail)
            model.add_box(leg_x, 0, -1, 1, 1, 3, palette.dark)

        generate_flying_body(model, 0, body.y0, 0, width, height, depth, palette)

        span = rng.range(4, 8)
        for side, wing_x in (("left", body.x0), ("right", body.x0 + width)):
            generate_wings(model, rng, side, wing_x, body.top - 1, body.z0, span, palette)

        self._head(model, rng, palette, 0, body.top + 1, body.z0 + 1, ("beak",))
        self._tail(model, rng, palette, body, ("long", "bushy"))
        self._coat(model, rng, palette, body)
        return body

    # ------------------------------------------------------------------
    # Weird plans

    def build_multi_limbed(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        leg_height = rng.range(2, 4)
        pair_count = rng.range(3, 5)
        body = _box_body(leg_height, rng.range(2, 3) * 2, rng.range(2, 3), pair_count * 3 + 1)

        generate_quadruped_body(model, 0, body.y0, 0, body.length, body.width, body.height, palette)
        legs = tuple(body.z0 + 1 + i * 3 for i in range(pair_count))
        generate_animal_legs(model, body.x0, legs, body.width, leg_height, 1, palette)

        # Extra arms reaching forward from the shoulders
        if rng.boolean(0.5):
            arm_length = rng.range(2, 4)
            model.add_symmetric_box(body.x0 - 1, body.top, body.front - 2, 1, 1, arm_length + 2, palette.secondary)

        self._head(model, rng, palette, 0, body.top - 1, body.front, ("multiple-eyes", "horns", "antlers"))
        self._tail(model, rng, palette, body)
        self._coat(model, rng, palette, body)
        return body

    def build_tentacled(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        radius = rng.range(3, 4)
        tentacle_length = rng.range(4, 8)
        center_y = radius + tentacle_length // 2 + 1

        model.add_sphere(0, center_y, 0, radius, palette.primary)
        generate_tentacles(
            model, rng.range(4, 8),
            0, center_y - radius, 0,
            tentacle_length, palette, spread=max(1, radius - 1)
        )

        body = Body(-radius, center_y - radius, -radius, radius * 2, radius * 2, radius * 2)
        self._head(model, rng, palette, 0, center_y - 1, radius - 1, ("multiple-eyes", "beak"))
        self._tail(model, rng, palette, body, ("segmented", "long"))
        self._coat(model, rng, palette, body)
        return body

    def build_hybrid(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        # Four-legged lower body
        leg_height = rng.range(3, 5)
        lower = _box_body(leg_height, 4, 3, rng.range(7, 10))
        generate_quadruped_body(model, 0, lower.y0, 0, lower.length, lower.width, lower.height, palette)
        generate_animal_legs(
            model, lower.x0, (lower.z0, lower.z0 + lower.length - 1),
            lower.width, leg_height, 1, palette
        )

        # Upright torso rising from the front
        torso_height = rng.range(3, 5)
        torso_z = lower.front - 2
        generate_biped_body(model, 0, lower.top + 1, torso_z, 4, torso_height, 2, palette)
        arm_length = rng.range(2, 4)
        model.add_symmetric_box(-3, lower.top + torso_height - arm_length + 1, torso_z, 1, arm_length, 1, palette.secondary)

        if rng.boolean(0.5):
            span = rng.range(3, 6)
            for side, wing_x in (("left", -2), ("right", 2)):
                generate_wings(model, rng, side, wing_x, lower.top + torso_height, torso_z - 3, span, palette)

        self._head(model, rng, palette, 0, lower.top + torso_height + 1, torso_z - 1)
        self._tail(model, rng, palette, lower)
        self._coat(model, rng, palette, lower)
        return lower

    def build_asymmetric(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Body:
        left_leg = rng.range(3, 5)
        right_leg = rng.range(2, 6)
        leg_height = max(left_leg, right_leg)
        body = _box_body(leg_height, rng.range(4, 6), rng.range(3, 4), rng.range(6, 9))
        generate_quadruped_body(model, 0, body.y0, 0, body.length, body.width, body.height, palette)

        # Mismatched legs: the short side gets a raised hip block
        right_x = body.x0 + body.width - 1
        for leg_x, height in ((body.x0, left_leg), (right_x, right_leg)):
            lift = leg_height - height
            for leg_z in (body.z0, body.z0 + body.length - 1):
                model.add_box(leg_x, lift, leg_z, 1, height, 1, palette.secondary)
                if lift:
                    model.add_box(leg_x, 0, leg_z, 1, lift, 1, palette.detail)

        # One wing, one lump
        span = rng.range(3, 6)
        generate_wings(model, rng, "left", body.x0, body.top, body.z0 + 1, span, palette)
        lump = rng.range(2, 3)
        model.add_sphere(right_x, body.top, body.z0 + body.length // 2, lump, palette.secondary)

        head_x = rng.range(-1, 1)
        self._head(model, rng, palette, head_x, body.top - 1, body.front)
        self._tail(model, rng, palette, body)
        self._coat(model, rng, palette, body)
        return body

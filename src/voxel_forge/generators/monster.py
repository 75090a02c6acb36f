"""
Monster Generator

Four body plans (humanoid, quadruped, serpentine, amorphous). After the
plan is built, every monster gets the same mutation pass:
1. A random number of extra growths (asymmetric boxes) on the body
2. A cluster of eyes on the face
3. Optional armor plates, spikes, a glowing core and tentacles
"""

import logging
import math
from typing import NamedTuple

from ..color import WHITE, shade
from ..components import (
    generate_eye_cluster,
    generate_glow_core,
    generate_spikes,
    generate_tentacles,
)
from ..model import VoxelModel
from ..palettes import Palette
from ..rng import SeededRNG
from .animal import Body
from .base import Archetype, BaseGenerator

logger = logging.getLogger(__name__)


class Form(NamedTuple):
    """Main body box plus the face where eyes go."""

    body: Body
    face_x: int
    face_y: int
    face_z: int
    face_width: int
    face_height: int


class MonsterGenerator(BaseGenerator):
    """Mutated creatures with extra eyes, spikes and tentacles."""

    category = "monster"
    ARCHETYPES = (
        Archetype("humanoid", 3, "build_humanoid"),
        Archetype("quadruped", 3, "build_quadruped"),
        Archetype("serpentine", 2, "build_serpentine"),
        Archetype("amorphous", 2, "build_amorphous"),
    )
    NAME_PREFIXES = ("Grim", "Vile", "Gloom", "Rot", "Dread", "Murk", "Fang")
    NAME_SUFFIXES = ("Maw", "Horror", "Beast", "Spawn", "Fiend", "")

    def build_humanoid(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Form:
        leg_height = rng.range(3, 6)
        width = rng.range(3, 4) * 2
        height = rng.range(5, 8)
        depth = rng.range(3, 4)
        body = Body(-(width // 2), leg_height, -(depth // 2), width, height, depth)

        # Stumpy legs
        leg_width = max(1, width // 3)
        model.add_symmetric_box(-(width // 2), 0, body.z0, leg_width, leg_height, depth - 1, palette.secondary)

        model.add_box(*body, palette.primary)

        # Arms of different lengths, hanging from the shoulders
        left_arm = rng.range(4, 8)
        right_arm = rng.range(4, 8)
        shoulder_y = body.top
        model.add_box(body.x0 - 2, shoulder_y - left_arm + 1, body.z0, 2, left_arm, 2, palette.secondary)
        model.add_box(body.x0 + width, shoulder_y - right_arm + 1, body.z0, 2, right_arm, 2, palette.secondary)
        # Claws
        model.add_box(body.x0 - 2, shoulder_y - left_arm, body.z0 + 1, 2, 1, 2, palette.detail)
        model.add_box(body.x0 + width, shoulder_y - right_arm, body.z0 + 1, 2, 1, 2, palette.detail)

        # Hunched head
        head_size = rng.range(3, 5)
        head_z = body.z0 + 1
        model.add_box(-(head_size // 2), body.top + 1, head_z, head_size, head_size, head_size, palette.primary)
        # Jaw
        model.add_box(-(head_size // 2), body.top + 1, head_z + head_size, head_size, 1, 1, palette.dark)

        return Form(body, 0, body.top + 2, head_z + head_size, max(1, head_size // 2), head_size - 2)

    def build_quadruped(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Form:
        leg_height = rng.range(3, 5)
        width = rng.range(3, 4) * 2
        height = rng.range(4, 6)
        length = rng.range(8, 12)
        body = Body(-(width // 2), leg_height, -(length // 2), width, height, length)
        model.add_box(*body, palette.primary)

        # Thick legs at the corners
        leg_width = 2
        for leg_z in (body.z0, body.z0 + length - leg_width):
            model.add_symmetric_box(body.x0, 0, leg_z, leg_width, leg_height, leg_width, palette.secondary)

        # Low-slung head with a toothy jaw
        head_size = rng.range(4, 6)
        head_y = body.y0 + 1
        head_x0 = -(head_size // 2)
        model.add_box(head_x0, head_y, body.front, head_size, head_size, head_size - 1, palette.primary)
        jaw_z = body.front + head_size - 1
        model.add_box(head_x0, head_y - 1, body.front + 1, head_size, 1, head_size - 1, palette.dark)
        for i in range(0, head_size, 2):
            model.add_voxel(head_x0 + i, head_y, jaw_z, WHITE)

        return Form(body, 0, head_y + 2, jaw_z, max(1, head_size // 2 - 1), head_size - 3)

    def build_serpentine(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Form:
        segments = rng.range(10, 18)
        thickness = rng.range(2, 3)
        amplitude = rng.range(1, 3)
        z0 = -segments

        # Body winding side to side along Z
        for i in range(segments):
            offset_x = round(math.sin(i * 0.6) * amplitude)
            color = palette.primary if i % 3 else shade(palette.primary, 0.8)
            model.add_box(offset_x - thickness // 2, 0, z0 + i * 2, thickness, thickness, 2, color)

        # Rearing neck and head
        head_z = z0 + segments * 2
        neck_height = rng.range(3, 6)
        model.add_box(-(thickness // 2), thickness, head_z - 2, thickness, neck_height, thickness, palette.primary)
        head_size = thickness + 2
        head_y = thickness + neck_height
        model.add_box(-(head_size // 2), head_y, head_z - 2, head_size, head_size - 1, head_size, palette.primary)
        # Forked tongue
        tongue_z = head_z - 2 + head_size
        model.add_voxel(0, head_y, tongue_z + 1, palette.accent)
        model.add_voxel(-1, head_y, tongue_z + 2, palette.accent)
        model.add_voxel(1, head_y, tongue_z + 2, palette.accent)

        body = Body(-amplitude - thickness // 2, 0, z0, thickness + amplitude * 2, thickness, segments * 2)
        return Form(body, 0, head_y + 1, tongue_z, max(1, head_size // 2 - 1), max(0, head_size - 3))

    def build_amorphous(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> Form:
        core_radius = rng.range(3, 5)
        center_y = core_radius
        model.add_sphere(0, center_y, 0, core_radius, palette.primary)

        # Overlapping blobs
        blob_count = rng.range(2, 5)
        for _ in range(blob_count):
            bx = rng.range(-core_radius, core_radius)
            by = center_y + rng.range(-1, core_radius)
            bz = rng.range(-core_radius, core_radius)
            model.add_sphere(bx, by, bz, rng.range(1, core_radius - 1), shade(palette.primary, 0.85))

        # Pseudopods
        pod_count = rng.range(1, 4)
        for _ in range(pod_count):
            px = rng.range(-core_radius, core_radius)
            pz = rng.range(-core_radius, core_radius)
            pod_length = rng.range(2, 4)
            model.add_box(px, 0, pz, 1, 1, pod_length, palette.secondary)

        body = Body(-core_radius, 0, -core_radius, core_radius * 2, core_radius * 2, core_radius * 2)
        return Form(body, 0, center_y, core_radius + 1, core_radius - 1, core_radius - 1)

    def finish(self, model: VoxelModel, rng: SeededRNG, palette: Palette, form: Form):
        body = form.body

        # Growths
        mutation_count = rng.range(0, 3)
        logger.debug("monster mutations: %d", mutation_count)
        for _ in range(mutation_count):
            size = rng.range(1, 3)
            mx = body.x0 + rng.range(-1, body.width - 1)
            my = body.y0 + rng.range(0, max(0, body.height - 1))
            mz = body.z0 + rng.range(-1, body.length - 1)
            model.add_box(mx, my, mz, size, size, size, palette.secondary)

        # Eyes
        eye_count = rng.range(2, 6)
        generate_eye_cluster(
            model, rng, eye_count,
            form.face_x, form.face_y, form.face_z,
            form.face_width, form.face_height,
            palette
        )

        # Armor plates along the back
        if rng.boolean(0.4):
            plate_count = rng.range(2, 4)
            spacing = max(1, body.length // plate_count)
            for i in range(plate_count):
                model.add_box(body.x0, body.top + 1, body.z0 + i * spacing, body.width, 1, max(1, spacing - 1), palette.dark)

        if rng.boolean(0.5):
            generate_spikes(model, rng, body.x0, body.top + 1, body.z0, body.width, body.length, palette.accent)

        if rng.boolean(0.3):
            core_radius = rng.range(1, 2)
            core_y = body.y0 + body.height // 2
            generate_glow_core(model, 0, core_y, body.z0 + body.length, core_radius, palette)

        if rng.boolean(0.3):
            count = rng.range(3, 6)
            length = rng.range(3, 6)
            generate_tentacles(model, count, 0, body.y0 + 1, body.z0 + body.length // 2, length, palette)

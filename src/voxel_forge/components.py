"""
Component Library

Mid-level builders shared by the category generators. Each component
issues a bounded sequence of primitive calls against one VoxelModel.
Components that pick a sub-variant or a size draw from the stream they
are given, so the order in which a generator calls them is part of the
seed-to-model mapping.

Conventions: Y is up, +Z is the front, left is -X. Positions are cell
coordinates; "x, z" usually name the center of a part's footprint.
"""

import math
from typing import Tuple

from .color import WHITE, BLACK, shade
from .model import VoxelModel
from .palettes import Palette
from .rng import SeededRNG


WEAPON_TYPES = ("blade", "gun", "plasma", "drill", "saw")
TOOL_TYPES = ("pliers", "wrench", "cutter", "claw")
ROBOT_HEAD_TYPES = ("humanoid", "sensor", "visor", "antenna")
ANIMAL_HEAD_TYPES = ("snout", "beak", "horns", "antlers", "multiple-eyes")
TAIL_TYPES = ("long", "bushy", "fin", "segmented")
EAR_TYPES = ("pointed", "round", "floppy")
COAT_PATTERNS = ("spots", "stripes", "patches")


# ========== ROBOT COMPONENTS ==========

def generate_joint(model: VoxelModel, x: int, y: int, z: int, size: int, palette: Palette):
    """Cubic joint of side ``size`` centered on (x, z), spanning [y, y + size)."""
    half = size // 2
    model.add_box(x - half, y, z - half, size, size, size, palette.detail)
    # Front cap
    model.add_voxel(x, y + size // 2, z - half + size, palette.accent)


def generate_elbow(model: VoxelModel, side: str, x: int, y: int, z: int, palette: Palette):
    generate_joint(model, x, y, z, 2, palette)
    # Hinge pin on the outer side
    pin_x = x - 2 if side == "left" else x + 1
    model.add_voxel(pin_x, y, z, palette.accent)


def generate_knee(model: VoxelModel, x: int, y: int, z: int, size: int, palette: Palette):
    generate_joint(model, x, y, z, size, palette)


def generate_hand(model: VoxelModel, rng: SeededRNG, side: str, x: int, y: int, z: int, palette: Palette):
    """
    Palm hanging below (x, y, z) with a thumb and 3-5 fingers.

    Args:
        side: "left" or "right" (thumb goes on the outer side)
        x, z: Center of the wrist
        y: Wrist height; the palm occupies [y - size, y)
    """
    hand_size = rng.range(2, 3)
    finger_count = rng.range(3, 5)

    palm_x = x - hand_size // 2
    palm_y = y - hand_size
    model.add_box(palm_x, palm_y, z - 1, hand_size, hand_size, 2, palette.secondary)

    # Thumb (opposable)
    thumb_x = palm_x - 1 if side == "left" else palm_x + hand_size
    thumb_length = rng.range(2, 3)
    for i in range(thumb_length):
        model.add_voxel(thumb_x, palm_y + hand_size - 1 - i, z, palette.detail)

    # Fingers, spread across the palm in two rows
    for i in range(finger_count):
        finger_x = palm_x + (i * hand_size) // finger_count
        finger_z = z - 1 + (i % 2)
        finger_length = rng.range(2, 4)
        for j in range(1, finger_length + 1):
            model.add_voxel(finger_x, palm_y - j, finger_z, palette.detail)


def generate_weapon(model: VoxelModel, rng: SeededRNG, weapon_type: str, x: int, y: int, z: int, palette: Palette):
    """
    Forward-pointing weapon mounted at (x, y, z).

    Only the blade draws from the stream (its length).
    """
    if weapon_type == "blade":
        # Energy blade
        blade_length = rng.range(6, 12)
        model.add_box(x - 1, y, z, 2, 2, blade_length, palette.accent)
        model.add_box(x, y, z + blade_length, 1, 1, 2, WHITE)
    elif weapon_type == "gun":
        model.add_box(x - 1, y, z, 2, 2, 4, palette.secondary)
        model.add_box(x - 1, y + 1, z + 4, 2, 1, 2, palette.accent)
        model.add_voxel(x, y, z + 6, "#FF0000")  # Muzzle
    elif weapon_type == "plasma":
        model.add_box(x - 2, y, z, 4, 3, 5, palette.secondary)
        model.add_box(x - 1, y + 1, z + 5, 2, 1, 3, palette.accent)
    elif weapon_type == "drill":
        model.add_box(x - 1, y, z, 2, 2, 3, palette.secondary)
        model.add_box(x - 1, y, z + 3, 2, 2, 2, palette.detail)
        # Spiral flutes narrowing to a point
        for i in range(4):
            model.add_voxel(x - 1 + (i % 2), y + (i // 2) % 2, z + 5 + i // 2, palette.detail)
        model.add_voxel(x, y, z + 7, palette.accent)
    elif weapon_type == "saw":
        model.add_box(x - 1, y, z, 2, 2, 2, palette.secondary)
        # Blade ring
        for i in range(8):
            angle = (i / 8) * math.pi * 2
            offset_x = round(math.cos(angle) * 2)
            offset_z = round(math.sin(angle) * 2)
            model.add_voxel(x + offset_x, y, z + 4 + offset_z, palette.accent)
    else:
        model.add_box(x - 1, y, z, 2, 2, 4, palette.accent)


def generate_tool(model: VoxelModel, tool_type: str, x: int, y: int, z: int, palette: Palette):
    """Forward-pointing tool mounted at (x, y, z)."""
    if tool_type == "pliers":
        model.add_box(x - 1, y, z, 2, 2, 2, palette.secondary)
        # Two jaws
        model.add_box(x - 2, y, z + 2, 1, 1, 2, palette.detail)
        model.add_box(x + 1, y, z + 2, 1, 1, 2, palette.detail)
    elif tool_type == "wrench":
        model.add_box(x - 1, y, z, 2, 2, 3, palette.secondary)
        model.add_box(x - 2, y, z + 3, 4, 1, 1, palette.detail)
        model.add_voxel(x - 2, y, z + 4, palette.detail)
        model.add_voxel(x + 1, y, z + 4, palette.detail)
    elif tool_type == "cutter":
        model.add_box(x - 1, y, z, 2, 2, 2, palette.secondary)
        model.add_box(x - 1, y, z + 2, 2, 1, 3, palette.accent)
    elif tool_type == "claw":
        model.add_box(x - 1, y, z, 2, 2, 2, palette.secondary)
        # Three claws
        for i in range(3):
            model.add_box(x - 1 + i, y, z + 2, 1, 1, 3, palette.detail)
    else:
        model.add_box(x - 1, y, z, 2, 2, 3, palette.detail)


def generate_robot_head(
    model: VoxelModel,
    rng: SeededRNG,
    head_type: str,
    x: int, y: int, z: int,
    palette: Palette
) -> Tuple[int, int, int]:
    """
    Robot head centered on (x, z) with its base at y.

    Returns:
        (width, height, depth) of the head block
    """
    width = rng.range(3, 5)
    height = rng.range(3, 5)
    depth = rng.range(3, 5)
    x0 = x - width // 2
    z0 = z - depth // 2
    front = z0 + depth

    model.add_box(x0, y, z0, width, height, depth, palette.primary)

    if head_type == "humanoid":
        # Two eyes and a mouth grille
        model.add_voxel(x0, y + height - 2, front, palette.accent)
        model.add_voxel(x0 + width - 1, y + height - 2, front, palette.accent)
        model.add_box(x0 + 1, y + 1, front, max(1, width - 2), 1, 1, palette.dark)
    elif head_type == "sensor":
        # Sensor array on top plus a single lens
        for i in range(width):
            if i % 2 == 0:
                model.add_voxel(x0 + i, y + height, z, palette.accent)
        model.add_voxel(x, y + height // 2, front, palette.accent)
    elif head_type == "visor":
        model.add_box(x0, y + height - 2, front, width, 1, 1, palette.accent)
        model.add_box(x0 - 1, y + height - 2, z0, 1, 1, depth, palette.dark)
        model.add_box(x0 + width, y + height - 2, z0, 1, 1, depth, palette.dark)
    elif head_type == "antenna":
        for i in range(3):
            ant_x = x - 1 + i
            ant_height = 2 + (i % 2)
            for j in range(ant_height):
                model.add_voxel(ant_x, y + height + j, z, palette.detail)
            model.add_voxel(ant_x, y + height + ant_height, z, palette.accent)
        model.add_voxel(x - 1, y + height - 2, front, palette.accent)
        model.add_voxel(x + 1, y + height - 2, front, palette.accent)

    return (width, height, depth)


def generate_robot_torso(
    model: VoxelModel,
    rng: SeededRNG,
    x: int, y: int, z: int,
    width: int, height: int, depth: int,
    palette: Palette
) -> int:
    """
    Torso block with optional chest panel, back vents and core.

    Returns:
        Z of the outermost front face at the torso center
    """
    x0 = x - width // 2
    z0 = z - depth // 2
    front = z0 + depth - 1

    model.add_box(x0, y, z0, width, height, depth, palette.primary)

    # Chest panel
    if rng.boolean(0.7) and width > 2 and height > 2:
        model.add_box(x0 + 1, y + 1, z0 + depth, width - 2, height - 2, 1, palette.secondary)
        front = z0 + depth

    # Back vents
    if rng.boolean(0.6):
        for i in range(3):
            vent_y = y + 2 + i * 2
            if vent_y < y + height:
                model.add_box(x - 1, vent_y, z0 - 1, 2, 1, 1, palette.detail)

    # Core reactor
    if rng.boolean(0.5):
        core_y = y + height // 2
        model.add_voxel(x, core_y, front + 1, palette.accent)
        model.add_voxel(x, core_y + 1, front + 1, palette.accent)

    return front


def generate_robot_leg(
    model: VoxelModel,
    side: str,
    x0: int, z: int,
    length: int,
    leg_width: int,
    palette: Palette
):
    """
    Standing leg from the ground (y = 0) to y = length.

    Args:
        side: "left" or "right" (hip plate goes on the outer side)
        x0: Minimum X of the leg column
        z: Center of the leg along Z
        length: Total leg height
        leg_width: Column width and depth
    """
    thigh = (length * 2) // 5
    shin = (length * 2) // 5
    base = length - thigh - shin

    x = x0 + leg_width // 2
    z0 = z - leg_width // 2

    # Foot with toes
    model.add_box(x0, 0, z0 - 1, leg_width, 1, leg_width + 2, palette.dark)
    for i in range(leg_width):
        model.add_voxel(x0 + i, 0, z0 + leg_width + 1, palette.detail)

    # Ankle
    if base > 1:
        model.add_box(x0, 1, z0, leg_width, base - 1, leg_width, palette.detail)

    # Knee goes in before the limbs so its cells keep the joint color
    generate_knee(model, x, base + shin - 1, z, leg_width, palette)

    model.add_box(x0, base, z0, leg_width, shin, leg_width, palette.secondary)
    model.add_box(x0, base + shin, z0, leg_width, thigh, leg_width, palette.secondary)

    # Hip plate on the outer side
    hip_x = x0 - 1 if side == "left" else x0 + leg_width
    model.add_box(hip_x, length - 1, z0, 1, 1, leg_width, palette.detail)


def generate_backpack(
    model: VoxelModel,
    rng: SeededRNG,
    x: int, y: int, back_z: int,
    width: int, height: int,
    palette: Palette
):
    """Backpack hanging behind a torso whose back face is at back_z."""
    pack_depth = rng.range(2, 3)
    pack_width = max(2, width - 2)
    pack_height = max(2, height - 2)
    px = x - pack_width // 2
    pz = back_z - pack_depth

    model.add_box(px, y + 1, pz, pack_width, pack_height, pack_depth, palette.secondary)

    # Twin exhausts
    if rng.boolean(0.5):
        for offset in (0, pack_width - 1):
            model.add_cylinder(px + offset, y, pz, 0, 2, palette.dark, axis="y")
            model.add_voxel(px + offset, y - 1, pz, palette.accent)
    # Strap
    model.add_box(px, y + pack_height, back_z, pack_width, 1, 1, palette.detail)


def generate_shoulder_mount(model: VoxelModel, side: str, x: int, y: int, z: int, palette: Palette):
    """Small turret sitting on a shoulder top at (x, y, z)."""
    model.add_box(x - 1, y, z - 1, 2, 1, 2, palette.detail)
    model.add_box(x - 1, y + 1, z - 1, 2, 2, 3, palette.secondary)
    barrel_x = x - 1 if side == "left" else x
    model.add_box(barrel_x, y + 2, z + 2, 1, 1, 3, palette.dark)


# ========== ANIMAL COMPONENTS ==========

def generate_quadruped_body(model: VoxelModel, x: int, y: int, z: int, length: int, width: int, height: int, palette: Palette):
    model.add_box(x - width // 2, y, z - length // 2, width, height, length, palette.primary)


def generate_biped_body(model: VoxelModel, x: int, y: int, z: int, width: int, height: int, depth: int, palette: Palette):
    model.add_box(x - width // 2, y, z - depth // 2, width, height, depth, palette.primary)


def generate_aquatic_body(model: VoxelModel, x: int, y: int, z: int, length: int, width: int, height: int, palette: Palette):
    """Streamlined body: tapers in width and length toward the back."""
    model.add_tapered_box(
        x - width // 2, y, z - length // 2,
        width, height, length,
        width * 0.6, length * 0.8,
        palette.primary
    )
    # Belly
    model.add_box(x - width // 2 + 1, y - 1, z - length // 2 + 1, max(1, width - 2), 1, max(1, length - 2), palette.secondary)


def generate_flying_body(model: VoxelModel, x: int, y: int, z: int, width: int, height: int, depth: int, palette: Palette):
    """Light, egg-shaped body."""
    model.add_box(x - width // 2, y, z - depth // 2, width, height, depth, palette.primary)
    model.add_box(x - width // 2 + 1, y + height, z - depth // 2 + 1, max(1, width - 2), 1, max(1, depth - 2), palette.primary)


def generate_long_neck(model: VoxelModel, x: int, y: int, z: int, length: int, palette: Palette, lean: int = 1):
    """
    Neck rising from (x, y, z), leaning forward one cell every ``3 // lean`` layers.

    Returns:
        (top_y, top_z) where the head should attach
    """
    neck_width = 2
    step = max(1, 3 // max(1, lean))
    top_z = z
    for i in range(length):
        top_z = z + i // step
        model.add_box(x - neck_width // 2, y + i, top_z - neck_width // 2, neck_width, 1, neck_width, palette.primary)
    return (y + length, top_z)


def generate_trunk(model: VoxelModel, x: int, y: int, z: int, length: int, palette: Palette):
    """Trunk hanging forward and down from the face at (x, y, z)."""
    trunk_width = 2
    model.add_box(x - trunk_width // 2, y, z, trunk_width, trunk_width, 2, palette.primary)
    for i in range(length):
        offset_x = math.floor(math.sin(i * 0.3))
        model.add_box(x - trunk_width // 2 + offset_x, y - i, z + 2, trunk_width, 1, 1, palette.primary)
    model.add_box(x - 1, y - length, z + 2, 2, 1, 1, palette.detail)


def generate_tentacles(
    model: VoxelModel,
    count: int,
    center_x: int, center_y: int, center_z: int,
    length: int,
    palette: Palette,
    spread: int = 2
):
    """Tentacles radiating outward and downward from a ring around the center."""
    for t in range(count):
        angle = (t / count) * math.pi * 2
        dir_x = math.cos(angle)
        dir_z = math.sin(angle)
        start_x = center_x + round(dir_x * spread)
        start_z = center_z + round(dir_z * spread)

        for i in range(length):
            segment = max(1, 2 - i // 3)
            curl = round(math.sin(i * 0.5))
            seg_x = start_x + round(dir_x * i * 0.7) + curl
            seg_z = start_z + round(dir_z * i * 0.7)
            seg_y = center_y - i // 2
            model.add_box(
                seg_x - segment // 2, seg_y, seg_z - segment // 2,
                segment, segment, segment,
                palette.secondary
            )
        # Tip
        tip_x = start_x + round(dir_x * length * 0.7)
        tip_z = start_z + round(dir_z * length * 0.7)
        model.add_voxel(tip_x, center_y - length // 2, tip_z, palette.accent)


def generate_animal_tail(model: VoxelModel, tail_type: str, x: int, y: int, z: int, length: int, palette: Palette):
    """Tail growing backward (-Z) from (x, y, z)."""
    if tail_type == "long":
        for i in range(length):
            model.add_box(x - 1, y + i // 4, z - i, 2, 1, 1, palette.secondary)
    elif tail_type == "bushy":
        for i in range(length):
            width = min(3, 1 + i // 2)
            model.add_box(x - width // 2, y + i // 3, z - i, width, width, 1, palette.secondary)
        model.add_voxel(x, y + (length - 1) // 3, z - length, palette.detail)
    elif tail_type == "fin":
        model.add_box(x - 1, y, z - length, 2, 2, length, palette.secondary)
        model.add_box(x - 3, y - 1, z - length - 2, 6, 4, 2, palette.accent)
    elif tail_type == "segmented":
        for i in range(length):
            model.add_box(x - 1, y + i, z - i * 2 - 1, 2, 2, 2, palette.secondary if i % 2 == 0 else palette.detail)
        # Stinger
        model.add_voxel(x, y + length, z - length * 2 + 2, palette.accent)
    else:
        model.add_box(x - 1, y, z - length, 2, 1, length, palette.secondary)


def generate_animal_head(
    model: VoxelModel,
    rng: SeededRNG,
    head_type: str,
    x: int, y: int, z: int,
    palette: Palette
) -> int:
    """
    Head centered on x with its base at y and its back face at z.

    Returns:
        Head size (edge of the skull cube)
    """
    size = rng.range(3, 5)
    x0 = x - size // 2
    front = z + size
    model.add_box(x0, y, z, size, size, size, palette.primary)

    if head_type == "snout":
        muzzle_w = max(2, size - 1)
        muzzle_h = max(1, size // 2)
        model.add_box(x - muzzle_w // 2, y, front, muzzle_w, muzzle_h, 3, palette.primary)
        model.add_voxel(x, y + muzzle_h - 1, front + 3, palette.dark)  # Nose
    elif head_type == "beak":
        model.add_box(x - 1, y + size // 2 - 1, front, 2, 1, 3, palette.accent)
        model.add_box(x - 1, y + size // 2 - 2, front, 2, 1, 2, palette.accent)
    elif head_type == "horns":
        for i in range(3):
            model.add_voxel(x0, y + size + i, z + 1 + i // 2, palette.detail)
            model.add_voxel(x0 + size - 1, y + size + i, z + 1 + i // 2, palette.detail)
    elif head_type == "antlers":
        for side in (-1, 1):
            base_x = x + side * (size // 2)
            for i in range(3):
                model.add_voxel(base_x + side * i, y + size + i, z + 1, palette.detail)
            # Tines
            model.add_voxel(base_x + side, y + size + 3, z + 1, palette.detail)
            model.add_voxel(base_x + side * 2, y + size + 3, z + 2, palette.detail)
    elif head_type == "multiple-eyes":
        for i in range(4):
            eye_x = x - 1 + (i % 2) * 2
            eye_y = y + 1 + (i // 2) * 2
            model.add_voxel(eye_x, eye_y, front, WHITE)
            model.add_voxel(eye_x, eye_y, front + 1, BLACK)

    if head_type != "multiple-eyes":
        eye_y = y + size - 2
        model.add_voxel(x0, eye_y, front, WHITE)
        model.add_voxel(x0 + size - 1, eye_y, front, WHITE)
        model.add_voxel(x0, eye_y, front + 1, BLACK)
        model.add_voxel(x0 + size - 1, eye_y, front + 1, BLACK)

    return size


def generate_ears(model: VoxelModel, ear_type: str, x: int, y: int, z: int, head_size: int, palette: Palette):
    """Ears on top of a head (centered on x, top at y, back face at z)."""
    x0 = x - head_size // 2
    for ear_x in (x0, x0 + head_size - 1):
        if ear_type == "pointed":
            model.add_voxel(ear_x, y, z + 1, palette.primary)
            model.add_voxel(ear_x, y + 1, z + 1, palette.detail)
        elif ear_type == "round":
            model.add_box(ear_x, y, z, 1, 2, 2, palette.detail)
        else:
            # Floppy: hang down the sides
            side_x = ear_x - 1 if ear_x == x0 else ear_x + 1
            model.add_box(side_x, y - 3, z + 1, 1, 3, 1, palette.secondary)


def generate_wings(model: VoxelModel, rng: SeededRNG, side: str, x: int, y: int, z: int, span: int, palette: Palette):
    """
    Wing attached at (x, y, z), extending outward along X.

    Returns:
        Wing width along Z
    """
    wing_width = rng.range(3, 6)
    wing_height = rng.range(1, 2)

    if side == "left":
        model.add_box(x - span, y, z, span, wing_height, wing_width, palette.secondary)
    else:
        model.add_box(x, y, z, span, wing_height, wing_width, palette.secondary)

    # Feather tips along the trailing edge
    for i in range(0, span, 2):
        tip_x = x - 1 - i if side == "left" else x + i
        model.add_voxel(tip_x, y, z - 1, palette.detail)
    return wing_width


def generate_fins(model: VoxelModel, x: int, y: int, z: int, count: int, palette: Palette):
    """Row of dorsal fins along Z starting at (x, y, z)."""
    for i in range(count):
        fin_z = z + i * 3
        model.add_box(x, y, fin_z, 1, 3 - (i % 2), 2, palette.secondary)


def generate_animal_legs(
    model: VoxelModel,
    x0: int, z_positions: Tuple[int, ...],
    body_width: int, leg_height: int, leg_width: int,
    palette: Palette
):
    """Pairs of straight legs under a body spanning [x0, x0 + body_width)."""
    for leg_z in z_positions:
        model.add_box(x0, 0, leg_z, leg_width, leg_height, leg_width, palette.secondary)
        model.add_box(x0 + body_width - leg_width, 0, leg_z, leg_width, leg_height, leg_width, palette.secondary)
        # Paws
        model.add_box(x0, 0, leg_z + leg_width, leg_width, 1, 1, palette.dark)
        model.add_box(x0 + body_width - leg_width, 0, leg_z + leg_width, leg_width, 1, 1, palette.dark)


def apply_coat_pattern(
    model: VoxelModel,
    rng: SeededRNG,
    pattern: str,
    x0: int, top_y: int, z0: int,
    width: int, length: int,
    palette: Palette
) -> int:
    """
    Recolor the top of a body with spots, stripes or patches.

    Returns:
        Number of voxels recolored
    """
    recolored = 0
    color = palette.detail
    if pattern == "spots":
        spot_count = rng.range(3, 7)
        for _ in range(spot_count):
            sx = x0 + rng.range(0, max(0, width - 1))
            sz = z0 + rng.range(0, max(0, length - 1))
            for dx, dz in ((0, 0), (1, 0), (0, 1)):
                if model.recolor_voxel(sx + dx, top_y, sz + dz, color):
                    recolored += 1
    elif pattern == "stripes":
        spacing = rng.range(2, 3)
        for lz in range(0, length, spacing):
            for lx in range(width):
                if model.recolor_voxel(x0 + lx, top_y, z0 + lz, color):
                    recolored += 1
    else:
        patch_w = max(1, width // 2)
        patch_l = max(1, length // 3)
        px = x0 + rng.range(0, max(0, width - patch_w))
        pz = z0 + rng.range(0, max(0, length - patch_l))
        for lx in range(patch_w):
            for lz in range(patch_l):
                if model.recolor_voxel(px + lx, top_y, pz + lz, shade(palette.primary, 0.7)):
                    recolored += 1
    return recolored


# ========== SPACESHIP COMPONENTS ==========

def generate_engine(model: VoxelModel, x: int, y: int, z: int, radius: int, length: int, palette: Palette):
    """
    Engine nacelle along Z ending at back face z, with a glowing nozzle.

    The nacelle occupies [z, z + length); the glow sits at z - 1.
    """
    model.add_cylinder(x, y, z, radius, length, palette.secondary, axis="z")
    model.add_cylinder(x, y, z - 1, max(0, radius - 1), 1, palette.accent, axis="z")


def generate_wing_cannon(model: VoxelModel, x: int, y: int, z: int, length: int, palette: Palette):
    """Cannon barrel pointing forward from (x, y, z)."""
    model.add_box(x, y, z, 1, 1, length, palette.dark)
    model.add_voxel(x, y, z + length, palette.accent)


def generate_wing_light(model: VoxelModel, x: int, y: int, z: int, color: str):
    model.add_voxel(x, y, z, color)


def generate_cockpit(model: VoxelModel, x: int, y: int, z: int, width: int, length: int, palette: Palette):
    """Canopy sitting on a hull top at height y, front edge at z + length."""
    model.add_tapered_box(x - width // 2, y, z, width, 2, length, max(1, width - 2), max(1, length - 2), palette.accent)


# ========== MONSTER COMPONENTS ==========

def generate_spikes(
    model: VoxelModel,
    rng: SeededRNG,
    x0: int, top_y: int, z0: int,
    width: int, length: int,
    color: str
) -> int:
    """
    Random spikes rising from the top of a body.

    Returns:
        Number of spikes
    """
    spike_count = rng.range(3, 8)
    for _ in range(spike_count):
        sx = x0 + rng.range(0, max(0, width - 1))
        sz = z0 + rng.range(0, max(0, length - 1))
        spike_height = rng.range(1, 3)
        for i in range(spike_height):
            model.add_voxel(sx, top_y + i, sz, color)
    return spike_count


def generate_eye_cluster(
    model: VoxelModel,
    rng: SeededRNG,
    count: int,
    x: int, y: int, front_z: int,
    spread_x: int, spread_y: int,
    palette: Palette
):
    """Eyes placed on a front face; each eye is a white cell with a pupil in front."""
    for _ in range(count):
        ex = x + rng.range(-spread_x, spread_x)
        ey = y + rng.range(0, spread_y)
        model.add_voxel(ex, ey, front_z, WHITE)
        model.add_voxel(ex, ey, front_z + 1, BLACK if rng.boolean(0.7) else palette.accent)


def generate_glow_core(model: VoxelModel, x: int, y: int, z: int, radius: int, palette: Palette):
    """Glowing orb protruding from a face, with a bright center."""
    model.add_voxel(x, y, z + radius, shade(palette.accent, 1.5))
    model.add_sphere(x, y, z, radius, palette.accent)

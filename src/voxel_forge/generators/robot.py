"""
Robot Generator

Construction sequence (same for every loadout archetype):
1. Proportion flags: tall / wide / thin
2. Legs with knees and feet
3. Torso with panel, vents and core
4. Neck and head (one of four head types)
5. Arms with shoulder pads and elbow joints
6. Hands, tools or weapons (an attachment either replaces the hand or
   is mounted beside it)
7. Optional backpack, otherwise optional back/shoulder/chest/hip tools
8. Torso surface details (emblem, symbol or stripes)

The loadout archetype decides whether attachments are tools, weapons,
or a mix.
"""

import logging

from ..components import (
    ROBOT_HEAD_TYPES,
    TOOL_TYPES,
    WEAPON_TYPES,
    generate_backpack,
    generate_elbow,
    generate_hand,
    generate_robot_head,
    generate_robot_leg,
    generate_robot_torso,
    generate_shoulder_mount,
    generate_tool,
    generate_weapon,
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


class RobotGenerator(BaseGenerator):
    """Bipedal robots with tool and weapon loadouts."""

    category = "robot"
    ARCHETYPES = (
        Archetype("worker", 3, "build_worker"),
        Archetype("soldier", 3, "build_soldier"),
        Archetype("hybrid", 2, "build_hybrid"),
    )
    NAME_PREFIXES = ("Unit", "Mech", "Droid", "Titan", "Bolt", "Servo", "Cog")
    NAME_SUFFIXES = ("MK", "RX", "Prime", "Alpha", "", "Zero")

    def build_worker(self, model: VoxelModel, rng: SeededRNG, palette: Palette):
        self._build_robot(model, rng, palette, loadout="tools")

    def build_soldier(self, model: VoxelModel, rng: SeededRNG, palette: Palette):
        self._build_robot(model, rng, palette, loadout="weapons")

    def build_hybrid(self, model: VoxelModel, rng: SeededRNG, palette: Palette):
        self._build_robot(model, rng, palette, loadout="mixed")

    def _build_robot(self, model: VoxelModel, rng: SeededRNG, palette: Palette, loadout: str):
        # --- Proportions ---
        tall = rng.boolean(0.25)
        wide = rng.boolean(0.25)
        thin = (not wide) and rng.boolean(0.25)
        logger.debug("robot proportions: tall=%s wide=%s thin=%s", tall, wide, thin)

        # --- Legs ---
        leg_length = rng.range(4, 8) + (3 if tall else 0)
        leg_width = rng.range(2, 3) + (1 if wide else 0)
        leg_spacing = rng.range(1, 2) + (1 if wide else 0)

        generate_robot_leg(model, "left", -(leg_spacing + leg_width), 0, leg_length, leg_width, palette)
        generate_robot_leg(model, "right", leg_spacing, 0, leg_length, leg_width, palette)

        # --- Torso ---
        half_width = rng.range(3, 5) + (1 if wide else 0) - (1 if thin else 0)
        half_width = max(half_width, leg_spacing + leg_width)
        torso_width = half_width * 2
        torso_height = rng.range(5, 9) + (2 if tall else 0)
        torso_depth = max(3, rng.range(3, 5) - (1 if thin else 0))
        torso_y = leg_length
        torso_top = torso_y + torso_height
        torso_z0 = -(torso_depth // 2)

        front_z = generate_robot_torso(
            model, rng, 0, torso_y, 0, torso_width, torso_height, torso_depth, palette
        )

        # --- Head ---
        head_type = rng.choice(ROBOT_HEAD_TYPES)
        model.add_box(-1, torso_top, -1, 2, 1, 2, palette.detail)  # Neck
        generate_robot_head(model, rng, head_type, 0, torso_top + 1, 0, palette)

        # --- Arms ---
        arm_width = 2 + (1 if wide else 0)
        upper_length = rng.range(2, 4) + (1 if tall else 0)
        fore_length = rng.range(2, 4)
        shoulder_y = torso_top - 2
        arm_x0 = -half_width - arm_width
        arm_z0 = -(arm_width // 2)

        # Shoulder pads
        model.add_symmetric_box(
            arm_x0 - 1, shoulder_y, arm_z0 - 1,
            arm_width + 1, 2, arm_width + 2,
            palette.detail
        )
        # Upper arms
        model.add_symmetric_box(
            arm_x0, shoulder_y - upper_length, arm_z0,
            arm_width, upper_length, arm_width,
            palette.secondary
        )

        elbow_y = shoulder_y - upper_length - 2
        left_center = arm_x0 + arm_width // 2
        # Mirror of a 2-wide joint centered on c is centered on -c
        centers = {"left": left_center, "right": -left_center}
        for side in ("left", "right"):
            generate_elbow(model, side, centers[side], elbow_y, 0, palette)

        # Forearms
        model.add_symmetric_box(
            arm_x0, elbow_y - fore_length, arm_z0,
            arm_width, fore_length, arm_width,
            palette.secondary
        )

        # --- Hands / attachments ---
        wrist_y = elbow_y - fore_length
        arm_front = arm_z0 + arm_width
        for side in ("left", "right"):
            self._arm_attachment(model, rng, palette, loadout, side, centers[side], wrist_y, arm_front, elbow_y)

        # --- Optional gear ---
        if rng.boolean(0.4):
            generate_backpack(model, rng, 0, torso_y, torso_z0, torso_width, torso_height, palette)
        else:
            if rng.boolean(0.3):
                # Tool slung across the back, head poking over the shoulder
                back_x = half_width - 2
                model.add_box(back_x, torso_y - 1, torso_z0 - 2, 1, torso_height + 3, 1, palette.dark)
                generate_tool(model, rng.choice(TOOL_TYPES), back_x, torso_top + 2, torso_z0 - 2, palette)
            if rng.boolean(0.35):
                side = rng.choice(("left", "right"))
                mount_x = left_center if side == "left" else -left_center
                generate_shoulder_mount(model, side, mount_x, shoulder_y + 2, 0, palette)
            if rng.boolean(0.25):
                generate_tool(model, rng.choice(TOOL_TYPES), 0, torso_y + 1, front_z + 1, palette)
            if rng.boolean(0.25):
                # Hip holster
                hip_x = -half_width - 1
                model.add_box(hip_x, torso_y - 3, -1, 1, 3, 2, palette.dark)
                model.add_box(hip_x, torso_y, -1, 1, 1, 1, palette.detail)

        # --- Torso surface details ---
        self._torso_details(model, rng, palette, half_width, torso_y, torso_height, front_z)
        self._leg_markings(model, rng, palette, leg_spacing, leg_width, leg_length)

    def _arm_attachment(
        self,
        model: VoxelModel,
        rng: SeededRNG,
        palette: Palette,
        loadout: str,
        side: str,
        center_x: int,
        wrist_y: int,
        arm_front: int,
        elbow_y: int,
    ):
        """Hand, or an attachment that replaces or augments the hand."""
        if not rng.boolean(0.6):
            generate_hand(model, rng, side, center_x, wrist_y, 0, palette)
            return

        if loadout == "tools":
            use_weapon = False
        elif loadout == "weapons":
            use_weapon = True
        else:
            use_weapon = rng.boolean(0.5)

        replace_hand = rng.boolean(0.5)
        if replace_hand:
            # Attachment takes the place of the hand, pointing forward
            mount = (center_x, wrist_y - 2, 0)
        else:
            generate_hand(model, rng, side, center_x, wrist_y, 0, palette)
            mount = (center_x, elbow_y - 2, arm_front)

        if use_weapon:
            weapon_type = rng.choice(WEAPON_TYPES)
            generate_weapon(model, rng, weapon_type, *mount, palette)
        else:
            tool_type = rng.choice(TOOL_TYPES)
            generate_tool(model, tool_type, *mount, palette)

    def _torso_details(
        self,
        model: VoxelModel,
        rng: SeededRNG,
        palette: Palette,
        half_width: int,
        torso_y: int,
        torso_height: int,
        front_z: int,
    ):
        """Emblem, symbol or stripes on the chest."""
        detail = rng.choice(("emblem", "symbol", "stripes", "none"))
        chest = Surface("z", front_z, 0, torso_y + torso_height // 2)
        size = max(1, min(half_width - 1, torso_height // 2 - 1))

        if detail == "emblem":
            emblem = rng.choice(EMBLEM_TYPES)
            self.decorate(add_emblem, model, chest, emblem, size, palette.accent, palette.detail)
        elif detail == "symbol":
            symbol = rng.choice(SYMBOL_TYPES)
            self.decorate(add_symbol, model, chest, symbol, size, palette.accent)
        elif detail == "stripes":
            stripe = Surface("z", front_z, -half_width, torso_y + 1)
            self.decorate(add_stripe, model, stripe, half_width * 2, palette.accent)

    def _leg_markings(
        self,
        model: VoxelModel,
        rng: SeededRNG,
        palette: Palette,
        leg_spacing: int,
        leg_width: int,
        leg_length: int,
    ):
        """Hazard stripes on the outer faces of both shins."""
        if not rng.boolean(0.3):
            return
        outer_left = -(leg_spacing + leg_width)
        outer_right = leg_spacing + leg_width - 1
        z0 = -(leg_width // 2)
        for outer_x in (outer_left, outer_right):
            surface = Surface("x", outer_x, z0, 1)
            self.decorate(
                add_warning_stripes, model, surface,
                leg_width, max(1, leg_length // 2),
                palette.primary, palette.dark, 1
            )

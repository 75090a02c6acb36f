"""
Generator Base Class

Shared pipeline for all category generators:
1. Create the stream from the seed (or a fresh time-derived seed)
2. Draw the palette
3. Select an archetype from the declarative table (weighted draw)
4. Run the archetype's construction method against one VoxelModel
5. Draw a display name and wrap everything in a GeneratedObject

Subclasses declare ``category``, ``ARCHETYPES`` and name tables and
implement one ``build_<archetype>`` method per table entry.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple, Union

from ..config import GenerationConfig, DEFAULT_CONFIG
from ..model import VoxelModel, Voxel
from ..palettes import Palette, get_palette, get_palette_by_name
from ..rng import SeededRNG, make_rng

logger = logging.getLogger(__name__)


class Archetype(NamedTuple):
    """One body plan: table name, selection weight, builder method name."""

    name: str
    weight: float
    builder: str


@dataclass
class GeneratedObject:
    """
    A finished model plus its metadata.

    Attributes:
        id: Unique identifier
        name: Display name
        category: "robot", "spaceship", "animal" or "monster"
        model: The generated voxels (read-only by convention)
        created_at: Creation time in epoch milliseconds
        seed: Seed that reproduces the model
        archetype: Body plan that was built
        palette: Palette used for the run
    """

    id: str
    name: str
    category: str
    model: VoxelModel
    created_at: int
    seed: int
    archetype: str = ""
    palette: Optional[Palette] = field(default=None, repr=False)

    @property
    def voxels(self) -> List[Voxel]:
        return self.model.voxels()

    @property
    def voxel_count(self) -> int:
        return len(self.model)

    def to_dict(self) -> dict:
        """External record: {id, name, category, voxels, createdAt, seed}."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "voxels": [voxel.to_dict() for voxel in self.model],
            "createdAt": self.created_at,
            "seed": self.seed,
        }


class BaseGenerator:
    """
    Base class for category generators.

    Example:
        generator = RobotGenerator()
        robot = generator.generate(seed=12345)
        robot.voxel_count
    """

    category: str = ""
    ARCHETYPES: Tuple[Archetype, ...] = ()
    NAME_PREFIXES: Tuple[str, ...] = ("Object",)
    NAME_SUFFIXES: Tuple[str, ...] = ("",)

    def __init__(self, config: Optional[GenerationConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def generate(self, seed: Optional[Union[int, str]] = None) -> GeneratedObject:
        """
        Generate one model.

        Args:
            seed: Integer or text seed; None derives a fresh seed from the clock

        Returns:
            GeneratedObject carrying the model and the seed that reproduces it
        """
        rng, seed_value = make_rng(seed)
        model = VoxelModel()

        palette = self.select_palette(rng)
        archetype = self.build(model, rng, palette)
        name = self.make_name(rng)

        logger.info(
            "Generated %s %r (archetype=%s, seed=%d, voxels=%d)",
            self.category, name, archetype, seed_value, len(model)
        )

        return GeneratedObject(
            id=f"{self.category}-{uuid.uuid4().hex}",
            name=name,
            category=self.category,
            model=model,
            created_at=int(time.time() * 1000),
            seed=seed_value,
            archetype=archetype,
            palette=palette,
        )

    def select_palette(self, rng: SeededRNG) -> Palette:
        """Draw the run's palette; a configured palette replaces the draw's result."""
        palette = get_palette(self.category, rng)
        if self.config.palette:
            palette = get_palette_by_name(self.config.palette)
        return palette

    def select_archetype(self, rng: SeededRNG, table: Optional[Sequence[Archetype]] = None) -> Archetype:
        """Weighted draw from an archetype table (the class table by default)."""
        table = self.ARCHETYPES if table is None else table
        archetype = rng.weighted_choice([(entry, entry.weight) for entry in table])
        logger.debug("%s archetype: %s", self.category, archetype.name)
        return archetype

    def build(self, model: VoxelModel, rng: SeededRNG, palette: Palette) -> str:
        """
        Select and run an archetype.

        Returns:
            Name of the archetype that was built
        """
        archetype = self.select_archetype(rng)
        result = self._builder(archetype)(model, rng, palette)
        self.finish(model, rng, palette, result)
        return archetype.name

    def build_archetype(
        self,
        name: str,
        model: VoxelModel,
        rng: SeededRNG,
        palette: Palette
    ):
        """
        Run one archetype directly, skipping the selection draw.

        Raises:
            ValueError: If the generator has no archetype with that name
        """
        for archetype in self.archetypes():
            if archetype.name == name:
                result = self._builder(archetype)(model, rng, palette)
                self.finish(model, rng, palette, result)
                return
        raise ValueError(f"Unknown {self.category} archetype: {name}")

    def finish(self, model: VoxelModel, rng: SeededRNG, palette: Palette, result):
        """Pass run after every archetype; receives the builder's return value."""
        return None

    def archetypes(self) -> Tuple[Archetype, ...]:
        """All archetypes this generator can build."""
        return self.ARCHETYPES

    def make_name(self, rng: SeededRNG) -> str:
        prefix = rng.choice(self.NAME_PREFIXES)
        suffix = rng.choice(self.NAME_SUFFIXES)
        number = rng.range(1, 999)
        parts = [prefix, suffix, str(number)] if suffix else [prefix, str(number)]
        return " ".join(parts)

    def decorate(self, func: Callable[..., int], *args, **kwargs) -> int:
        """
        Apply a surface decoration unless decoration is disabled.

        Callers make their stream draws before calling this, so the
        seed-to-geometry mapping does not depend on the setting.
        """
        if not self.config.decorate:
            return 0
        return func(*args, **kwargs)

    def _builder(self, archetype: Archetype) -> Callable[[VoxelModel, SeededRNG, Palette], None]:
        return getattr(self, archetype.builder)

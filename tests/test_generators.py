"""
Unit tests for the category generators.
"""

import sys
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge import generate, get_generator, GenerationConfig
from voxel_forge.generators import GENERATORS
from voxel_forge.generators.animal import RECOGNIZABLE, WEIRD
from voxel_forge.model import VoxelModel
from voxel_forge.palettes import get_palette, palettes_for
from voxel_forge.rng import SeededRNG

CATEGORIES = ("robot", "spaceship", "animal", "monster")


def snapshot(obj):
    return [(v.x, v.y, v.z, v.color) for v in obj.model]


class TestDeterminism(unittest.TestCase):
    """Same seed, same model; different seeds, different models."""

    def test_same_seed_identical(self):
        for category in CATEGORIES:
            a = generate(category, 12345)
            b = generate(category, 12345)
            assert snapshot(a) == snapshot(b), category
            assert a.name == b.name
            assert a.seed == 12345

    def test_different_seeds_differ(self):
        for category in CATEGORIES:
            a = generate(category, 12345)
            b = generate(category, 54321)
            assert snapshot(a) != snapshot(b), category

    def test_robot_reference_seeds(self):
        assert snapshot(generate("robot", 12345)) == snapshot(generate("robot", 12345))
        assert snapshot(generate("robot", 12345)) != snapshot(generate("robot", 54321))

    def test_text_seed(self):
        a = generate("spaceship", "my ship")
        b = generate("spaceship", "my ship")
        assert snapshot(a) == snapshot(b)
        assert a.seed == b.seed

    def test_fresh_seed_reproduces(self):
        first = generate("monster")
        again = generate("monster", first.seed)
        assert snapshot(first) == snapshot(again)

    def test_ids_unique(self):
        assert generate("robot", 1).id != generate("robot", 1).id


class TestGeneratedModels(unittest.TestCase):
    """Structural properties over many seeds."""

    def test_unique_coordinates_and_non_empty(self):
        for category in CATEGORIES:
            for seed in range(20):
                obj = generate(category, seed)
                coords = obj.model.coordinates()
                assert len(coords) > 0, (category, seed)
                assert len(coords) == len(set(coords)), (category, seed)

    def test_colors_come_from_hex(self):
        for category in CATEGORIES:
            obj = generate(category, 7)
            for color in obj.model.colors():
                assert color.startswith("#") and len(color) == 7

    def test_record_shape(self):
        obj = generate("animal", 99)
        record = obj.to_dict()
        assert set(record) == {"id", "name", "category", "voxels", "createdAt", "seed"}
        assert record["category"] == "animal"
        assert len(record["voxels"]) == obj.voxel_count
        assert set(record["voxels"][0]) == {"x", "y", "z", "color"}
        assert isinstance(record["createdAt"], int)

    def test_archetype_recorded(self):
        for category, generator_cls in GENERATORS.items():
            obj = generate(category, 5)
            names = {a.name for a in generator_cls().archetypes()}
            assert obj.archetype in names

    def test_palette_from_category(self):
        obj = generate("monster", 31)
        assert obj.palette in palettes_for("monster")


class TestArchetypes(unittest.TestCase):
    """Every archetype builds in isolation."""

    def test_every_archetype_builds(self):
        for category in CATEGORIES:
            generator = get_generator(category)
            for archetype in generator.archetypes():
                for seed in (1, 2, 3):
                    model = VoxelModel()
                    rng = SeededRNG(seed)
                    palette = get_palette(category, rng)
                    generator.build_archetype(archetype.name, model, rng, palette)
                    coords = model.coordinates()
                    assert len(coords) > 10, (category, archetype.name)
                    assert len(coords) == len(set(coords))

    def test_unknown_archetype(self):
        generator = get_generator("robot")
        with self.assertRaises(ValueError):
            generator.build_archetype("toaster", VoxelModel(), SeededRNG(1), get_palette("robot", SeededRNG(1)))

    def test_spaceship_has_thirteen_archetypes(self):
        assert len(get_generator("spaceship").archetypes()) == 13

    def test_animal_families(self):
        names = {a.name for a in get_generator("animal").archetypes()}
        assert {a.name for a in RECOGNIZABLE} <= names
        assert {a.name for a in WEIRD} <= names

    def test_weird_probability_extremes(self):
        """With the gate pinned, only the override roll can flip the family."""
        weird_names = {a.name for a in WEIRD}
        never = GenerationConfig(weird_probability=0.0)
        always = GenerationConfig(weird_probability=1.0)
        never_weird = sum(generate("animal", s, never).archetype in weird_names for s in range(60))
        always_weird = sum(generate("animal", s, always).archetype in weird_names for s in range(60))
        assert never_weird < 30
        assert always_weird > 30


class TestConfigEffects(unittest.TestCase):
    """Generation settings."""

    def test_decorate_off_keeps_geometry(self):
        plain = GenerationConfig(decorate=False)
        for category in CATEGORIES:
            for seed in (3, 12345):
                decorated = generate(category, seed)
                bare = generate(category, seed, plain)
                assert decorated.model.coordinates() == bare.model.coordinates()
                assert decorated.name == bare.name

    def test_palette_override(self):
        config = GenerationConfig(palette="Neon Punk")
        obj = generate("spaceship", 10, config)
        assert obj.palette.name == "neon punk"

    def test_palette_override_keeps_geometry(self):
        config = GenerationConfig(palette="swamp")
        a = generate("robot", 10)
        b = generate("robot", 10, config)
        assert a.model.coordinates() == b.model.coordinates()

    def test_unknown_palette(self):
        with self.assertRaises(KeyError):
            generate("robot", 1, GenerationConfig(palette="plaid"))

    def test_unknown_category_falls_back(self):
        """Unknown tags build with the default archetypes and palette set."""
        a = generate("dragon", 1)
        b = generate("dragon", 1)
        assert a.voxel_count > 0
        assert snapshot(a) == snapshot(b)
        assert a.category == "dragon"
        assert a.id.startswith("dragon-")
        assert a.palette in palettes_for("dragon")
        assert a.to_dict()["category"] == "dragon"

    def test_unknown_category_uses_default_archetypes(self):
        generator = get_generator("dragon")
        assert isinstance(generator, GENERATORS["robot"])
        assert generator.category == "dragon"
        # The class tag is untouched
        assert GENERATORS["robot"].category == "robot"
        assert generator.archetypes() == GENERATORS["robot"].ARCHETYPES


if __name__ == "__main__":
    unittest.main()

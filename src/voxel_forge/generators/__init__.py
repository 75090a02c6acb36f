"""Category generators and the top-level ``generate`` entry point."""

import logging
from typing import Dict, Optional, Type, Union

from ..config import GenerationConfig
from .animal import AnimalGenerator
from .base import Archetype, BaseGenerator, GeneratedObject
from .monster import MonsterGenerator
from .robot import RobotGenerator
from .spaceship import SpaceshipGenerator

logger = logging.getLogger(__name__)

GENERATORS: Dict[str, Type[BaseGenerator]] = {
    "robot": RobotGenerator,
    "spaceship": SpaceshipGenerator,
    "animal": AnimalGenerator,
    "monster": MonsterGenerator,
}

# Archetype set used for categories outside the table
DEFAULT_GENERATOR: Type[BaseGenerator] = RobotGenerator


def get_generator(category: str, config: Optional[GenerationConfig] = None) -> BaseGenerator:
    """
    Instantiate the generator for a category.

    An unrecognized category builds with the default archetype set and
    keeps the caller's tag, so its palette comes from the default set.
    """
    generator_cls = GENERATORS.get(category)
    if generator_cls is None:
        logger.warning("Unknown category %r, using %s archetypes", category, DEFAULT_GENERATOR.category)
        generator = DEFAULT_GENERATOR(config)
        generator.category = category
        return generator
    return generator_cls(config)


def generate(
    category: str,
    seed: Optional[Union[int, str]] = None,
    config: Optional[GenerationConfig] = None
) -> GeneratedObject:
    """
    Generate one model.

    Args:
        category: "robot", "spaceship", "animal" or "monster"
        seed: Integer or text seed; None derives a fresh seed from the clock
        config: Optional generation settings

    Returns:
        GeneratedObject whose ``seed`` reproduces the model
    """
    return get_generator(category, config).generate(seed)


__all__ = [
    "GENERATORS",
    "DEFAULT_GENERATOR",
    "Archetype",
    "BaseGenerator",
    "GeneratedObject",
    "RobotGenerator",
    "SpaceshipGenerator",
    "AnimalGenerator",
    "MonsterGenerator",
    "get_generator",
    "generate",
]

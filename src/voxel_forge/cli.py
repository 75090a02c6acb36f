"""
Command-Line Interface for Voxel Forge

Usage:
    voxforge robot --seed 12345
    voxforge spaceship --seed "my ship" --json
    voxforge monster --count 5 --stats
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Union

from .analysis import summarize
from .config import GenerationConfig
from .generators import GENERATORS, generate
from .stats import GenerationStats


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="voxforge",
        description="Voxel Forge - Seeded procedural voxel models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voxforge robot --seed 12345
      Summarize the robot for seed 12345

  voxforge spaceship --seed "my ship" --json
      Print the full record (every voxel) for a text seed

  voxforge animal --count 10 --stats
      Generate ten animals from fresh seeds and print creation statistics

Categories:
  robot      - Bipedal robots with tools and weapons
  spaceship  - Fighters, freighters, saucers and capital ships
  animal     - Recognizable and weird creatures
  monster    - Mutated monsters with eyes, spikes and tentacles
        """
    )

    parser.add_argument(
        "category",
        choices=sorted(GENERATORS),
        help="Kind of model to generate"
    )

    parser.add_argument(
        "-s", "--seed",
        help="Integer or text seed (default: derived from the clock)"
    )

    parser.add_argument(
        "-n", "--count",
        type=int,
        default=1,
        help="Number of models to generate (default: 1); seeds after the first are fresh"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full record including every voxel"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print creation statistics after generating"
    )

    parser.add_argument(
        "--no-decorate",
        action="store_true",
        help="Skip surface decoration (emblems, symbols, stripes)"
    )

    parser.add_argument(
        "--palette",
        help="Force a palette by name (e.g. 'Neon Punk')"
    )

    parser.add_argument(
        "--weird-probability",
        type=float,
        default=0.4,
        help="Chance of a weird animal body plan (default: 0.4)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    return parser


def parse_seed(value: Optional[str]) -> Optional[Union[int, str]]:
    """Integer-looking seeds are used as integers; anything else is hashed as text."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return value


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.count < 1:
            raise ValueError("--count must be at least 1")

        config = GenerationConfig(
            decorate=not args.no_decorate,
            palette=args.palette,
            weird_probability=args.weird_probability,
        )
        stats = GenerationStats()
        seed = parse_seed(args.seed)

        for i in range(args.count):
            obj = generate(args.category, seed if i == 0 else None, config)
            stats.track(obj)

            if args.json:
                print(json.dumps(obj.to_dict()))
            else:
                summary = {
                    "id": obj.id,
                    "name": obj.name,
                    "category": obj.category,
                    "archetype": obj.archetype,
                    "palette": obj.palette.name if obj.palette else None,
                    "seed": obj.seed,
                }
                summary.update(summarize(obj.model))
                print(json.dumps(summary, indent=2))

        if args.stats:
            print(json.dumps(stats.to_dict(), indent=2))

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

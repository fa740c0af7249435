"""
CLI Interface

Command-line interface for building and inspecting plants.
Supports the default plant, named presets, and custom attribute sets.
"""

import sys
import logging
import argparse
from typing import List, Optional

from pydantic import ValidationError

from plantcreator.domain.models import InvalidPlantError, Plant
from plantcreator.infrastructure.config import get_config
from plantcreator.infrastructure.plant_presets import PlantPresetCatalog, PlantPresetLoader, PresetError
from plantcreator.infrastructure.schemas import PlantSpec

logger = logging.getLogger(__name__)


def print_header(title: str) -> None:
    """Print formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_section(title: str) -> None:
    """Print formatted section header."""
    print(f"\n--- {title} ---")


def configure_logging() -> None:
    config = get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def list_presets(catalog: PlantPresetCatalog) -> None:
    """Print preset names and descriptions."""
    print_header("PLANT PRESETS")
    for name in catalog.names():
        spec = catalog.get_spec(name)
        print(f"  {name}: {spec.description}" if spec.description else f"  {name}")


def show_plant(title: str, plant: Plant) -> None:
    """Print a plant under a section header."""
    print_section(title)
    print(plant)


def build_custom_plant(args: argparse.Namespace) -> Plant:
    """Build a plant from --min-height/--max-height and the anatomy flags."""
    spec = PlantSpec(
        minimum_height=args.min_height,
        maximum_height=args.max_height,
        has_leaves=args.leaves,
        has_petals=args.petals,
        has_stem=args.stem,
        has_bush=args.bush,
    )
    return spec.to_plant()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plant-creator",
        description="Build and inspect validated plants"
    )

    # Sources, one at a time; --min-height starts a custom plant
    sources = parser.add_mutually_exclusive_group()
    sources.add_argument(
        "--default", "-d",
        action="store_true",
        help="Show the default plant (a tree)"
    )
    sources.add_argument(
        "--preset", "-p",
        type=str,
        help="Show a named preset"
    )
    sources.add_argument(
        "--list-presets", "-l",
        action="store_true",
        help="List available presets"
    )
    sources.add_argument("--min-height", type=str, help="Minimum height in meters")

    parser.add_argument(
        "--presets-file",
        type=str,
        help="Presets YAML file (overrides PLANT_PRESETS_PATH)"
    )

    # Custom plant
    parser.add_argument("--max-height", type=str, help="Maximum height in meters")
    parser.add_argument("--leaves", action="store_true", help="Plant has leaves")
    parser.add_argument("--petals", action="store_true", help="Plant has petals")
    parser.add_argument("--stem", action="store_true", help="Plant has a stem")
    parser.add_argument("--bush", action="store_true", help="Plant has a bush at the top")

    parser.add_argument(
        "--compare", "-c",
        type=str,
        metavar="PRESET",
        help="Report whether the plant equals this preset"
    )
    return parser


def check_usage(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject flag combinations argparse groups cannot express."""
    if (args.min_height is None) != (args.max_height is None):
        parser.error("--min-height and --max-height must be given together")
    if args.min_height is None and (args.leaves or args.petals or args.stem or args.bush):
        parser.error("--leaves/--petals/--stem/--bush require --min-height and --max-height")
    if args.list_presets and args.compare:
        parser.error("--compare cannot be used with --list-presets")


def run(args: argparse.Namespace) -> None:
    loader = PlantPresetLoader(args.presets_file)

    if args.list_presets:
        list_presets(loader.load())
        return

    if args.min_height is not None:
        title = "Custom Plant"
        plant = build_custom_plant(args)
    elif args.default:
        title = "Default Plant"
        plant = Plant.default()
    else:
        name = args.preset or get_config().default_preset
        title = f"Preset: {name}"
        plant = loader.load().build(name)

    show_plant(title, plant)

    if args.compare:
        other = loader.load().build(args.compare)
        verdict = "equal to" if plant == other else "different from"
        print(f"\nThis plant is {verdict} preset '{args.compare}'")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    check_usage(parser, args)
    logger.debug("Arguments: %s", vars(args))

    try:
        run(args)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2
    except (InvalidPlantError, PresetError, ValidationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

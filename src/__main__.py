"""Point d'entrée du module src. Permet python -m src."""

import argparse
import asyncio
import json
import sys

from src.etl.extractors.flixpatrol import FlixPatrolExtractor, FlixPatrolFetchError
from src.etl.types import (
    FLIXPATROL_LOCATIONS,
    FLIXPATROL_PLATFORMS,
    FLIXPATROL_TYPES,
    FlixPatrolType,
    Top10Result,
    is_location,
    is_platform,
)
from src.etl.utils import setup_logger
from src.settings import settings


# =============================================================================
# ARGUMENT TYPES
# =============================================================================


def _location(value: str) -> str:
    """Argparse type for a FlixPatrol location slug."""
    if not is_location(value):
        raise argparse.ArgumentTypeError(f"unknown location: {value}")
    return value


def _fallback(value: str) -> str | bool:
    """Argparse type for --fallback; 'none' or '' disables it."""
    if value in ("", "none"):
        return False
    return _location(value)


def _platform(value: str) -> str:
    """Argparse type for a FlixPatrol platform slug."""
    if not is_platform(value):
        raise argparse.ArgumentTypeError(f"unknown platform: {value}")
    return value


# =============================================================================
# COMMANDS
# =============================================================================


async def fetch_top10(
    content_type: FlixPatrolType,
    platform: str,
    location: str,
    fallback: str | bool,
) -> Top10Result:
    """Resolve one top 10 to TMDB ids."""
    async with FlixPatrolExtractor() as extractor:
        tmdb_ids = await extractor.get_top10(content_type, platform, location, fallback)

    return Top10Result(
        type=content_type,
        platform=platform,
        location=location,
        fallback=fallback or None,
        tmdb_ids=tmdb_ids,
        count=len(tmdb_ids),
    )


def run_top10(args: argparse.Namespace) -> None:
    """Lance la résolution d'un top 10 et affiche le JSON."""
    result = asyncio.run(
        fetch_top10(args.type, args.platform, args.location, args.fallback)
    )
    print(json.dumps(result, indent=2))


def list_values(values: frozenset[str]) -> None:
    """Affiche une énumération triée."""
    for value in sorted(values):
        print(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FlixPatrol top 10 -> TMDB ids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemples:
  python -m src top10 --type Movies --platform netflix --location world
  python -m src top10 --type "TV Shows" --platform hbo --location france --fallback world
  python -m src locations                  # Lister les pays
  python -m src platforms                  # Lister les plateformes
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Commande")

    # Top 10
    top10_parser = subparsers.add_parser("top10", help="Top 10 en ids TMDB")
    top10_parser.add_argument("--type", required=True, choices=FLIXPATROL_TYPES)
    top10_parser.add_argument("--platform", required=True, type=_platform)
    top10_parser.add_argument("--location", default="world", type=_location)
    top10_parser.add_argument(
        "--fallback",
        type=_fallback,
        default=settings.flixpatrol.fallback,
        help="Pays de repli si le top 10 est vide ('none' pour désactiver)",
    )

    # Listes
    subparsers.add_parser("locations", help="Lister les pays")
    subparsers.add_parser("platforms", help="Lister les plateformes")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI principal."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logger = setup_logger("src")

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "top10":
            run_top10(args)
        elif args.command == "locations":
            list_values(FLIXPATROL_LOCATIONS)
        elif args.command == "platforms":
            list_values(FLIXPATROL_PLATFORMS)

    except KeyboardInterrupt:
        print("\n⚠️  Interrompu", file=sys.stderr)
        sys.exit(130)
    except FlixPatrolFetchError as e:
        logger.error(f"{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

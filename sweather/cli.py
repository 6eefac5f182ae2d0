"""Command-line interface for Sweather.

Usage:
    python -m sweather.cli list
    python -m sweather.cli recommend "Oslo, Norway"
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from sweather.gateway import get_gemini_gateway
from sweather.storage import WardrobeRepository, get_wardrobe_repository
from sweather.ui.state_manager import ItemDraft
from sweather.ui.utils import insulation_badge, recommended_items, source_links, verdict_text
from sweather.utils import encode_file, get_config, get_logger, resize_data_uri, set_log_level
from sweather.utils.config import AppConfig
from sweather.utils.exceptions import AppException

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="sweather",
        description="Sweater-weather assistant: manage your wardrobe and get outfit advice",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the stored wardrobe
  python -m sweather.cli list

  # Add an item by hand
  python -m sweather.cli add --name "Wool Scarf" --insulation 6 --tags "wool, red"

  # Ask for advice with debug logging
  python -m sweather.cli --log-level DEBUG recommend "Edinburgh"
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to configuration file (default: auto-detect)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Override log level'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('list', help='List wardrobe items')

    add_parser = subparsers.add_parser('add', help='Add a wardrobe item')
    add_parser.add_argument('--name', type=str, required=True, help='Item name')
    add_parser.add_argument('--insulation', type=int, default=5, help='Warmth rating (default: 5)')
    add_parser.add_argument('--tags', type=str, default='', help='Comma-separated tags')
    add_parser.add_argument('--type', type=str, default='Custom', help='Item type (default: Custom)')
    add_parser.add_argument('--image', type=Path, default=None, help='Photo of the item')

    remove_parser = subparsers.add_parser('remove', help='Remove a wardrobe item')
    remove_parser.add_argument('item_id', type=str, help='Id of the item to remove')

    classify_parser = subparsers.add_parser('classify', help='Classify a clothing photo')
    classify_parser.add_argument('image', type=Path, help='Photo to classify')

    weather_parser = subparsers.add_parser('weather', help='Look up current weather')
    weather_parser.add_argument('location', type=str, help='City name or "lat, lon"')

    recommend_parser = subparsers.add_parser('recommend', help='Get an outfit recommendation')
    recommend_parser.add_argument('location', type=str, help='City name or "lat, lon"')

    return parser


def _apply_log_level(level: str) -> None:
    for name in list(logging.root.manager.loggerDict):
        if name == "sweather" or name.startswith("sweather."):
            set_log_level(logging.getLogger(name), level)


def _load_image(path: Path, config: AppConfig) -> str:
    return resize_data_uri(
        encode_file(path),
        max_width=config.images.max_width,
        quality=config.images.jpeg_quality,
    )


# ============================================
# Commands
# ============================================


def _is_stored(repository: WardrobeRepository, item_id: str) -> bool:
    """Check the store itself; failed writes leave the previous list in place."""
    return any(item.id == item_id for item in repository.load())


def cmd_list(repository: WardrobeRepository) -> int:
    items = repository.load()
    if not items:
        print("Your wardrobe is empty")
        return 0

    print(f"{len(items)} item(s):")
    for item in items:
        tags = ", ".join(item.tags)
        print(f"  [{item.id}] {item.name} ({item.type}) {insulation_badge(item.insulation)}  {tags}")
    return 0


def cmd_add(args: argparse.Namespace, repository: WardrobeRepository, config: AppConfig) -> int:
    draft = ItemDraft(
        image_data=_load_image(args.image, config) if args.image else None,
        name=args.name,
        type=args.type,
        insulation=args.insulation,
        tags_text=args.tags,
    )
    if not draft.name.strip():
        print("✗ Name is required")
        return 1

    item = draft.to_item()
    repository.add(item)
    if not _is_stored(repository, item.id):
        return 1

    print(f"✓ Added {item.name} ({item.id})")
    return 0


def cmd_remove(args: argparse.Namespace, repository: WardrobeRepository) -> int:
    if not _is_stored(repository, args.item_id):
        print(f"✗ No item with id {args.item_id}")
        return 1

    repository.remove(args.item_id)
    if _is_stored(repository, args.item_id):
        return 1

    print(f"✓ Removed {args.item_id}")
    return 0


def cmd_classify(args: argparse.Namespace, config: AppConfig) -> int:
    gateway = get_gemini_gateway(config.gemini)
    result = gateway.classify_image(_load_image(args.image, config))
    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


def cmd_weather(args: argparse.Namespace, config: AppConfig) -> int:
    gateway = get_gemini_gateway(config.gemini)
    report = gateway.fetch_weather_text(args.location)

    print(report.text)
    for label, uri in source_links(report.sources):
        print(f"  {label}: {uri}")
    return 0


def cmd_recommend(args: argparse.Namespace, repository: WardrobeRepository, config: AppConfig) -> int:
    gateway = get_gemini_gateway(config.gemini)
    wardrobe = repository.load()
    recommendation = gateway.recommend(args.location, wardrobe)
    weather = recommendation.weather
    headline, caption = verdict_text(weather)

    print("\n" + "=" * 60)
    print(f"📍 {weather.location}")
    print(f"{weather.temperature} | {weather.summary}")
    print(f"Sweater weather? {headline} {caption}")
    print("=" * 60)

    if recommendation.reasoning:
        print(f"\n{recommendation.reasoning}")

    items = recommended_items(wardrobe, recommendation)
    if items:
        print("\nSuggested Outfit:")
        for item in items:
            print(f"  - {item.name} ({insulation_badge(item.insulation)})")
    else:
        print("\nNo suitable items found in your wardrobe.")

    for label, uri in source_links(weather.sources):
        print(f"  {label}: {uri}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = build_parser().parse_args(argv)

    try:
        config = get_config(args.config)

        if args.log_level:
            _apply_log_level(args.log_level)

        repository = get_wardrobe_repository(
            config.storage,
            notify=lambda message: print(f"✗ {message}"),
        )

        if args.command == 'list':
            return cmd_list(repository)
        if args.command == 'add':
            return cmd_add(args, repository, config)
        if args.command == 'remove':
            return cmd_remove(args, repository)
        if args.command == 'classify':
            return cmd_classify(args, config)
        if args.command == 'weather':
            return cmd_weather(args, config)
        return cmd_recommend(args, repository, config)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n✗ Cancelled by user")
        return 1

    except AppException as e:
        logger.error(f"{args.command} failed: {e}", exc_info=True)
        print(f"\n✗ {args.command} failed: {e.message}")
        return 1

    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"\n✗ Invalid configuration ({e.error_count()} errors)")
        return 1


if __name__ == '__main__':
    sys.exit(main())

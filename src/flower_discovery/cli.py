"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from uuid import UUID

from flower_discovery import __version__
from flower_discovery.codec import read_flower_file, write_flower_file
from flower_discovery.collection import CollectionStore
from flower_discovery.config import Settings, get_settings
from flower_discovery.datasources.weather import OpenMeteoWeatherProvider
from flower_discovery.discovery import FlowerDiscovery
from flower_discovery.exceptions import FlowerDiscoveryError
from flower_discovery.flows.backup import auto_backup, restore_backup, sync_cloud_folder
from flower_discovery.providers import StaticLocationProvider
from flower_discovery.schemas import FlowerOwner, LocationSnapshot
from flower_discovery.selector import ContextualSelector
from flower_discovery.store import FileStore

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route library logging to stderr at ``level``."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="flower-discovery",
        description="Discover, collect, back up and gift botanical flowers",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    discover_parser = subparsers.add_parser("discover", help="Discover the next flower")
    discover_parser.add_argument("--seed", type=int, default=None, help="Seed the selector RNG")
    discover_parser.add_argument(
        "--no-weather",
        action="store_true",
        help="Skip the Open-Meteo weather lookup",
    )
    discover_parser.add_argument(
        "--hold",
        action="store_true",
        help="Keep the flower hidden until 'reveal' is run",
    )

    subparsers.add_parser("reveal", help="Reveal the pending flower")

    list_parser = subparsers.add_parser("list", help="List collected flowers, newest first")
    list_parser.add_argument("--favorites", action="store_true", help="Only favorites")
    list_parser.add_argument("--limit", type=int, default=None, help="Show at most N flowers")

    favorite_parser = subparsers.add_parser("favorite", help="Toggle a flower's favorite flag")
    favorite_parser.add_argument("flower_id", type=UUID, help="Flower id")

    subparsers.add_parser("stats", help="Show discoveries per continent")

    subparsers.add_parser("backup", help="Write a .bouquet backup now")

    restore_parser = subparsers.add_parser("restore", help="Merge a .bouquet backup")
    restore_parser.add_argument("path", type=Path, help="Backup file")

    send_parser = subparsers.add_parser("send", help="Export one flower as a .flower gift")
    send_parser.add_argument("flower_id", type=UUID, help="Flower id")
    send_parser.add_argument(
        "--out",
        type=Path,
        default=Path(),
        help="Directory to write the .flower file to (default: current directory)",
    )

    receive_parser = subparsers.add_parser("receive", help="Import a .flower gift")
    receive_parser.add_argument("path", type=Path, help="Flower file")

    sync_parser = subparsers.add_parser("sync", help="Sync with a shared cloud folder")
    sync_parser.add_argument(
        "--cloud-dir",
        type=Path,
        default=None,
        help="Shared folder (default: cloud_dir from settings)",
    )

    return parser


def _collection(settings: Settings) -> CollectionStore:
    return CollectionStore(FileStore(settings.data_dir))


def _location(settings: Settings) -> LocationSnapshot | None:
    if settings.latitude is None or settings.longitude is None:
        return None
    return LocationSnapshot(latitude=settings.latitude, longitude=settings.longitude)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data directory: {settings.data_dir}")
    print(f"Flowers collected: {len(_collection(settings))}")
    return 0


def cmd_discover(args: argparse.Namespace) -> int:
    """Handle the 'discover' command."""
    settings = get_settings()
    location = _location(settings)
    discovery = FlowerDiscovery(
        _collection(settings),
        selector=ContextualSelector(
            rng=random.Random(args.seed),
            contextual_chance=settings.contextual_chance,
        ),
        location_provider=StaticLocationProvider(location),
        weather_provider=None if args.no_weather else OpenMeteoWeatherProvider(),
        pending_store=FileStore(settings.data_dir) if args.hold else None,
    )
    flower = discovery.discover()
    if args.hold:
        print("A new flower is waiting. Run 'reveal' to see it.")
        return 0

    print(f"Discovered: {flower.name} ({flower.scientific_name})")
    if flower.rarity_level:
        print(f"Rarity: {flower.rarity_level}")
    if flower.generation_context:
        print(f"Context: {flower.generation_context}")
    print(f"Id: {flower.id}")
    return 0


def cmd_reveal(_args: argparse.Namespace) -> int:
    """Handle the 'reveal' command."""
    settings = get_settings()
    discovery = FlowerDiscovery(_collection(settings), pending_store=FileStore(settings.data_dir))
    flower = discovery.reveal_pending()
    if flower is None:
        print("No flower is waiting to be revealed.")
        return 0
    print(f"Revealed: {flower.name} ({flower.scientific_name})")
    print(f"Id: {flower.id}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Handle the 'list' command."""
    collection = _collection(get_settings())
    flowers = collection.favorites() if args.favorites else collection.snapshot()
    if args.limit is not None:
        flowers = flowers[: args.limit]

    if not flowers:
        print("No flowers yet.")
        return 0
    for f in flowers:
        star = "*" if f.is_favorite else " "
        print(f"{star} {f.id}  {f.effective_date:%Y-%m-%d}  {f.name}")
    return 0


def cmd_favorite(args: argparse.Namespace) -> int:
    """Handle the 'favorite' command."""
    collection = _collection(get_settings())
    try:
        flower = collection.toggle_favorite(args.flower_id)
    except KeyError:
        print(f"Error: no flower with id {args.flower_id}", file=sys.stderr)
        return 1
    state = "added to" if flower.is_favorite else "removed from"
    print(f"{flower.name} {state} favorites")
    return 0


def cmd_stats(_args: argparse.Namespace) -> int:
    """Handle the 'stats' command."""
    collection = _collection(get_settings())
    stats = collection.continent_stats()
    print(f"Total: {len(collection)}")
    for continent, count in sorted(stats.items(), key=lambda item: (-item[1], item[0])):
        print(f"  {continent}: {count}")
    return 0


def cmd_backup(_args: argparse.Namespace) -> int:
    """Handle the 'backup' command."""
    result = auto_backup(force=True)
    if result["skipped"]:
        print("Nothing to back up.")
    return 0


def cmd_restore(args: argparse.Namespace) -> int:
    """Handle the 'restore' command."""
    restore_backup(args.path)
    return 0


def cmd_send(args: argparse.Namespace) -> int:
    """Handle the 'send' command: export a gift and record the hand-off locally."""
    settings = get_settings()
    collection = _collection(settings)
    flower = collection.get(args.flower_id)
    if flower is None:
        print(f"Error: no flower with id {args.flower_id}", file=sys.stderr)
        return 1
    if not flower.is_giftable:
        print(f"Error: {flower.name} cannot be gifted", file=sys.stderr)
        return 1

    sender = FlowerOwner(name=settings.owner_name, device_id=settings.device_id)
    path, sent = write_flower_file(args.out, flower, sender)
    sent.complete_transfer()
    collection.add(sent)
    print(f"Wrote {path}")
    return 0


def cmd_receive(args: argparse.Namespace) -> int:
    """Handle the 'receive' command."""
    collection = _collection(get_settings())
    received = read_flower_file(args.path, accept=collection.add)
    print(f"Received {received.flower.name} from {received.sender.name}")
    return 0


def cmd_sync(args: argparse.Namespace) -> int:
    """Handle the 'sync' command."""
    sync_cloud_folder(cloud_dir=args.cloud_dir)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "discover": cmd_discover,
        "reveal": cmd_reveal,
        "list": cmd_list,
        "favorite": cmd_favorite,
        "stats": cmd_stats,
        "backup": cmd_backup,
        "restore": cmd_restore,
        "send": cmd_send,
        "receive": cmd_receive,
        "sync": cmd_sync,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except (FlowerDiscoveryError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

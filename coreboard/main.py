"""
Main entry point for generating core vocabulary boards.

Usage:
    python -m coreboard.main config.yaml --topic "at the park" --buttons 42
    python -m coreboard.main config.yaml --topic "breakfast" --output boards/breakfast.obf --visualize
"""

import argparse
import asyncio
import json
import logging
import re
import sys
from pathlib import Path

import yaml

from .errors import CoreBoardError
from .generation import CoreBoardService, EngineConfig


def load_config(config_path: str) -> EngineConfig:
    """Load engine configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return EngineConfig(**data)


def default_output_path(topic: str) -> Path:
    slug = re.sub(r'[^a-z0-9]+', '_', topic.lower()).strip('_') or "board"
    return Path("boards") / f"{slug}.obf"


def main():
    parser = argparse.ArgumentParser(
        description="Generate a core vocabulary AAC board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  model: gpt-4o-mini
  temperature: 0
  language: en
  symbol_set: arasaac
  dedup: within_category
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used when omitted)"
    )
    parser.add_argument(
        "--topic", "-t",
        required=True,
        help="Topic of the board"
    )
    parser.add_argument(
        "--buttons", "-b",
        type=int,
        default=42,
        help="Total number of buttons (default: 42)"
    )
    parser.add_argument(
        "--symbol-set",
        choices=["arasaac", "global-symbols"],
        help="Symbol set used for pictograms (default: from config)"
    )
    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Skip pictogram lookup"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the board JSON (default: boards/<topic>.obf)"
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Print a colored table of the board layout"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        config = load_config(args.config) if args.config else EngineConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    output_path = Path(args.output) if args.output else default_output_path(args.topic)

    if args.verbose:
        print(f"Config: {args.config or 'defaults'}")
        print(f"Output: {output_path}")
        print()

    service = CoreBoardService.create(config=config)

    try:
        board = asyncio.run(service.generate_core_board(
            args.topic,
            args.buttons,
            symbol_set=args.symbol_set,
            resolve_images=False if args.no_images else None,
        ))
    except CoreBoardError as e:
        print(f"Error generating board: {e}", file=sys.stderr)
        sys.exit(1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(board.to_obf(), f, indent=2)

    if args.visualize:
        from .utils.board_visualizer import visualize_board
        visualize_board(board)

    placed = sum(1 for row in board.grid.order for cell in row if cell)

    # Print summary
    print()
    print("=== Board Summary ===")
    print(f"Name: {board.name}")
    print(f"Grid: {board.grid.rows}x{board.grid.columns}")
    print(f"Buttons: {len(board.buttons)} ({placed} placed)")
    print(f"Images: {len(board.images)}")
    print(f"Saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

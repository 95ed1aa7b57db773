#!/usr/bin/env python3
"""
Grid path search debug tool

Runs one wavefront search on a bounded grid and prints the labeled board
with the shortest path highlighted.
"""

import argparse
import sys

from src.game.movement import path_to_directions
from src.pathfinding import GridSearch, OutOfBoundsError, RenderConfig
from src.util.logger import logger

log = logger.bind(component="cli")


def parse_cell(text: str):
    """Parse an "x,y" argument into a cell tuple."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")
    return (x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid path search debug tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --width 5 --height 5 --source 0,0 --destination 4,4
  python main.py --source 0,0 --destination 2,2 --obstacle 1,0 --obstacle 1,1
  python main.py --reachable-only --obstacle 1,0 --obstacle 0,1
        """,
    )
    parser.add_argument("--width", type=int, default=10, help="Board width")
    parser.add_argument("--height", type=int, default=10, help="Board height")
    parser.add_argument(
        "--source", type=parse_cell, default=(0, 0), help="Start cell as x,y"
    )
    parser.add_argument(
        "--destination", type=parse_cell, default=None, help="Target cell as x,y"
    )
    parser.add_argument(
        "--obstacle",
        type=parse_cell,
        action="append",
        default=[],
        help="Blocked cell as x,y (repeatable)",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Highlight the path without ANSI colours"
    )
    parser.add_argument(
        "--reachable-only",
        action="store_true",
        help="Only report whether the destination can be reached",
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    destination = args.destination or (args.width - 1, args.height - 1)

    search = GridSearch(
        args.width, args.height, render_config=RenderConfig(colorize=not args.no_color)
    )

    try:
        if args.reachable_only:
            reachable = search.is_reachable(args.source, destination, args.obstacle)
            print("reachable" if reachable else "unreachable")
            return 0 if reachable else 1
        result = search.trace(args.source, destination, args.obstacle)
    except OutOfBoundsError as e:
        parser.error(str(e))

    log.info(
        f"Labeled {result.cells_labeled} cells over {result.layers} layers "
        f"in {result.time_taken_ms:.2f}ms"
    )
    print(search.render(result.path or ()))

    if not result.reachable:
        print(f"No path from {args.source} to {destination}")
        return 1

    print(f"Path length: {result.path_length}")
    print("Moves: " + " ".join(d.name for d in path_to_directions(result.path)))
    return 0


if __name__ == "__main__":
    sys.exit(main())

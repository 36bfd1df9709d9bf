"""
Application Entry Point
=======================
Collects four points, runs the distance engine and prints the result.

Why is this file needed?
------------------------
It acts as the orchestration root. It:
1. Parses the command line and sets up logging.
2. Reads the points (from arguments or from the interactive prompt).
3. Passes them to the DistanceCalculator and reports the outcome.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from segmentdistance import __version__
from segmentdistance.config import LOG_LEVEL_CHOICES, get_log_level
from segmentdistance.console import format_distance, points_from_coordinates, read_points
from segmentdistance.logging_config import setup_logging
from segmentdistance.model.distance import DistanceCalculator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="segmentdistance",
        description="Minimal distance between two line segments in 3D space",
    )
    parser.add_argument(
        "--points",
        type=float,
        nargs=12,
        metavar="C",
        help="Coordinates x y z of p1, p2 (first segment) and p3, p4 (second segment)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=None,
        help="Logging level (default: $SEGMENTDISTANCE_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = get_log_level(args.log_level)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2
    setup_logging(level=level, log_file=args.log_file)

    if args.points is not None:
        try:
            p1, p2, p3, p4 = points_from_coordinates(args.points)
        except ValueError as e:
            print(f"Invalid coordinates: {e}", file=sys.stderr)
            return 2
    else:
        try:
            p1, p2, p3, p4 = read_points(4)
        except (EOFError, KeyboardInterrupt):
            print("\nInput ended before four points were entered.", file=sys.stderr)
            return 1

    result = DistanceCalculator(p1, p2, p3, p4).solve()
    logger.info(f"Segments classified as: {result.relation}")

    if not result.ok:
        logger.warning(f"Distance is undefined: {result.error}")
        print(f"Minimal distance is undefined: {result.error}", file=sys.stderr)
        return 1

    print(format_distance(result.unwrap()))
    return 0


if __name__ == "__main__":
    sys.exit(main())

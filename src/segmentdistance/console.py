"""
Console Input/Output
====================
Collects points from an interactive prompt and prints the result.

The model never sees malformed input: a line that does not hold three finite
numbers is rejected here and the user is asked again.
"""
from __future__ import annotations

import logging
import math
import re
import sys
from typing import Callable, Optional, Sequence, TextIO

from segmentdistance.model.geometry_primitives import Point

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Please enter numeric values."

_SEPARATORS = re.compile(r"[\s,;]+")


def parse_point(text: str) -> Point:
    """
    Parse "x y z" (whitespace, comma or semicolon separated) into a Point.

    Raises:
        ValueError: If the text does not hold exactly three finite numbers.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if len(tokens) != 3:
        raise ValueError(f"Expected 3 coordinates, got {len(tokens)}.")

    coords = [float(t) for t in tokens]
    if not all(math.isfinite(c) for c in coords):
        raise ValueError("Coordinates must be finite numbers.")
    return Point.from_array(coords)


def points_from_coordinates(values: Sequence[float]) -> list[Point]:
    """Group a flat sequence of 3*n coordinates into n points."""
    if len(values) % 3 != 0:
        raise ValueError(f"Coordinate count must be a multiple of 3, got {len(values)}.")
    if not all(math.isfinite(v) for v in values):
        raise ValueError("Coordinates must be finite numbers.")
    return [Point.from_array(values[i:i + 3]) for i in range(0, len(values), 3)]


def read_point(
    index: int,
    input_func: Optional[Callable[[str], str]] = None,
    err: Optional[TextIO] = None,
) -> Point:
    """
    Prompt for point number `index` until a valid line is entered.

    Raises:
        EOFError: If the input ends before a valid point was read.
    """
    input_func = input_func or input
    err = err or sys.stderr
    while True:
        line = input_func(f"Enter coordinates for point {index} (x y z): ")
        try:
            return parse_point(line)
        except ValueError as e:
            logger.debug(f"Rejected input {line!r} for point {index}: {e}")
            print(INVALID_INPUT_MESSAGE, file=err)


def read_points(
    count: int = 4,
    input_func: Optional[Callable[[str], str]] = None,
    err: Optional[TextIO] = None,
) -> list[Point]:
    return [read_point(i, input_func=input_func, err=err) for i in range(1, count + 1)]


def format_distance(distance: float) -> str:
    """Format the result line with six significant digits."""
    return f"Minimal distance: {distance:g}"

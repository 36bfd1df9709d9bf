"""Errors raised by the geometric model."""
from __future__ import annotations


class GeometryError(ValueError):
    """Base class for violations of a geometric contract."""


class NullVectorError(GeometryError):
    """Raised when a null vector is normalized or used as a plane normal."""


class DegenerateSegmentError(GeometryError):
    """
    Raised when a segment's endpoints coincide within tolerance.

    The distance to a segment that collapsed into a point is reported as an
    error rather than a number, so it cannot be mistaken for a measurement.
    """

    def __init__(self, segment: int) -> None:
        self.segment = segment
        super().__init__(f"Segment {segment} is degenerate: its endpoints coincide.")

"""Minimal distance between two line segments in 3D space."""
from segmentdistance.model.distance import (
    DistanceCalculator,
    DistanceResult,
    SegmentRelation,
    segment_distance,
)
from segmentdistance.model.exceptions import DegenerateSegmentError, GeometryError, NullVectorError
from segmentdistance.model.geometry_primitives import Plane, Point, Segment, Vector

__version__ = "0.1.0"

__all__ = [
    "DistanceCalculator",
    "DistanceResult",
    "SegmentRelation",
    "segment_distance",
    "DegenerateSegmentError",
    "GeometryError",
    "NullVectorError",
    "Plane",
    "Point",
    "Segment",
    "Vector",
]

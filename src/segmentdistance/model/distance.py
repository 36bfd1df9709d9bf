"""
Segment Distance Engine
=======================
Computes the minimal distance between two closed segments S1=(p1, p2) and
S2=(p3, p4) in 3D space.

The segments are first classified:
1. Common endpoint: the distance is zero.
2. Degenerate: one segment collapsed into a point, the distance is undefined.
3. Parallel: the direction vectors are collinear.
4. Skew (general case): the lines are not parallel. Both segments are
   projected onto the plane through p1 spanned by the two directions. If the
   projections cross, the common perpendicular of the two lines joins the
   segments and the distance between the parallel planes is the answer.

In cases 3 and 4 without crossing, the closest approach involves an
endpoint, so the answer is the smallest of the four endpoint-to-segment
distances.

Classes:
    SegmentRelation: The spatial relationship found by the classification.
    DistanceResult: Tagged result of a calculation.
    DistanceCalculator: The engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Optional

from segmentdistance.model.exceptions import DegenerateSegmentError
from segmentdistance.model.geometry_primitives import Plane, Point, Segment, Vector

logger = logging.getLogger(__name__)


class SegmentRelation(StrEnum):
    COMMON_ENDPOINT = "common endpoint"
    DEGENERATE = "degenerate segment"
    PARALLEL = "parallel"
    SKEW_CROSSING = "skew, crossing projections"
    SKEW_DISJOINT = "skew, disjoint projections"


@dataclass(frozen=True)
class DistanceResult:
    """
    Outcome of a distance calculation.

    Exactly one of `distance` and `error` is set.
    """
    relation: SegmentRelation
    distance: Optional[float] = None
    error: Optional[DegenerateSegmentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the distance or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.distance is not None
        return self.distance


def have_common_endpoint(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """True if segment (p1, p2) and segment (p3, p4) share an endpoint."""
    return p1 == p3 or p1 == p4 or p2 == p3 or p2 == p4


def min_endpoint_distance(p1: Point, p2: Point, p3: Point, p4: Point) -> float:
    """Smallest distance from an endpoint of one segment to the other segment."""
    return min(
        p1.distance_to_segment(p3, p4),
        p2.distance_to_segment(p3, p4),
        p3.distance_to_segment(p1, p2),
        p4.distance_to_segment(p1, p2),
    )


def segments_intersect_in_plane(p1: Point, p2: Point, p3: Point, p4: Point, direction: Vector) -> bool:
    """
    Check whether two coplanar segments (p1, p2) and (p3, p4) intersect.

    The segments intersect when, for each segment, the endpoints of the other
    one lie strictly on opposite sides of its line. Sides are compared through
    the sign of cross products projected on `direction`, the plane normal.
    An endpoint lying exactly on the other line counts as not intersecting.

    Args:
        p1, p2: Endpoints of the first segment.
        p3, p4: Endpoints of the second segment.
        direction: Normal of the plane containing both segments.

    Returns:
        False if the points are not all on the plane through p1.
    """
    plane = Plane.from_point_and_normal(p1, direction)
    if not all(plane.is_on(p) for p in (p1, p2, p3, p4)):
        return False

    if have_common_endpoint(p1, p2, p3, p4):
        return True

    v34 = Vector.between(p3, p4)
    v12 = Vector.between(p1, p2)
    v1 = v34.cross(Vector.between(p3, p1)).dot(direction)
    v2 = v34.cross(Vector.between(p3, p2)).dot(direction)
    v3 = v12.cross(Vector.between(p1, p3)).dot(direction)
    v4 = v12.cross(Vector.between(p1, p4)).dot(direction)

    return v1 * v2 < 0 and v3 * v4 < 0


class DistanceCalculator:
    """
    Calculates the minimal distance between segments (p1, p2) and (p3, p4).

    The inputs are never modified; every call recomputes from scratch.
    """

    def __init__(self, p1: Point, p2: Point, p3: Point, p4: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.p4 = p4

    @classmethod
    def from_segments(cls, first: Segment, second: Segment) -> DistanceCalculator:
        return cls(first.start, first.end, second.start, second.end)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(p1={self.p1}, p2={self.p2}, p3={self.p3}, p4={self.p4})"

    def calculate(self) -> float:
        """
        Minimal distance between the two segments.

        Raises:
            DegenerateSegmentError: If either segment has coinciding endpoints.
        """
        return self.solve().unwrap()

    def solve(self) -> DistanceResult:
        """Classify the segments and compute the distance without raising."""
        p1, p2, p3, p4 = self.p1, self.p2, self.p3, self.p4

        if have_common_endpoint(p1, p2, p3, p4):
            logger.debug("Segments share an endpoint.")
            return DistanceResult(SegmentRelation.COMMON_ENDPOINT, distance=0.0)

        v12 = Vector.between(p1, p2)
        v34 = Vector.between(p3, p4)

        if v12.is_null() or v34.is_null():
            error = DegenerateSegmentError(1 if v12.is_null() else 2)
            logger.debug(f"{error}")
            return DistanceResult(SegmentRelation.DEGENERATE, error=error)

        cross = v12.cross(v34)

        if cross.is_null():
            # Parallel lines always share a plane, the closest approach
            # involves an endpoint.
            distance = min_endpoint_distance(p1, p2, p3, p4)
            logger.debug(f"Parallel segments, distance {distance}.")
            return DistanceResult(SegmentRelation.PARALLEL, distance=distance)

        plane = Plane.from_point_and_normal(p1, cross)
        distance_between_planes = plane.distance_to_point(p3)

        p2_proj = plane.project_point(p2)
        p3_proj = plane.project_point(p3)
        p4_proj = plane.project_point(p4)

        if segments_intersect_in_plane(p1, p2_proj, p3_proj, p4_proj, cross):
            logger.debug(f"Skew segments with crossing projections, distance {distance_between_planes}.")
            return DistanceResult(SegmentRelation.SKEW_CROSSING, distance=distance_between_planes)

        distance = min_endpoint_distance(p1, p2, p3, p4)
        logger.debug(f"Skew segments with disjoint projections, distance {distance}.")
        return DistanceResult(SegmentRelation.SKEW_DISJOINT, distance=distance)


def segment_distance(p1: Point, p2: Point, p3: Point, p4: Point) -> float:
    """Shortcut for `DistanceCalculator(p1, p2, p3, p4).calculate()`."""
    return DistanceCalculator(p1, p2, p3, p4).calculate()

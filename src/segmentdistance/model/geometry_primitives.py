"""
Geometric Primitives for the segment distance engine.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

from segmentdistance.config import TOLERANCE
from segmentdistance.model.exceptions import NullVectorError

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float

    @classmethod
    def between(cls, start: Point, end: Point) -> Vector:
        """Displacement from `start` to `end`."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    @property
    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def is_null(self, tol: float = TOLERANCE) -> bool:
        """True if every component is within `tol` of zero."""
        return abs(self.x) < tol and abs(self.y) < tol and abs(self.z) < tol

    def normalize(self) -> Vector:
        """
        Unit vector in the direction of this vector.

        Raises:
            NullVectorError: If the vector is null within tolerance.
        """
        if self.is_null():
            raise NullVectorError(f"Cannot normalize null vector {self}.")
        return self / self.length

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True, eq=False)
class Point:
    """
    A geometric point in 3D space.

    Equality is tolerance based: two points are equal when every coordinate
    differs by less than TOLERANCE. This relation is not transitive, so
    points are not hashable.
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, coords: Sequence[float] | npt.NDArray[np.float64]) -> Point:
        if len(coords) != 3:
            raise ValueError(f"Expected 3 coordinates, got {len(coords)}.")
        return cls(float(coords[0]), float(coords[1]), float(coords[2]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.coincides_with(other)

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def coincides_with(self, other: Point, tol: float = TOLERANCE) -> bool:
        return (abs(self.x - other.x) < tol and
                abs(self.y - other.y) < tol and
                abs(self.z - other.z) < tol)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def distance_to_segment(self, a: Point, b: Point) -> float:
        """
        Minimal distance from this point to the closed segment [a, b].

        If the triangle (point, a, b) is obtuse at a or b, the perpendicular
        from the point does not land on the segment and the nearest feature is
        an endpoint. Otherwise the distance is the height of the triangle over
        the base ab, i.e. twice its area divided by |ab|.

        Args:
            a: First endpoint of the segment.
            b: Second endpoint of the segment.

        Returns:
            The non-negative distance.
        """
        v_a = Vector.between(a, self)
        v_b = Vector.between(b, self)
        ab = Vector.between(a, b)
        ba = -ab

        base = ab.length
        if base == 0.0:
            return v_a.length

        if ab.dot(v_a) < 0 or ba.dot(v_b) < 0:
            return min(v_a.length, v_b.length)

        # Area of the parallelogram spanned by ab and v_a, divided by the base
        return ab.cross(v_a).length / base

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class Plane:
    """
    A plane in implicit form A*x + B*y + C*z + D = 0.

    Built by `from_point_and_normal`, which normalizes the normal so that
    (A, B, C) has unit length.
    """
    a: float
    b: float
    c: float
    d: float

    @classmethod
    def from_point_and_normal(cls, point: Point, normal: Vector) -> Plane:
        """
        Plane through `point` perpendicular to `normal`.

        Raises:
            NullVectorError: If `normal` is null within tolerance.
        """
        unit = normal.normalize()
        d = -unit.x * point.x - unit.y * point.y - unit.z * point.z
        return cls(unit.x, unit.y, unit.z, d)

    @property
    def normal(self) -> Vector:
        return Vector(self.a, self.b, self.c).normalize()

    def _evaluate(self, point: Point) -> float:
        return self.a * point.x + self.b * point.y + self.c * point.z + self.d

    def signed_distance_to_point(self, point: Point) -> float:
        """Positive on the side the normal points to."""
        return self._evaluate(point) / math.sqrt(self.a**2 + self.b**2 + self.c**2)

    def distance_to_point(self, point: Point) -> float:
        return abs(self.signed_distance_to_point(point))

    def is_on(self, point: Point, tol: float = TOLERANCE) -> bool:
        return abs(self._evaluate(point)) < tol

    def project_point(self, point: Point) -> Point:
        """
        Orthogonal projection of `point` onto the plane.

        The point is moved by the unit normal scaled by its distance to the
        plane, towards whichever side lands on the plane.
        """
        offset = self.normal * self.distance_to_point(point)
        projected = point + offset
        if not self.is_on(projected):
            projected = point - offset
        return projected


@dataclass(frozen=True)
class Segment:
    """A closed straight segment between two points."""
    start: Point
    end: Point

    @property
    def direction(self) -> Vector:
        return Vector.between(self.start, self.end)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def endpoints(self) -> tuple[Point, Point]:
        return self.start, self.end

    def is_degenerate(self) -> bool:
        """True if the endpoints coincide within tolerance."""
        return self.direction.is_null()

    def reverse(self) -> Segment:
        return Segment(start=self.end, end=self.start)

    def distance_to_point(self, point: Point) -> float:
        return point.distance_to_segment(self.start, self.end)

    def discretize(self, n_points: int = 2) -> npt.NDArray[np.float64]:
        """
        Evenly spaced points along the segment, endpoints included.

        Returns:
            Array of shape (n_points, 3).
        """
        if n_points < 2:
            raise ValueError(f"At least 2 points are needed, got {n_points}.")
        return np.linspace(self.start.to_array(), self.end.to_array(), n_points)

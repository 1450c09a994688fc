"""Planar geometry adapters for the Angle type.

This package is the boundary between Angle and 2D geometry code. Each helper
reads the angle's radian value once and hands the actual rotation to a numpy
rotation matrix, so nothing here re-implements angle semantics.

Components:
    Point: Immutable (x, y) coordinate pair
    Vector: Immutable (dx, dy) displacement with angle-based construction
    rotate_point: Counter-clockwise rotation of a point about an origin

Typical Usage:
    >>> from anglekit import deg
    >>> from anglekit.geo import Point, Vector, rotate_point
    >>>
    >>> rotate_point(Point(1, 0), deg(90))  # ~Point(x=0.0, y=1.0)
    >>> Vector.from_angle(deg(45), length=2.0)  # ~Vector(dx=1.414, dy=1.414)
"""

from __future__ import annotations

from collections.abc import Sequence
from math import atan2, cos, hypot, sin
from typing import NamedTuple

import numpy as np

from ..unit import Angle


class Point(NamedTuple):
    """A point in the plane."""

    x: float
    y: float


def _rotation_matrix(angle: Angle) -> np.ndarray:
    radians = angle.radians
    c, s = np.cos(radians), np.sin(radians)
    return np.array([[c, -s], [s, c]])


def rotate_point(point: Sequence[float], angle: Angle, origin: Sequence[float] = (0.0, 0.0)) -> Point:
    """Rotate a point around an origin by an angle.

    Positive angles rotate counter-clockwise in a y-up coordinate system.

    Args:
        point: The (x, y) point to rotate.
        angle: The rotation.
        origin: The (x, y) point to rotate around. Defaults to (0, 0).

    Returns:
        Point: The rotated point. A zero angle returns the point unchanged.
    """
    if angle.is_zero:
        return Point(float(point[0]), float(point[1]))
    center = np.asarray(origin, dtype=float)
    offset = np.asarray(point, dtype=float) - center
    x, y = _rotation_matrix(angle) @ offset + center
    return Point(float(x), float(y))


class Vector(NamedTuple):
    """A displacement in the plane."""

    dx: float
    dy: float

    @classmethod
    def from_angle(cls, angle: Angle, length: float = 1.0) -> Vector:
        """Create a vector with the given direction and length.

        Args:
            angle: Direction of the vector from the positive x-axis.
            length: Length of the vector. Defaults to 1.0 (a unit vector).
        """
        return cls(length * cos(angle.radians), length * sin(angle.radians))

    @property
    def length(self) -> float:
        return hypot(self.dx, self.dy)

    @property
    def angle(self) -> Angle:
        """Direction of the vector from the positive x-axis, in (-π, π]."""
        return Angle(atan2(self.dy, self.dx))

    def rotated(self, angle: Angle) -> Vector:
        """Return the vector rotated counter-clockwise by ``angle``."""
        dx, dy = _rotation_matrix(angle) @ np.array([self.dx, self.dy])
        return Vector(float(dx), float(dy))

"""Angular unit definitions and the Angle value type.

This module provides the Angle class, a thin wrapper around a radian value
that makes planar angles easier to work with. All angular measurements are
stored in radians (the SI unit) and every other representation is derived
from that single value, so degrees, revolutions and turn counts can never
drift apart.

Degree and Revolution are members of the same unit family. Constructing one
of them converts its input to radians, and the result is an Angle in every
respect: it compares, normalizes and rounds by its radian value.

These angles are commonly used for:
- Rotating points and vectors in 2D geometry
- Snapping user-driven rotations to a grid (see ``anglekit.rounding``)
- Classifying directions by quadrant
- Comparing orientations up to whole turns (equivalence)

Classes:
    Angle: Root angular unit; value in radians.
    Degree: Angular unit in degrees with exact radian conversion.
    Revolution: Angular unit in full turns with exact radian conversion.
    Quadrant: The four traditional quadrants of the plane.

Functions:
    deg: Build an Angle from a value in degrees.

Example:
    >>> heading = Angle.from_degrees(45)
    >>> print(heading)  # "45.0°"
    >>> float(heading)  # 0.7853981633974483 (radians)
    >>> Angle.from_degrees(-10).normalized.degrees  # ~350.0
    >>> Angle.from_degrees(32).rounded(RoundingBehavior.NEAREST_FIVE_DEGREES).degrees  # ~30.0
"""

from __future__ import annotations

import json
import operator
from enum import Enum, auto
from math import atan2, isfinite, pi
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from ..config import DEGREE_SYMBOL, SCALAR_TYPE, SERIAL_FIELD
from ..rounding import CustomRounding, RoundingBehavior, round_angle
from .unit_float import UnitFloat

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ..geo import Point

_HALF_PI = pi / 2
_THREE_HALVES_PI = 3 / 2 * pi
_TWO_PI = 2 * pi


class Quadrant(Enum):
    """The traditional quadrants of the plane."""

    FIRST = auto()
    SECOND = auto()
    THIRD = auto()
    FOURTH = auto()


class Angle(UnitFloat):
    """Angular unit: Radian (SI unit for angles) and the Angle value type.

    An Angle is an immutable float holding radians. It has no range
    restriction: it may be negative or span several turns. Equality and
    ordering use the raw radian value with no tolerance, while
    ``is_equivalent`` compares positions on the circle.

    Attributes:
        IS_FAMILY_ROOT (bool): True, this is the root angular unit.
        SCALE_TO_SI (float): 1.0, radians are the SI unit.
        SYMBOL (str): "rad".

    Example:
        >>> right = Angle(pi / 2)
        >>> right.is_right
        True
        >>> right.degrees
        90.0
        >>> Angle.from_quarter_turns(4) == Angle.FULL_TURN
        True
    """

    __slots__ = ()

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"

    ZERO: ClassVar[Angle]
    EIGHTH_TURN: ClassVar[Angle]
    QUARTER_TURN: ClassVar[Angle]
    THREE_EIGHTH_TURN: ClassVar[Angle]
    HALF_TURN: ClassVar[Angle]
    THREE_QUARTER_TURN: ClassVar[Angle]
    FULL_TURN: ClassVar[Angle]

    # -------------------------------- Construction --------------------------------
    @classmethod
    def from_radians(cls, radians: SCALAR_TYPE) -> Angle:
        """Create an angle from a radian value."""
        return cls.from_si(float(radians))

    @classmethod
    def from_degrees(cls, degrees: SCALAR_TYPE) -> Angle:
        """Create an angle from a degree value (radians = d * pi / 180)."""
        return cls.from_si(Degree._to_si(degrees))

    @classmethod
    def from_revolutions(cls, revolutions: SCALAR_TYPE) -> Angle:
        """Create an angle from a number of full turns (radians = 2 * pi * n).

        Fractional values give a fraction of a full turn.
        """
        return cls.from_si(Revolution._to_si(revolutions))

    @classmethod
    def from_quarter_turns(cls, quarter_turns: int) -> Angle:
        """Create an angle from a number of 90° turns. Can be negative.

        Raises:
            TypeError: If ``quarter_turns`` is not an integer.
        """
        return cls.from_si(operator.index(quarter_turns) / 2 * pi)

    @classmethod
    def from_eighth_turns(cls, eighth_turns: int) -> Angle:
        """Create an angle from a number of 45° turns. Can be negative.

        Raises:
            TypeError: If ``eighth_turns`` is not an integer.
        """
        return cls.from_si(operator.index(eighth_turns) / 4 * pi)

    @classmethod
    def from_points(cls, point: Sequence[float], origin: Sequence[float] = (0.0, 0.0)) -> Angle:
        """Create the angle of the direction from ``origin`` to ``point``.

        Args:
            point: Target (x, y) used to calculate the direction.
            origin: Origin (x, y). Defaults to (0, 0).

        Returns:
            Angle: ``atan2(point.y - origin.y, point.x - origin.x)``.
        """
        return cls.from_si(atan2(point[1] - origin[1], point[0] - origin[0]))

    # -------------------------------- Accessors --------------------------------
    @property
    def radians(self) -> float:
        """The radian value; exactly the stored representation."""
        return float(self)

    @property
    def degrees(self) -> float:
        """The angle expressed in degrees."""
        return self.to(Degree)

    @property
    def revolutions(self) -> float:
        """The number of turns the angle makes."""
        return self.to(Revolution)

    def with_degrees(self, degrees: SCALAR_TYPE) -> Angle:
        """Return a new angle of this type set to ``degrees``."""
        return type(self).from_si(Degree._to_si(degrees))

    def with_revolutions(self, revolutions: SCALAR_TYPE) -> Angle:
        """Return a new angle of this type set to ``revolutions`` full turns."""
        return type(self).from_si(Revolution._to_si(revolutions))

    # -------------------------------- Classification --------------------------------
    # Predicates test the raw radian value, not the normalized one.
    @property
    def is_zero(self) -> bool:
        """True if the angle is exactly zero radians."""
        return float(self) == 0

    @property
    def is_negative(self) -> bool:
        """True if the raw radian value is below zero."""
        return float(self) < 0

    @property
    def is_acute(self) -> bool:
        """True if the angle is less than 90°, negative angles included."""
        return float(self) < _HALF_PI

    @property
    def is_right(self) -> bool:
        """True if the angle is exactly 90°. Round first if tolerance is needed."""
        return float(self) == _HALF_PI

    @property
    def is_straight(self) -> bool:
        """True if the angle is exactly 180°."""
        return float(self) == pi

    @property
    def is_obtuse(self) -> bool:
        """True if the angle lies strictly between 90° and 180°."""
        return _HALF_PI < float(self) < pi

    @property
    def is_reflex(self) -> bool:
        """True if the angle is greater than 180°."""
        return float(self) > pi

    @property
    def quadrant(self) -> Quadrant:
        """The quadrant the angle lies in.

        Values outside [0, 2π), negative ones included, are classified by
        their normalized value.

        Raises:
            ValueError: If the angle is NaN or infinite.
        """
        radians = float(self)
        if not isfinite(radians):
            msg = f"quadrant is undefined for a non-finite angle ({radians})"
            raise ValueError(msg)
        if not 0 <= radians < _TWO_PI:
            return self.normalized.quadrant
        if radians < _HALF_PI:
            return Quadrant.FIRST
        if radians < pi:
            return Quadrant.SECOND
        if radians < _THREE_HALVES_PI:
            return Quadrant.THIRD
        return Quadrant.FOURTH

    # -------------------------------- Normalization --------------------------------
    def _normalized_to(self, period: float) -> Angle:
        radians = float(self)
        if 0 < radians < period:
            return self
        with np.errstate(invalid="ignore"):
            rem = float(np.fmod(radians, period))
        if rem == 0:
            return type(self).from_si(0.0)
        if rem < 0:
            wrapped = period + rem
            # A tiny negative remainder can round up to the period itself.
            if wrapped >= period:
                return type(self).from_si(0.0)
            return type(self).from_si(wrapped)
        return type(self).from_si(rem)

    @property
    def normalized(self) -> Angle:
        """The angle reduced to [0, 2π)."""
        return self._normalized_to(_TWO_PI)

    @property
    def normalized_to_half(self) -> Angle:
        """The angle reduced to [0, π). Use when there is 180° symmetry."""
        return self._normalized_to(pi)

    @property
    def normalized_to_quarter(self) -> Angle:
        """The angle reduced to [0, π/2). Use when there is 90° symmetry."""
        return self._normalized_to(_HALF_PI)

    def is_equivalent(self, other: Angle) -> bool:
        """Return whether two angles have the same effect.

        Args:
            other: The angle to check equivalence to.

        Returns:
            bool: True if the angles are equal once normalized to [0, 2π).
        """
        return self.normalized == other.normalized

    # -------------------------------- Derived angles --------------------------------
    @property
    def inverse(self) -> Angle:
        """The angle which added to this one gives zero."""
        return -self

    @property
    def compliment(self) -> Angle:
        """The angle which added to this one gives 90°.

        Angles larger than 90° have a negative compliment.
        """
        return type(self).from_si(_HALF_PI - float(self))

    @property
    def suppliment(self) -> Angle:
        """The angle which added to this one gives 180°.

        Angles larger than 180° have a negative suppliment.
        """
        return type(self).from_si(pi - float(self))

    # -------------------------------- Rounding --------------------------------
    def rounded(
        self, behavior: RoundingBehavior | CustomRounding = RoundingBehavior.NEAREST_DEGREE
    ) -> Angle:
        """Return the angle snapped to the resolution of ``behavior``.

        Useful for snapping user rotation of elements in a UI.

        Args:
            behavior: The behavior used to round/snap the angle. Defaults to
                the nearest whole degree.

        Returns:
            Angle: A new angle rounded by the given behavior.
        """
        return round_angle(self, behavior)

    # -------------------------------- Geometry --------------------------------
    def rotate(self, point: Sequence[float], around: Sequence[float] = (0.0, 0.0)) -> Point:
        """Rotate ``point`` counter-clockwise around ``around`` by this angle."""
        from ..geo import rotate_point

        return rotate_point(point, self, origin=around)

    # -------------------------------- Serialization --------------------------------
    def to_dict(self) -> dict[str, float]:
        """Return the single-field serialized form, ``{"radians": value}``."""
        return {SERIAL_FIELD: float(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Angle:
        """Rebuild an angle from ``to_dict`` output.

        Raises:
            KeyError: If the radian field is missing.
            TypeError: If the radian field is not a number.
        """
        value = data[SERIAL_FIELD]
        if isinstance(value, bool) or not isinstance(value, SCALAR_TYPE):
            msg = f"{SERIAL_FIELD!r} must be a number, got {type(value).__name__}"
            raise TypeError(msg)
        return cls.from_si(float(value))

    def to_json(self) -> str:
        """Return the ``to_dict`` form encoded as a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Angle:
        """Rebuild an angle from ``to_json`` output.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON.
            KeyError: If the radian field is missing.
            TypeError: If the radian field is not a number.
        """
        return cls.from_dict(json.loads(text))

    def __str__(self) -> str:
        """Render the degree value followed by the degree symbol (e.g. "90.0°")."""
        return f"{self.degrees}{DEGREE_SYMBOL}"


class Degree(Angle):
    """Angular unit: Degree (1/360 of a full rotation).

    Values are converted to radians with ``d * pi / 180`` and read back with
    ``r * 180 / pi``, in that order, so that the stored radians match
    ``Angle.from_degrees`` bit for bit.

    Example:
        >>> bearing = Degree(90)
        >>> float(bearing)  # 1.5707963267948966 (radians)
        >>> repr(bearing)  # "90 ° (= 1.5708 rad)"
    """

    __slots__ = ()

    SYMBOL = "°"

    @classmethod
    def _to_si(cls, value: SCALAR_TYPE) -> float:
        return float(value) * pi / 180

    @classmethod
    def _from_si(cls, si_value: float) -> float:
        return si_value * 180 / pi


class Revolution(Angle):
    """Angular unit: Revolution (one full turn, 2π radians).

    Example:
        >>> Revolution(0.25) == Angle.from_quarter_turns(1)
        True
    """

    __slots__ = ()

    SYMBOL = "rev"

    @classmethod
    def _to_si(cls, value: SCALAR_TYPE) -> float:
        return 2 * pi * float(value)

    @classmethod
    def _from_si(cls, si_value: float) -> float:
        return si_value / (2 * pi)


def deg(value: SCALAR_TYPE) -> Angle:
    """Build an Angle from ``value`` read as degrees; shorthand for ``Angle.from_degrees``."""
    return Angle.from_degrees(value)


Angle.ZERO = Angle()
Angle.EIGHTH_TURN = Angle.from_eighth_turns(1)
Angle.QUARTER_TURN = Angle.from_quarter_turns(1)
Angle.THREE_EIGHTH_TURN = Angle.from_eighth_turns(3)
Angle.HALF_TURN = Angle.from_quarter_turns(2)
Angle.THREE_QUARTER_TURN = Angle.from_quarter_turns(3)
Angle.FULL_TURN = Angle.from_revolutions(1)

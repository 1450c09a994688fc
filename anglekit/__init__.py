"""Unambiguous planar angles for geometric code.

anglekit provides an Angle value type that removes the ambiguity between
degrees, radians and turn fractions. An Angle stores radians and nothing
else; every other representation is computed from that value, and every
alternate constructor converts into it with a fixed formula.

Framework Components:
    Measurement (anglekit.unit):
        • Angle: immutable float of radians with constructors from degrees,
          revolutions, quarter/eighth turns and point pairs
        • Degree, Revolution: alternative scales of the angle family
        • Classification predicates and Quadrant
        • Normalization to [0, 2π), [0, π) and [0, π/2) and equivalence

    Snapping (anglekit.rounding):
        • RoundingBehavior: half degree, degree, five degrees, eighth turn,
          quarter turn
        • CustomRounding: any Angle -> Angle function

    Geometry (anglekit.geo):
        • Point rotation and vector construction at the radian boundary

Example:
    >>> from anglekit import Angle, RoundingBehavior, deg
    >>>
    >>> a = deg(-10)
    >>> a.normalized.degrees  # ~350.0
    >>> a.quadrant  # Quadrant.FOURTH
    >>> deg(32).rounded(RoundingBehavior.NEAREST_FIVE_DEGREES).degrees  # ~30.0
    >>> str(Angle.QUARTER_TURN)  # "90.0°"
    >>> Angle.QUARTER_TURN.rotate((1, 0))  # ~Point(x=0.0, y=1.0)
"""

from .geo import Point, Vector, rotate_point
from .rounding import CustomRounding, RoundingBehavior, round_angle
from .unit import Angle, Degree, Quadrant, Revolution, Unit, UnitFloat, deg

__all__ = [
    "Angle",
    "Degree",
    "Revolution",
    "Quadrant",
    "deg",
    "Unit",
    "UnitFloat",
    "RoundingBehavior",
    "CustomRounding",
    "round_angle",
    "Point",
    "Vector",
    "rotate_point",
]

"""Type-safe angular unit system.

This package implements the Angle value type on top of a small unit-family
system. Every value is stored in radians (the SI unit); degrees and
revolutions are alternative scales of the same family and convert exactly at
the boundary.

Architecture:
    - unit_base: Foundation Unit class with family management system
    - unit_float: Float-based units with automatic SI conversion
    - unit_angle: Angle (root, radians), Degree, Revolution, Quadrant

Key Features:
    - Type Safety: Prevents mixing values from unrelated unit families
    - SI Storage: Radians are the single stored value
    - Unit Operations: Arithmetic between angles and scaling by numbers
    - Human Readable: Angles render in degrees with a trailing "°"

Example:
    >>> from anglekit.unit import Angle, Degree, Revolution
    >>>
    >>> heading = Degree(45)
    >>> turn = Revolution(0.5)
    >>> float(turn)  # 3.141592653589793
    >>> (heading + turn).to(Degree)  # ~225.0
    >>> heading.to(Revolution)  # 0.125
"""

from .unit_angle import Angle, Degree, Quadrant, Revolution, deg
from .unit_base import Unit
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Angle",
    "Degree",
    "Revolution",
    "Quadrant",
    "deg",
]

"""Base unit system foundation for type-safe angular quantities.

This module provides the fundamental Unit class that serves as the abstract
base for all unit types in the toolkit. It implements the unit family system
using automatic ROOT class assignment, which enables type-safe operations
between compatible units while preventing values of unrelated families from
being mixed.

A unit family represents one physical quantity. The angle family has the
Angle class as its root and Degree and Revolution as alternative input and
display units; all of them store radians.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- Type Safety: Operations are restricted to compatible unit families

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for angle units
    >>> class Degree(Angle):
    ...     pass  # Automatically gets ROOT = Angle
    >>> class Revolution(Angle):
    ...     pass  # Also gets ROOT = Angle
    >>> # Degree and Revolution can operate together (same ROOT)
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types in the toolkit.

    All concrete unit classes should inherit from UnitFloat rather than
    directly from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT is the first ancestor with IS_FAMILY_ROOT=True, or the class
        itself if none is found.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check if two unit types belong to the same family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the other type is not a unit or belongs to a
                different family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"incompatible units: {cls.ROOT.__name__} and {unit_type.__name__}"
            raise TypeError(msg)

"""Float-based unit system with automatic SI conversion and type safety.

This module provides the UnitFloat class, which serves as the foundation for
all numeric unit types in the toolkit. It combines Python's float type with
unit safety, automatic SI conversion, and type checking to prevent mixing
incompatible units.

Key Features:
- Automatic conversion to SI units for internal storage
- Type-safe operations between compatible unit families
- Arithmetic operations with scalar values and other units
- IEEE semantics for scalar division (no ZeroDivisionError)
- Conversion methods between different units of the same family
- Human-readable string representations

Classes:
    UnitFloat: Base class for all float-based units with automatic SI conversion.

Example:
    >>> class Angle(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "rad"
    ...
    >>> class Gradian(Angle):
    ...     SCALE_TO_SI = 3.141592653589793 / 200
    ...     SYMBOL = "gon"
    ...
    >>> right = Gradian(100)  # 100 gon
    >>> print(float(right))  # 1.5707963267948966 (radians in SI)
"""

from __future__ import annotations

import logging
from math import isfinite
from typing import ClassVar

import numpy as np

from ..config import SCALAR_TYPE
from .unit_base import Unit

logger = logging.getLogger(__name__)


class UnitFloat(float, Unit):
    """Base class for type-safe unit calculations with automatic SI conversion.

    This class stores values internally in SI units while allowing operations
    only between compatible unit types (same 'root' family). Subclasses that
    need an exact conversion formula rather than a single multiplicative
    factor override ``_to_si`` and ``_from_si``.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: SCALAR_TYPE = 0.0):
        """Create a new UnitFloat instance with automatic SI conversion.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with value stored in SI units.
        """
        return float.__new__(cls, cls._to_si(value))

    @classmethod
    def _to_si(cls, value: SCALAR_TYPE) -> float:
        """Convert a value in this unit's native scale to SI."""
        return float(value) * cls.SCALE_TO_SI

    @classmethod
    def _from_si(cls, si_value: float) -> float:
        """Convert an SI value to this unit's native scale."""
        return si_value / cls.SCALE_TO_SI

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from SI unit value.

        Args:
            si_value: Value already in SI units.

        Returns:
            UnitFloat: New instance with the SI value.
        """
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.
        """
        self._check_same_root(unit_type)
        return unit_type._from_si(float(self))

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            UnitFloat: New instance of the target unit type.
        """
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    @staticmethod
    def _check_scalar(k) -> None:
        if isinstance(k, Unit) or not isinstance(k, SCALAR_TYPE):
            msg = f"unsupported scalar type: {type(k).__name__}"
            raise TypeError(msg)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat | int) -> UnitFloat:
        """Reflected addition.

        An integer zero is accepted as the additive identity so that
        ``sum()`` works with its default start value.

        Raises:
            TypeError: If other is neither zero nor a unit of the same family.
        """
        if type(other) is int and other == 0:
            return type(self).from_si(float(self))
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        """Reflected subtraction, ``other - self``.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: SCALAR_TYPE) -> UnitFloat:
        """Multiply unit by scalar value.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            UnitFloat: Unit scaled by the factor.

        Raises:
            TypeError: If k is not a numeric scalar (another unit included).
        """
        self._check_scalar(k)
        return type(self).from_si(float(k) * float(self))

    def __rmul__(self, k: SCALAR_TYPE) -> UnitFloat:
        """Multiply scalar by unit; same as ``self * k``."""
        return self.__mul__(k)

    def __truediv__(self, k: SCALAR_TYPE) -> UnitFloat:
        """Divide unit by scalar value.

        Division follows IEEE 754: dividing by zero yields an infinite or NaN
        value instead of raising ZeroDivisionError.

        Args:
            k: Numeric scalar to divide by.

        Returns:
            UnitFloat: Unit divided by the scalar.

        Raises:
            TypeError: If k is not a numeric scalar (another unit included).
        """
        self._check_scalar(k)
        with np.errstate(divide="ignore", invalid="ignore"):
            si_val = float(np.true_divide(np.float64(self), np.float64(k)))
        if not isfinite(si_val):
            logger.debug("Division of %r by %r produced %s", self, k, si_val)
        return type(self).from_si(si_val)

    def __neg__(self) -> UnitFloat:
        """Return the unit with its sign flipped."""
        return type(self).from_si(-float(self))

    def __pos__(self) -> UnitFloat:
        """Return an equal copy of the unit."""
        return type(self).from_si(float(self))

    def __abs__(self) -> UnitFloat:
        """Return the magnitude of the unit, keeping its type."""
        return type(self).from_si(abs(float(self)))

    # In-place operators rebind to a new value; instances are immutable.
    __iadd__ = __add__
    __isub__ = __sub__
    __imul__ = __mul__
    __itruediv__ = __truediv__

    # -------------------------------- Comparison Operations --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        """Less-than comparison between two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        """Less-than-or-equal comparison between two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        """Greater-than comparison between two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        """Greater-than-or-equal comparison between two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Exact equality of SI values.

        Non-unit operands are left to float's own comparison, so a unit
        compares equal to the bare SI float it wraps.

        Raises:
            TypeError: If both operands are units from different families.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        """Exact inequality of SI values; the negation of ``==``.

        Raises:
            TypeError: If both operands are units from different families.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __reduce__(self):
        """Pickle through ``from_si`` so the stored SI value is not rescaled."""
        return (type(self).from_si, (float(self),))

    def __str__(self) -> str:
        """Return human-readable string representation in the unit's native scale.

        Returns:
            str: Value and symbol in the unit's natural scale (e.g., "90.0 °").
        """
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return detailed string representation showing both native and SI values.

        Returns:
            str: Value in native scale with SI equivalent (e.g., "90 ° (= 1.5708 rad)").
        """
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} {self.ROOT.SYMBOL})"

"""Snapping policies for angles.

A rounding behavior maps any angle to the nearest member of a fixed angular
grid. The grids are a closed set of enumeration members; arbitrary policies
are wrapped in CustomRounding.

The degree-based behaviors break ties with round-half-to-even so that snapping
many angles does not drift in one direction. The turn-based behaviors add 0.5
and floor, which rounds ties up. The two tie-break rules are deliberately
different.

Classes:
    RoundingBehavior: The fixed snapping resolutions.
    CustomRounding: Wraps a user-supplied Angle -> Angle function.

Functions:
    round_angle: Dispatch an angle to a behavior.

Example:
    >>> from anglekit import Angle, RoundingBehavior
    >>> Angle.from_degrees(33).rounded(RoundingBehavior.NEAREST_FIVE_DEGREES).degrees  # ~35.0
    >>> Angle(1.0).rounded(RoundingBehavior.NEAREST_EIGHTH_TURN) == Angle.EIGHTH_TURN
    True
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from math import isfinite, pi
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .unit import Angle

logger = logging.getLogger(__name__)


class RoundingBehavior(Enum):
    """Defines how an Angle is rounded.

    Members:
        NEAREST_HALF_DEGREE: Snap to the closest 0.5°.
        NEAREST_DEGREE: Snap to the closest 1°.
        NEAREST_FIVE_DEGREES: Snap to the closest 5°.
        NEAREST_EIGHTH_TURN: Snap to the closest 45°.
        NEAREST_QUARTER_TURN: Snap to the closest 90°.
    """

    NEAREST_HALF_DEGREE = auto()
    NEAREST_DEGREE = auto()
    NEAREST_FIVE_DEGREES = auto()
    NEAREST_EIGHTH_TURN = auto()
    NEAREST_QUARTER_TURN = auto()

    @staticmethod
    def custom(fn: Callable[[Angle], Angle]) -> CustomRounding:
        """Return a behavior that snaps angles with ``fn``."""
        return CustomRounding(fn)

    def rounded(self, angle: Angle) -> Angle:
        """Round a given angle.

        Args:
            angle: The angle to round.

        Returns:
            Angle: An angle rounded using the behavior. NaN and infinite
                values, including a turn count that overflows for huge
                finite angles, propagate instead of raising.
        """
        if self is RoundingBehavior.NEAREST_HALF_DEGREE:
            return angle.from_degrees(float(np.rint(2 * angle.degrees)) / 2)
        if self is RoundingBehavior.NEAREST_DEGREE:
            return angle.from_degrees(float(np.rint(angle.degrees)))
        if self is RoundingBehavior.NEAREST_FIVE_DEGREES:
            return angle.from_degrees(5 * float(np.rint(angle.degrees / 5)))
        if self is RoundingBehavior.NEAREST_EIGHTH_TURN:
            return _snap_to_turns(angle, 4, angle.from_eighth_turns)
        return _snap_to_turns(angle, 2, angle.from_quarter_turns)


def _snap_to_turns(angle: Angle, turns_per_half_turn: int, from_turns: Callable[[int], Angle]) -> Angle:
    """Snap to a whole number of turns, rounding ties up (add 0.5 and floor).

    Args:
        angle: The angle to snap.
        turns_per_half_turn: 4 for eighth turns, 2 for quarter turns.
        from_turns: Constructor taking the integer turn count.

    Returns:
        Angle: The snapped angle, or the non-finite count scaled back to
            radians when no integer count exists.
    """
    count = float(np.floor(angle.radians * turns_per_half_turn / pi + 0.5))
    if not isfinite(count):
        return type(angle).from_si(count / turns_per_half_turn * pi)
    return from_turns(int(count))


@dataclass(frozen=True)
class CustomRounding:
    """Rounding behavior backed by an arbitrary function.

    The function is applied verbatim; no constraint is placed on its result.

    Attributes:
        fn: Callable taking the angle to round and returning the new angle.
    """

    fn: Callable[[Angle], Angle]

    def rounded(self, angle: Angle) -> Angle:
        logger.debug("Applying custom rounding %r to %r", self.fn, angle)
        return self.fn(angle)


def round_angle(angle: Angle, behavior: RoundingBehavior | CustomRounding) -> Angle:
    """Snap ``angle`` with ``behavior``.

    Raises:
        TypeError: If ``behavior`` is neither a RoundingBehavior nor a
            CustomRounding.
    """
    if not isinstance(behavior, (RoundingBehavior, CustomRounding)):
        msg = f"unsupported rounding behavior: {behavior!r}"
        raise TypeError(msg)
    return behavior.rounded(angle)

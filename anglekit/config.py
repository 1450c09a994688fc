"""Global configuration and type definitions for the angle toolkit.

This module provides the fundamental type aliases and display constants used
throughout the package. It establishes which numeric types are accepted as
scalars in angle arithmetic and how angles are rendered and serialized, so
every module agrees on the same conventions.

Type Definitions:
    SCALAR_TYPE: Union type defining acceptable numeric scalars for angle
                 scaling. Supports Python native types (int, float) and NumPy
                 integer/floating scalars produced by vectorized code.

Constants:
    DEGREE_SYMBOL: Suffix appended to the degree value when an angle is
                   rendered as text.
    SERIAL_FIELD: Name of the single numeric field holding the radian value
                  in the serialized form.

Example:
    >>> from anglekit.config import SCALAR_TYPE
    >>> import numpy as np
    >>> isinstance(np.float32(0.5), SCALAR_TYPE)
    True
    >>> isinstance("0.5", SCALAR_TYPE)
    False
"""

from numpy import floating, integer

SCALAR_TYPE = int | float | integer | floating

DEGREE_SYMBOL = "°"
SERIAL_FIELD = "radians"

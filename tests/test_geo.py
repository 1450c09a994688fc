"""
Tests for the planar geometry adapters.
"""

import math
import unittest

from anglekit import Angle, Point, Vector, deg, rotate_point


class TestRotatePoint(unittest.TestCase):
    """Test point rotation."""

    def test_quarter_turn_about_origin(self):
        """Test rotating (1, 0) by 90 degrees around the origin."""
        x, y = rotate_point(Point(1, 0), deg(90))
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 1.0)

    def test_rotation_about_other_origin(self):
        """Test rotating around a point other than the origin."""
        x, y = rotate_point((2, 1), Angle.HALF_TURN, origin=(1, 1))
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 1.0)

    def test_negative_angle_rotates_clockwise(self):
        """Test that negative angles rotate clockwise."""
        x, y = rotate_point((0, 1), -Angle.QUARTER_TURN)
        self.assertAlmostEqual(x, 1.0)
        self.assertAlmostEqual(y, 0.0)

    def test_zero_angle_is_identity(self):
        """Test that a zero rotation returns the point unchanged."""
        self.assertEqual(rotate_point((0.1, 0.2), Angle.ZERO, origin=(5, 5)), Point(0.1, 0.2))

    def test_angle_rotate_method(self):
        """Test the Angle.rotate convenience."""
        rotated = deg(90).rotate(Point(1, 0))
        self.assertIsInstance(rotated, Point)
        self.assertAlmostEqual(rotated.x, 0.0)
        self.assertAlmostEqual(rotated.y, 1.0)
        self.assertEqual(Angle.ZERO.rotate((3, 4), around=(1, 1)), Point(3.0, 4.0))


class TestVector(unittest.TestCase):
    """Test vector construction from angles."""

    def test_unit_vector_from_angle(self):
        """Test a unit vector pointing along an angle."""
        vector = Vector.from_angle(Angle.QUARTER_TURN)
        self.assertAlmostEqual(vector.dx, 0.0)
        self.assertAlmostEqual(vector.dy, 1.0)

    def test_vector_length(self):
        """Test the length of constructed vectors."""
        self.assertAlmostEqual(Vector.from_angle(deg(30), length=2.0).length, 2.0)
        self.assertEqual(Vector(3, 4).length, 5.0)

    def test_rotated(self):
        """Test rotating a vector."""
        dx, dy = Vector(1, 0).rotated(deg(90))
        self.assertAlmostEqual(dx, 0.0)
        self.assertAlmostEqual(dy, 1.0)

    def test_vector_angle(self):
        """Test recovering the direction of a vector."""
        self.assertEqual(Vector(0, 2).angle, Angle.QUARTER_TURN)
        self.assertAlmostEqual(Vector.from_angle(deg(-30)).angle.degrees, -30.0)


if __name__ == '__main__':
    unittest.main()

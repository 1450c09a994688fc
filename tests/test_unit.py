"""
Tests for the angle unit family.
"""

import math
import unittest

from anglekit import Angle, Degree, Revolution, UnitFloat, deg


class Meter(UnitFloat):
    """Unrelated unit family used to check family isolation."""

    IS_FAMILY_ROOT = True
    SYMBOL = "m"


class Kilometer(Meter):
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class TestUnitFamily(unittest.TestCase):
    """Test ROOT assignment for the angle family."""

    def test_roots(self):
        """Test that every angle unit shares the Angle root."""
        self.assertIs(Angle.ROOT, Angle)
        self.assertIs(Degree.ROOT, Angle)
        self.assertIs(Revolution.ROOT, Angle)
        self.assertIs(Kilometer.ROOT, Meter)

    def test_units_are_angles(self):
        """Test that alternative scales are Angle instances."""
        self.assertIsInstance(Degree(10), Angle)
        self.assertIsInstance(Revolution(1), Angle)

    def test_scale_factor_units(self):
        """Test the generic SCALE_TO_SI conversion."""
        self.assertEqual(float(Kilometer(2.5)), 2500.0)
        self.assertEqual(Kilometer(2.5).to(Meter), 2500.0)

    def test_str_uses_native_scale(self):
        """Test that str() shows the value in the unit's own scale and symbol."""
        self.assertEqual(str(Kilometer(2.5)), "2.5 km")
        self.assertEqual(str(Meter(3.0)), "3.0 m")


class TestAngleUnits(unittest.TestCase):
    """Test Degree and Revolution."""

    def test_degree_matches_constructor(self):
        """Test that Degree stores the same radians as from_degrees."""
        for d in (0, 1, 33, 90, -45, 1234.5):
            with self.subTest(d=d):
                self.assertEqual(Degree(d), Angle.from_degrees(d))
                self.assertEqual(Degree(d), deg(d))

    def test_exact_turns(self):
        """Test whole and fractional turns."""
        self.assertEqual(Degree(90), Angle.QUARTER_TURN)
        self.assertEqual(Revolution(1), Angle.FULL_TURN)
        self.assertEqual(Revolution(0.25), Angle.QUARTER_TURN)
        self.assertEqual(Revolution(-0.5).radians, -math.pi)

    def test_to(self):
        """Test conversion to a float in another unit."""
        self.assertEqual(Degree(45).to(Revolution), 0.125)
        self.assertEqual(Revolution(0.5).to(Angle), math.pi)
        self.assertEqual(Angle.HALF_TURN.to(Degree), 180.0)

    def test_as_unit(self):
        """Test rebinding the unit type without changing radians."""
        rebound = Angle.QUARTER_TURN.as_unit(Degree)
        self.assertIs(type(rebound), Degree)
        self.assertEqual(rebound.radians, Angle.QUARTER_TURN.radians)

    def test_mixed_arithmetic_keeps_left_type(self):
        """Test that arithmetic between angle units keeps the left operand's type."""
        total = Degree(45) + Revolution(0.5)
        self.assertIs(type(total), Degree)
        self.assertAlmostEqual(total.to(Degree), 225.0)

    def test_repr(self):
        """Test the detailed representation."""
        self.assertEqual(repr(Degree(90)), "90 ° (= 1.5708 rad)")
        self.assertEqual(repr(Angle(2.0)), "2 rad (= 2 rad)")

    def test_str_renders_degrees_for_every_unit(self):
        """Test that every angle unit renders in degrees."""
        self.assertEqual(str(Degree(90)), "90.0°")
        self.assertEqual(str(Revolution(0.5)), "180.0°")


class TestFamilyIsolation(unittest.TestCase):
    """Test that angles do not mix with other quantities."""

    def test_arithmetic_across_families(self):
        """Test that adding a length to an angle fails."""
        with self.assertRaises(TypeError):
            Angle(1.0) + Meter(1.0)
        with self.assertRaises(TypeError):
            Meter(1.0) - Degree(1.0)

    def test_comparison_across_families(self):
        """Test that comparing a length to an angle fails."""
        with self.assertRaises(TypeError):
            Angle(1.0) < Meter(2.0)
        with self.assertRaises(TypeError):
            Angle(1.0) == Meter(1.0)

    def test_conversion_across_families(self):
        """Test that converting an angle to a length fails."""
        with self.assertRaises(TypeError):
            Angle(1.0).to(Meter)
        with self.assertRaises(TypeError):
            Angle(1.0).as_unit(Kilometer)

    def test_ordering_against_bare_numbers(self):
        """Test that ordering requires another angle."""
        with self.assertRaises(TypeError):
            Angle(1.0) < 2.0

    def test_equality_against_bare_numbers(self):
        """Test that an angle equals the bare radian float it wraps."""
        self.assertEqual(Angle(1.5), 1.5)
        self.assertNotEqual(Angle(1.5), 2.0)
        self.assertNotEqual(Angle(1.5), None)


if __name__ == '__main__':
    unittest.main()

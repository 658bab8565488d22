import unittest
from unittest import mock
from core.errors import InvalidInputError
from main import get_required_inputs, get_optional_inputs

def answers(*values):
    return mock.patch("builtins.input", side_effect=list(values))

class TestRequiredInputs(unittest.TestCase):
    def test_valid_values(self):
        with answers("12", "10", "5,5"):
            self.assertEqual(get_required_inputs(), (12.0, 10.0, 5.5))

    def test_voltage_above_ceiling_stops(self):
        with answers("61"):
            with self.assertRaises(InvalidInputError) as ctx:
                get_required_inputs()
        self.assertEqual(ctx.exception.field, "voltage")

    def test_zero_current_stops_before_length(self):
        with answers("12", "0") as prompt:
            with self.assertRaises(InvalidInputError) as ctx:
                get_required_inputs()
        self.assertEqual(ctx.exception.field, "current")
        self.assertEqual(prompt.call_count, 2)

class TestOptionalInputs(unittest.TestCase):
    def test_invalid_values_fall_back(self):
        # drop, round trip, material, unit, ambient, installation, wire type
        with answers("15", "y", "steel", "K", "hot", "buried", "teflon"), mock.patch("builtins.print"):
            drop, round_trip, material, ambient, unit, installation, wire_type = get_optional_inputs()
        self.assertEqual(drop, 3.0)
        self.assertTrue(round_trip)
        self.assertEqual(material, "copper")
        self.assertEqual((ambient, unit), (20.0, "C"))
        self.assertEqual(installation, "air")
        self.assertEqual(wire_type, "generic")

    def test_explicit_values(self):
        with answers("5", "n", "aluminum", "f", "86", "conduit", "thwn"):
            drop, round_trip, material, ambient, unit, installation, wire_type = get_optional_inputs()
        self.assertEqual(drop, 5.0)
        self.assertFalse(round_trip)
        self.assertEqual((material, ambient, unit), ("aluminum", 86.0, "F"))
        self.assertEqual((installation, wire_type), ("conduit", "thwn"))

if __name__ == '__main__':
    unittest.main()

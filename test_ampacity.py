import unittest
from core.models import InstallationMethod, TemperatureStatus
from standards.ampacity import ampacity, recommend_fuse, find_minimum_safe_size, thermal_penalty
from standards.dc_tables import (MATERIALS, WIRE_TYPES, METRIC_SIZES, AWG_SIZES, FUSE_RATINGS,
                                 get_temp_derating, get_base_ampacity)
from standards.temperature_check import validate_wire_temperature

COPPER = MATERIALS["copper"]
ALUMINUM = MATERIALS["aluminum"]
GENERIC = WIRE_TYPES["generic"]

class TestDeratingTables(unittest.TestCase):
    def test_interpolates_between_rows(self):
        # Halfway between 30°C (1.00) and 40°C (0.91)
        self.assertAlmostEqual(get_temp_derating(35.0), 0.955)
        self.assertAlmostEqual(get_temp_derating(25.0), 1.04)

    def test_exact_rows(self):
        self.assertAlmostEqual(get_temp_derating(30.0), 1.00)
        self.assertAlmostEqual(get_temp_derating(50.0), 0.82)

    def test_clamps_outside_table(self):
        self.assertEqual(get_temp_derating(-40.0), 1.29)
        self.assertEqual(get_temp_derating(150.0), 0.41)

    def test_base_ampacity_rounds_up_to_table_entry(self):
        self.assertEqual(get_base_ampacity(2.5), 26.0)
        self.assertEqual(get_base_ampacity(0.3), 9.0)
        # AWG 10 (5.261 mm2) uses the 6 mm2 row
        self.assertEqual(get_base_ampacity(5.261), 45.0)

    def test_base_ampacity_extrapolates_past_table(self):
        # 424 + (424 - 362) / (240 - 185) * 60
        self.assertAlmostEqual(get_base_ampacity(300.0), 424.0 + 62.0 / 55.0 * 60.0)
        self.assertGreater(get_base_ampacity(300.0), get_base_ampacity(240.0))

class TestAmpacity(unittest.TestCase):
    def test_copper_in_air_at_base_temperature(self):
        self.assertAlmostEqual(ampacity(2.5, COPPER, InstallationMethod.AIR, 30.0, GENERIC), 26.0)

    def test_cool_ambient_increases_rating(self):
        self.assertAlmostEqual(ampacity(2.5, COPPER, InstallationMethod.AIR, 20.0, GENERIC), 26.0 * 1.08)

    def test_aluminum_factor(self):
        self.assertAlmostEqual(ampacity(2.5, ALUMINUM, InstallationMethod.AIR, 30.0, GENERIC), 26.0 * 0.61)

    def test_installation_derating(self):
        self.assertAlmostEqual(ampacity(2.5, COPPER, InstallationMethod.CONDUIT, 30.0, GENERIC), 26.0 * 0.80)
        self.assertAlmostEqual(ampacity(2.5, COPPER, InstallationMethod.ISOLATED, 30.0, GENERIC), 26.0 * 0.70)

    def test_thermal_penalty_near_rating(self):
        # Generic 90°C: threshold 81°C, 85.5°C is halfway to the rating -> 0.75
        self.assertAlmostEqual(thermal_penalty(85.5, GENERIC), 0.75)
        self.assertAlmostEqual(thermal_penalty(90.0, GENERIC), 0.5)
        self.assertEqual(thermal_penalty(120.0, GENERIC), 0.5)
        self.assertEqual(thermal_penalty(60.0, GENERIC), 1.0)
        # 85.5°C ambient is past the derating table -> 0.41
        self.assertAlmostEqual(ampacity(2.5, COPPER, InstallationMethod.AIR, 85.5, GENERIC), 26.0 * 0.41 * 0.75)

    def test_non_increasing_with_ambient(self):
        for wire_type in WIRE_TYPES.values():
            for installation in InstallationMethod:
                for material in MATERIALS.values():
                    values = [ampacity(10.0, material, installation, t, wire_type) for t in range(-40, 221, 1)]
                    self.assertTrue(all(b <= a + 1e-9 for a, b in zip(values, values[1:])),
                                    f"{wire_type.key}/{installation.value}/{material.key}")

    def test_increases_with_size(self):
        values = [ampacity(s.area_mm2, COPPER, InstallationMethod.AIR, 30.0, GENERIC) for s in METRIC_SIZES]
        self.assertTrue(all(b > a for a, b in zip(values, values[1:])))

class TestFuseRecommendation(unittest.TestCase):
    def test_largest_fuse_under_limit(self):
        # 26 A * 0.85 = 22.1 A -> 20 A
        self.assertEqual(recommend_fuse(26.0), 20)
        # 100 A * 0.85 = 85 A -> 80 A
        self.assertEqual(recommend_fuse(100.0), 80)

    def test_exact_limit_is_allowed(self):
        self.assertEqual(recommend_fuse(40.0, safety_factor=1.0), 40)

    def test_falls_back_to_smallest_fuse(self):
        self.assertEqual(recommend_fuse(0.5), FUSE_RATINGS[0])

    def test_capped_at_largest_fuse(self):
        self.assertEqual(recommend_fuse(5000.0), FUSE_RATINGS[-1])

    def test_always_standard_and_within_limit(self):
        for tenth in range(1, 8000):
            amps = tenth / 10.0
            fuse = recommend_fuse(amps)
            self.assertIn(fuse, FUSE_RATINGS)
            if fuse != FUSE_RATINGS[0]:
                self.assertLessEqual(fuse, amps * 0.85)

class TestMinimumSafeSize(unittest.TestCase):
    def test_metric(self):
        # 10 A * 1.1 = 11 A; 0.5 mm2 carries 9 A, 0.75 mm2 carries 12 A
        sel = find_minimum_safe_size(10.0, COPPER, InstallationMethod.AIR, 30.0, GENERIC, METRIC_SIZES)
        self.assertEqual(sel.size.area_mm2, 0.75)
        self.assertAlmostEqual(sel.ampacity_a, 12.0)
        self.assertAlmostEqual(sel.required_a, 11.0)
        self.assertTrue(sel.is_safe)

    def test_awg(self):
        sel = find_minimum_safe_size(10.0, COPPER, InstallationMethod.AIR, 30.0, GENERIC, AWG_SIZES)
        self.assertEqual(sel.size.label, "18")

    def test_conduit_needs_larger_size(self):
        air = find_minimum_safe_size(40.0, COPPER, InstallationMethod.AIR, 30.0, GENERIC, METRIC_SIZES)
        conduit = find_minimum_safe_size(40.0, COPPER, InstallationMethod.CONDUIT, 30.0, GENERIC, METRIC_SIZES)
        self.assertGreater(conduit.size.area_mm2, air.size.area_mm2)

    def test_falls_back_to_largest(self):
        sel = find_minimum_safe_size(1000.0, COPPER, InstallationMethod.AIR, 30.0, GENERIC, METRIC_SIZES)
        self.assertEqual(sel.size, METRIC_SIZES[-1])
        self.assertFalse(sel.is_safe)
        self.assertAlmostEqual(sel.ampacity_a, 424.0)

class TestWireTemperature(unittest.TestCase):
    def test_safe(self):
        check = validate_wire_temperature(50.0, GENERIC)
        self.assertEqual(check.status, TemperatureStatus.SAFE)
        self.assertTrue(check.is_valid)
        self.assertEqual(check.message, "")

    def test_caution_close_to_rating(self):
        check = validate_wire_temperature(85.0, GENERIC)
        self.assertEqual(check.status, TemperatureStatus.CAUTION)
        self.assertTrue(check.is_valid)
        self.assertIn("CAUTION", check.message)

    def test_at_rating_is_still_caution(self):
        self.assertEqual(validate_wire_temperature(90.0, GENERIC).status, TemperatureStatus.CAUTION)

    def test_unsafe_above_rating(self):
        check = validate_wire_temperature(100.0, GENERIC)
        self.assertEqual(check.status, TemperatureStatus.UNSAFE)
        self.assertFalse(check.is_valid)
        self.assertIn("by 10.0°C", check.message)
        self.assertIn("Generic", check.message)

    def test_pvc_rating(self):
        pvc = WIRE_TYPES["pvc"]
        self.assertEqual(validate_wire_temperature(62.0, pvc).status, TemperatureStatus.SAFE)
        self.assertEqual(validate_wire_temperature(65.0, pvc).status, TemperatureStatus.CAUTION)
        self.assertEqual(validate_wire_temperature(71.0, pvc).status, TemperatureStatus.UNSAFE)

if __name__ == '__main__':
    unittest.main()

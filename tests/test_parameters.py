import unittest

import numpy as np

from detection import DetectionParameters


class ParametersTest(unittest.TestCase):
    def test_defaults(self):
        p = DetectionParameters()
        self.assertTrue(np.array_equal(p.lower(), [100, 50, 50]))
        self.assertTrue(np.array_equal(p.upper(), [130, 255, 255]))
        self.assertEqual((p.min_area, p.max_area), (40, 50000))
        self.assertEqual(p.speed_slider, 10)

    def test_delay_follows_speed(self):
        p = DetectionParameters()
        self.assertEqual(p.delay_ms(), 30)

        p.set_speed_slider(20)
        self.assertEqual(p.delay_ms(), 15)

        p.set_speed_slider(1)
        self.assertEqual(p.delay_ms(), 300)

    def test_delay_truncates_like_integer_division(self):
        p = DetectionParameters()
        p.set_speed_slider(7)
        self.assertEqual(p.delay_ms(), 42)

        for slider in range(1, 21):
            p.set_speed_slider(slider)
            self.assertEqual(p.delay_ms(), max(1, 300 // slider))

    def test_speed_slider_is_clamped(self):
        p = DetectionParameters()
        p.set_speed_slider(0)
        self.assertAlmostEqual(p.speed, 0.1)
        p.set_speed_slider(99)
        self.assertAlmostEqual(p.speed, 2.0)

    def test_area_bounds_are_inclusive(self):
        p = DetectionParameters(min_area=40, max_area=100)
        self.assertTrue(p.area_ok(40))
        self.assertTrue(p.area_ok(100))
        self.assertFalse(p.area_ok(39.9))
        self.assertFalse(p.area_ok(100.5))


if __name__ == "__main__":
    unittest.main()

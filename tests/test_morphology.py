import unittest

import cv2 as cv
import numpy as np

from processing.image_processor import CompositeProcessor
from processing.stages import (
    close_then_open,
    make_closing_stage,
    make_hsv_range_stage,
    make_opening_stage,
)
from detection import DetectionParameters


class MorphologyTest(unittest.TestCase):
    def test_close_then_open_is_stable(self):
        mask = np.zeros((200, 200), dtype=np.uint8)
        cv.circle(mask, (60, 60), 30, 255, -1)
        cv.rectangle(mask, (110, 120), (179, 169), 255, -1)

        once = close_then_open(mask)
        twice = close_then_open(once)

        self.assertTrue(np.array_equal(once, twice))

    def test_closing_bridges_thin_gap(self):
        mask = np.zeros((60, 100), dtype=np.uint8)
        mask[20:40, 10:49] = 255
        mask[20:40, 50:90] = 255  # one-pixel column gap at x=49

        closed = close_then_open(mask)

        n, _ = cv.connectedComponents(closed)
        self.assertEqual(n - 1, 1)

    def test_opening_removes_isolated_pixel(self):
        mask = np.zeros((50, 50), dtype=np.uint8)
        mask[25, 25] = 255

        self.assertEqual(int(close_then_open(mask).max()), 0)

    def test_stages_work_on_binary(self):
        frame = np.zeros((100, 100, 3), dtype=np.uint8)
        cv.circle(frame, (50, 50), 20, (255, 0, 0), -1)
        frame[5, 5] = (255, 0, 0)

        processor = CompositeProcessor([
            make_hsv_range_stage(DetectionParameters()),
            make_closing_stage(5, debug_key="closed_mask"),
            make_opening_stage(5, debug_key="cleaned_mask"),
        ])
        data = processor.process(frame)

        self.assertEqual(int(data.debug["mask"][5, 5]), 255)
        self.assertEqual(int(data.binary[5, 5]), 0)
        self.assertEqual(int(data.binary[50, 50]), 255)
        self.assertIn("closed_mask", data.debug)
        self.assertEqual(data.meta["cleaned_mask_ksize"], 5)


if __name__ == "__main__":
    unittest.main()

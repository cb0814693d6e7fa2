import unittest

import cv2 as cv
import numpy as np

from detection import Blob, DetectionParameters, annotate, detect
from detection.visualize import CENTER_COLOR


class AnnotateTest(unittest.TestCase):
    def setUp(self):
        self.frame = np.zeros((240, 320, 3), dtype=np.uint8)
        cv.circle(self.frame, (160, 120), 20, (255, 0, 0), -1)

    def test_returns_new_image(self):
        before = self.frame.copy()
        blobs = detect(self.frame, DetectionParameters())

        vis = annotate(self.frame, blobs)

        self.assertIsNot(vis, self.frame)
        self.assertTrue(np.array_equal(self.frame, before))
        self.assertFalse(np.array_equal(vis, self.frame))

    def test_center_marker(self):
        blobs = detect(self.frame, DetectionParameters())

        vis = annotate(self.frame, blobs)

        self.assertEqual(tuple(int(v) for v in vis[120, 160]), CENTER_COLOR)

    def test_no_blobs_is_plain_copy(self):
        vis = annotate(self.frame, [])

        self.assertIsNot(vis, self.frame)
        self.assertTrue(np.array_equal(vis, self.frame))

    def test_degenerate_blob_gets_outline_only(self):
        line = np.array([[[50, 50]], [[90, 50]]], dtype=np.int32)
        blob = Blob.from_contour(line)
        frame = np.zeros((100, 100, 3), dtype=np.uint8)

        vis = annotate(frame, [blob])

        red = np.all(vis == np.array(CENTER_COLOR, dtype=np.uint8), axis=2)
        self.assertFalse(red.any())
        self.assertGreater(int(vis[:, :, 1].max()), 0)


if __name__ == "__main__":
    unittest.main()

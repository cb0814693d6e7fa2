from __future__ import annotations
import cv2 as cv
import numpy as np
from typing import List, Dict

from detection.detection_strategy import Blob, StrategyOutput, DetectionStrategy
from detection.visualize import annotate, draw_count
from processing.image_processor import CompositeProcessor
from processing.stages import make_gaussian_blur_stage


def circle_to_blob(x: int, y: int, radius: int) -> Blob:
    outline = cv.ellipse2Poly((x, y), (radius, radius), 0, 0, 360, 5)
    return Blob.from_contour(outline.reshape(-1, 1, 2))


class HoughCircleStrategy(DetectionStrategy):
    """Shape-only detector: Hough gradient circles on blurred gray, colour is ignored."""

    name = "hough"

    def __init__(
        self,
        min_dist: float = 20,
        canny_threshold: float = 50,
        accumulator_threshold: float = 30,
        min_radius: int = 10,
        max_radius: int = 50,
        draw: bool = True,
        debug_outputs: bool = True,
    ):
        self.min_dist = float(min_dist)
        self.canny_threshold = float(canny_threshold)
        self.accumulator_threshold = float(accumulator_threshold)
        self.min_radius = int(min_radius)
        self.max_radius = int(max_radius)
        self.draw = draw
        self.debug_outputs = debug_outputs

        self.processor = CompositeProcessor([make_gaussian_blur_stage(9, 2.0)])

    def process_frame(self, frame_bgr: np.ndarray) -> StrategyOutput:
        data = self.processor.process(frame_bgr)

        circles = cv.HoughCircles(
            data.gray,
            cv.HOUGH_GRADIENT,
            1,
            self.min_dist,
            param1=self.canny_threshold,
            param2=self.accumulator_threshold,
            minRadius=self.min_radius,
            maxRadius=self.max_radius,
        )

        blobs: List[Blob] = []
        if circles is not None:
            for cx, cy, r in circles[0]:
                blobs.append(circle_to_blob(int(round(cx)), int(round(cy)), int(round(r))))

        vis = None
        if self.draw:
            vis = annotate(frame_bgr, blobs)
            draw_count(vis, len(blobs), label="Circles")

        debug: Dict[str, np.ndarray] = {}
        if self.debug_outputs:
            debug["Blurred"] = data.gray

        return StrategyOutput(vis=vis, debug=debug, detections=blobs, meta=data.meta)

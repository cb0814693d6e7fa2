from __future__ import annotations
import cv2 as cv
import numpy as np
from typing import List, Dict

from detection.detection_strategy import Blob, StrategyOutput, DetectionStrategy
from detection.visualize import annotate, draw_count
from processing.image_processor import CompositeProcessor
from processing.stages import make_otsu_threshold_stage


class GrayContourStrategy(DetectionStrategy):
    """Otsu threshold on gray, every external contour is a detection."""

    name = "contour"

    def __init__(self, draw: bool = True, debug_outputs: bool = True):
        self.draw = draw
        self.debug_outputs = debug_outputs
        self.processor = CompositeProcessor([make_otsu_threshold_stage()])

    def process_frame(self, frame_bgr: np.ndarray) -> StrategyOutput:
        data = self.processor.process(frame_bgr)

        contours, _ = cv.findContours(
            data.binary, cv.RETR_EXTERNAL, cv.CHAIN_APPROX_SIMPLE
        )
        blobs: List[Blob] = [Blob.from_contour(c) for c in contours]

        vis = None
        if self.draw:
            vis = annotate(frame_bgr, blobs)
            draw_count(vis, len(blobs), label="Contours")

        debug: Dict[str, np.ndarray] = {}
        if self.debug_outputs:
            debug["Otsu Binary"] = data.binary

        return StrategyOutput(vis=vis, debug=debug, detections=blobs, meta=data.meta)

from __future__ import annotations
import cv2 as cv
import numpy as np
from typing import List, Dict, Optional

from detection.detection_strategy import Blob, StrategyOutput, DetectionStrategy
from detection.parameters import DetectionParameters
from detection.visualize import annotate, draw_count
from processing.image_processor import CompositeProcessor, FrameData
from processing.stages import (
    make_hsv_range_stage,
    make_closing_stage,
    make_opening_stage,
)
from processing.stages.morphology import MORPH_KSIZE


class ColorCapStrategy(DetectionStrategy):
    """
    Colour-range cap detector.

    - HSV range mask from the current `params`
    - closing, then opening, with a 5x5 ellipse
    - external contours only, filtered on contour area

    Circularity and aspect ratio are available on every Blob but only
    reject candidates when `require_round` is set (off by default).
    """

    name = "color"

    def __init__(
        self,
        params: Optional[DetectionParameters] = None,
        require_round: bool = False,
        draw: bool = True,
        debug_outputs: bool = True,
    ):
        self.params = params if params is not None else DetectionParameters()
        self.require_round = require_round
        self.draw = draw
        self.debug_outputs = debug_outputs

        self.processor = CompositeProcessor([
            make_hsv_range_stage(self.params),
            make_closing_stage(MORPH_KSIZE, debug_key="closed_mask"),
            make_opening_stage(MORPH_KSIZE, debug_key="cleaned_mask"),
        ])

    def find_blobs(self, data: FrameData) -> List[Blob]:
        contours, _ = cv.findContours(
            data.binary, cv.RETR_EXTERNAL, cv.CHAIN_APPROX_SIMPLE
        )

        blobs: List[Blob] = []
        for contour in contours:
            blob = Blob.from_contour(contour)
            if not self.params.area_ok(blob.area):
                continue
            if self.require_round and not blob.is_roundish():
                continue
            blobs.append(blob)

        return blobs

    def process_frame(self, frame_bgr: np.ndarray) -> StrategyOutput:
        data = self.processor.process(frame_bgr)
        blobs = self.find_blobs(data)

        vis = None
        if self.draw:
            vis = annotate(frame_bgr, blobs)
            draw_count(vis, len(blobs))

        debug: Dict[str, np.ndarray] = {}
        if self.debug_outputs:
            debug["1. Blue Mask"] = data.debug["mask"]
            debug["2. Cleaned Mask"] = data.binary

        return StrategyOutput(vis=vis, debug=debug, detections=blobs, meta=data.meta)


def detect(frame_bgr: np.ndarray, params: DetectionParameters) -> List[Blob]:
    """Blue caps in `frame_bgr` under `params`, in contour discovery order."""
    strategy = ColorCapStrategy(params, draw=False, debug_outputs=False)
    return strategy.detect(frame_bgr)

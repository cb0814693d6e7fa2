from __future__ import annotations
from typing import TYPE_CHECKING

import cv2 as cv

from processing.image_processor import FrameData

if TYPE_CHECKING:
    from detection.parameters import DetectionParameters


def make_hsv_range_stage(params: "DetectionParameters"):
    """
    BGR -> HSV, then an inclusive per-channel range test.

    The bounds are read from `params` on every call, so slider changes
    apply to the next frame without rebuilding the pipeline. A lower bound
    above its upper bound gives an empty mask; this is not corrected.
    """

    def stage(data: FrameData) -> FrameData:
        hsv = cv.cvtColor(data.bgr, cv.COLOR_BGR2HSV)
        mask = cv.inRange(hsv, params.lower(), params.upper())

        data.binary = mask
        data.debug["mask"] = mask
        data.meta["hsv_lower"] = tuple(int(v) for v in params.lower())
        data.meta["hsv_upper"] = tuple(int(v) for v in params.upper())

        return data

    return stage

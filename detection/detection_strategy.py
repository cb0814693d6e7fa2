from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, Optional, List, Tuple
import math

import cv2 as cv
import numpy as np

BBox = Tuple[int, int, int, int]  # (x, y, w, h)


@dataclass
class Blob:
    contour: np.ndarray
    area: float
    perimeter: float
    bbox: BBox
    centroid: Optional[Tuple[float, float]]

    @classmethod
    def from_contour(cls, contour: np.ndarray) -> "Blob":
        area = float(cv.contourArea(contour))
        perimeter = float(cv.arcLength(contour, True))
        x, y, w, h = cv.boundingRect(contour)

        m = cv.moments(contour)
        if m["m00"] != 0:
            centroid = (m["m10"] / m["m00"], m["m01"] / m["m00"])
        else:
            centroid = None

        return cls(
            contour=contour,
            area=area,
            perimeter=perimeter,
            bbox=(int(x), int(y), int(w), int(h)),
            centroid=centroid,
        )

    @property
    def circularity(self) -> float:
        """4*pi*area / perimeter^2, 1.0 for a perfect circle."""
        if self.perimeter <= 0:
            return 0.0
        return 4.0 * math.pi * self.area / (self.perimeter * self.perimeter)

    @property
    def aspect_ratio(self) -> float:
        _, _, w, h = self.bbox
        if h <= 0:
            return 0.0
        return w / float(h)

    def is_roundish(self) -> bool:
        return self.circularity > 0.5 and 0.5 < self.aspect_ratio < 2.0


@dataclass
class StrategyOutput:
    vis: Optional[np.ndarray]
    debug: Dict[str, np.ndarray]
    detections: List[Blob]
    meta: Optional[Dict[str, Any]] = None


class DetectionStrategy:
    name = "base"

    def detect(self, frame_bgr: np.ndarray) -> List[Blob]:
        return self.process_frame(frame_bgr).detections

    def process_frame(self, frame_bgr: np.ndarray) -> StrategyOutput:
        raise NotImplementedError()

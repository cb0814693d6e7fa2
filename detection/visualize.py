from __future__ import annotations
from typing import Sequence

import cv2 as cv
import numpy as np

from detection.detection_strategy import Blob

OUTLINE_COLOR = (0, 255, 0)
CENTER_COLOR = (0, 0, 255)
LABEL_COLOR = (255, 255, 0)
BBOX_COLOR = (255, 0, 255)
COUNT_COLOR = (255, 255, 255)


def annotate(frame: np.ndarray, blobs: Sequence[Blob]) -> np.ndarray:
    """Draw outline, centre dot, 1-based index and bounding box per blob on a copy."""
    vis = frame.copy()

    for i, blob in enumerate(blobs, start=1):
        cv.drawContours(vis, [blob.contour], -1, OUTLINE_COLOR, 2)

        # zero-area outlines have no centroid
        if blob.centroid is None:
            continue

        center = (int(round(blob.centroid[0])), int(round(blob.centroid[1])))
        cv.circle(vis, center, 5, CENTER_COLOR, -1)
        cv.putText(
            vis,
            str(i),
            (center[0] + 10, center[1]),
            cv.FONT_HERSHEY_SIMPLEX,
            0.6,
            LABEL_COLOR,
            2,
        )

        x, y, w, h = blob.bbox
        cv.rectangle(vis, (x, y), (x + w - 1, y + h - 1), BBOX_COLOR, 1)

    return vis


def draw_count(vis: np.ndarray, count: int, label: str = "Caps") -> None:
    cv.putText(
        vis,
        f"{label}: {count}",
        (5, 20),
        cv.FONT_HERSHEY_SIMPLEX,
        0.6,
        COUNT_COLOR,
        2,
        cv.LINE_AA,
    )

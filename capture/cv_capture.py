import cv2 as cv
from typing import Optional, Tuple, Union
import numpy as np
from .capture_base import Capture
from .errors import SourceOpenError


def parse_source(source: str) -> Union[int, str]:
    """'0', '1', ... select a camera, anything else is a file path."""
    source = source.strip()
    if source.isdigit():
        return int(source)
    return source


class OpenCVCapture(Capture):
    def __init__(self, source: Union[int, str] = 0):
        self.source = source
        self.cap = cv.VideoCapture(source)

        if not self.cap.isOpened():
            self.cap.release()
            self.cap = None
            raise SourceOpenError(f"failed to open video: {source}")

    @classmethod
    def open(cls, source: str) -> "OpenCVCapture":
        return cls(parse_source(source))

    def is_opened(self) -> bool:
        return self.cap is not None and self.cap.isOpened()

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        if self.cap is None:
            return False, None

        ok, frame = self.cap.read()
        if not ok or frame is None:
            # End of file, or the camera stopped delivering frames
            return False, None

        return True, frame

    def restart(self) -> None:
        if self.cap is not None:
            self.cap.set(cv.CAP_PROP_POS_FRAMES, 0)

    @property
    def frame_size(self) -> Tuple[int, int]:
        """(width, height) as reported by the decoder."""
        if self.cap is None:
            return 0, 0
        w = int(self.cap.get(cv.CAP_PROP_FRAME_WIDTH))
        h = int(self.cap.get(cv.CAP_PROP_FRAME_HEIGHT))
        return w, h

    def release(self) -> None:
        if self.cap is not None:
            self.cap.release()
            self.cap = None

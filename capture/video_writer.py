from __future__ import annotations
from typing import Tuple
import cv2 as cv
import numpy as np

from .errors import FrameSizeError, OutputOpenError

OUTPUT_PATH = "output.mp4"
OUTPUT_FOURCC = "mp4v"
OUTPUT_FPS = 30.0


class VideoFileWriter:
    """
    Writes annotated frames to a video file.

    Frames must match `frame_size` (width, height); the encoder silently
    drops frames of another size, so a mismatch is raised here instead.
    """

    def __init__(
        self,
        path: str = OUTPUT_PATH,
        frame_size: Tuple[int, int] = (640, 480),
        fps: float = OUTPUT_FPS,
        fourcc: str = OUTPUT_FOURCC,
    ):
        self.path = path
        self.frame_size = (int(frame_size[0]), int(frame_size[1]))
        self.fps = float(fps)
        self.frames_written = 0

        self.writer = cv.VideoWriter(
            path, cv.VideoWriter_fourcc(*fourcc), self.fps, self.frame_size
        )
        if not self.writer.isOpened():
            self.writer.release()
            self.writer = None
            raise OutputOpenError(f"could not open output video: {path}")

    def write(self, frame: np.ndarray) -> None:
        if self.writer is None:
            raise OutputOpenError(f"output video already closed: {self.path}")

        h, w = frame.shape[:2]
        if (w, h) != self.frame_size:
            raise FrameSizeError(
                f"frame size {w}x{h} does not match output {self.frame_size[0]}x{self.frame_size[1]}"
            )

        self.writer.write(frame)
        self.frames_written += 1

    def release(self) -> None:
        if self.writer is not None:
            self.writer.release()
            self.writer = None

    def __enter__(self) -> "VideoFileWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

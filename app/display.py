from __future__ import annotations
from typing import Dict, Optional

import cv2 as cv
import numpy as np

WINDOW_NAME = "Bottle Detection"


class CvDisplay:
    """
    OpenCV window plus keyboard input.

    `wait_key` first lets the parameter panel (if any) render and run its
    callbacks, then blocks in cv.waitKey. Both happen on the calling thread.
    """

    def __init__(self, win: str = WINDOW_NAME, panel=None):
        self.win = win
        self.panel = panel
        self._created = False

    def attach_panel(self, panel) -> None:
        self.panel = panel

    def show(self, frame: np.ndarray) -> None:
        if not self._created:
            cv.namedWindow(self.win, cv.WINDOW_NORMAL)
            self._created = True
        cv.imshow(self.win, frame)

    def show_debug(self, images: Dict[str, np.ndarray]) -> None:
        for name, img in images.items():
            cv.imshow(name, img)

    def wait_key(self, delay_ms: int) -> int:
        if self.panel is not None:
            self.panel.poll()
        return cv.waitKey(max(1, int(delay_ms))) & 0xFF

    def paused_changed(self, paused: bool) -> None:
        if self.panel is not None:
            self.panel.set_paused(paused)

    def close(self) -> None:
        if self.panel is not None:
            self.panel.close()
            self.panel = None
        cv.destroyAllWindows()
        self._created = False

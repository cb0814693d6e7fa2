from __future__ import annotations
from dataclasses import dataclass
import numpy as np

# Slider ranges (OpenCV hue is 0..180)
HUE_MAX = 180
SAT_MAX = 255
VAL_MAX = 255
MIN_AREA_LIMIT = 10000
MAX_AREA_LIMIT = 100000

# Speed slider positions 1..20 map to 0.1x..2.0x, position 10 is 1.0x
SPEED_SLIDER_SCALE = 10
SPEED_SLIDER_MIN = 1
SPEED_SLIDER_MAX = 20

# ~33 fps at 1.0x
BASE_DELAY_MS = 30


@dataclass
class DetectionParameters:
    """
    Tunables shared between the control panel and the detector.

    Written by UI callbacks and read once per frame. Everything runs on one
    thread (panel callbacks fire inside the display poll), so no locking.
    """

    lower_hue: int = 100
    lower_sat: int = 50
    lower_val: int = 50
    upper_hue: int = 130
    upper_sat: int = 255
    upper_val: int = 255
    min_area: int = 40
    max_area: int = 50000
    speed: float = 1.0

    def lower(self) -> np.ndarray:
        return _hsv_bound(self.lower_hue, self.lower_sat, self.lower_val)

    def upper(self) -> np.ndarray:
        return _hsv_bound(self.upper_hue, self.upper_sat, self.upper_val)

    def area_ok(self, area: float) -> bool:
        return self.min_area <= area <= self.max_area

    @property
    def speed_slider(self) -> int:
        return int(round(self.speed * SPEED_SLIDER_SCALE))

    def set_speed_slider(self, position: int) -> None:
        position = max(SPEED_SLIDER_MIN, min(SPEED_SLIDER_MAX, int(position)))
        self.speed = position / SPEED_SLIDER_SCALE

    def delay_ms(self) -> int:
        """How long the display waits for input per tick (truncating, like 300 / slider)."""
        return max(1, BASE_DELAY_MS * SPEED_SLIDER_SCALE // max(SPEED_SLIDER_MIN, self.speed_slider))


def _hsv_bound(h: int, s: int, v: int) -> np.ndarray:
    return np.array(
        [
            np.clip(h, 0, HUE_MAX),
            np.clip(s, 0, SAT_MAX),
            np.clip(v, 0, VAL_MAX),
        ],
        dtype=np.uint8,
    )

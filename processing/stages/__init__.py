from .gaussian_blur import make_gaussian_blur_stage
from .otsu_threshold import make_otsu_threshold_stage
from .morphology import make_opening_stage, make_closing_stage, close_then_open
from .hsv_range import make_hsv_range_stage

__all__ = [
    "make_gaussian_blur_stage",
    "make_otsu_threshold_stage",
    "make_opening_stage",
    "make_closing_stage",
    "close_then_open",
    "make_hsv_range_stage",
]

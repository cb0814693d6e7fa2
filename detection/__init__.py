from .parameters import DetectionParameters
from .detection_strategy import Blob, StrategyOutput, DetectionStrategy
from .color_strategy import ColorCapStrategy, detect
from .hough_strategy import HoughCircleStrategy
from .contour_strategy import GrayContourStrategy
from .visualize import annotate


STRATEGIES = {
    ColorCapStrategy.name: ColorCapStrategy,
    HoughCircleStrategy.name: HoughCircleStrategy,
    GrayContourStrategy.name: GrayContourStrategy,
}


def make_strategy(name: str, params: DetectionParameters) -> DetectionStrategy:
    if name == ColorCapStrategy.name:
        return ColorCapStrategy(params)
    if name not in STRATEGIES:
        raise ValueError(f"unknown detection method: {name}")
    return STRATEGIES[name]()


__all__ = [
    "DetectionParameters",
    "Blob",
    "StrategyOutput",
    "DetectionStrategy",
    "ColorCapStrategy",
    "HoughCircleStrategy",
    "GrayContourStrategy",
    "STRATEGIES",
    "make_strategy",
    "detect",
    "annotate",
]

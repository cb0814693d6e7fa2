import cv2 as cv
from processing.image_processor import FrameData

MORPH_KSIZE = 5


def make_kernel(ksize: int = MORPH_KSIZE):
    if ksize < 1:
        ksize = 1
    if ksize % 2 == 0:
        ksize += 1
    return cv.getStructuringElement(cv.MORPH_ELLIPSE, (ksize, ksize))


def close_then_open(mask, kernel=None):
    """
    Closing bridges small gaps first, opening then removes specks.
    Reversing the order would erase small caps before they are joined.
    """
    if kernel is None:
        kernel = make_kernel()
    closed = cv.morphologyEx(mask, cv.MORPH_CLOSE, kernel)
    return cv.morphologyEx(closed, cv.MORPH_OPEN, kernel)


def _morph_stage(op: int, ksize: int, debug_key: str):
    kernel = make_kernel(ksize)

    def stage(data: FrameData) -> FrameData:
        img = data.binary if data.binary is not None else data.gray
        if img is None:
            return data

        out = cv.morphologyEx(img, op, kernel, iterations=1)

        if data.binary is not None:
            data.binary = out
        else:
            data.gray = out

        data.debug[debug_key] = out
        data.meta[debug_key + "_ksize"] = kernel.shape[0]

        return data

    return stage


def make_opening_stage(ksize: int = MORPH_KSIZE, debug_key: str = "morph_open"):
    """Erosion followed by dilation, on the binary mask when there is one."""
    return _morph_stage(cv.MORPH_OPEN, ksize, debug_key)


def make_closing_stage(ksize: int = MORPH_KSIZE, debug_key: str = "morph_close"):
    """Dilation followed by erosion, on the binary mask when there is one."""
    return _morph_stage(cv.MORPH_CLOSE, ksize, debug_key)

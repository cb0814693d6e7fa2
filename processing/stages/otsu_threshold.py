import cv2 as cv
from processing.image_processor import FrameData


def make_otsu_threshold_stage():
    """
    Otsu threshold on the gray image.

    The result lands in `data.binary`; `data.gray` is left as it was so
    the display can still show the original intensities.
    """
    def stage(data: FrameData) -> FrameData:
        gray = data.gray
        if gray is None:
            return data

        _, binary = cv.threshold(
            gray, 0, 255,
            cv.THRESH_BINARY + cv.THRESH_OTSU
        )

        data.binary = binary
        data.debug["binary"] = binary
        data.meta["threshold"] = "otsu"

        return data

    return stage

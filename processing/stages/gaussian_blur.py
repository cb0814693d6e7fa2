import cv2 as cv
from processing.image_processor import FrameData

def make_gaussian_blur_stage(ksize: int = 9, sigma: float = 2.0):
    if ksize % 2 == 0:
        ksize += 1

    def stage(data: FrameData) -> FrameData:
        gray = data.gray
        if gray is None:
            return data

        blurred = cv.GaussianBlur(gray, (ksize, ksize), sigma)
        data.debug["blurred"] = blurred
        data.gray = blurred
        data.meta["blur_ksize"] = ksize

        return data

    return stage

"""
Rotate - 绕中心旋转（保持画布尺寸）
"""

import cv2
import numpy as np

from ..context import ShapeLike
from .base import ImageOperation, SaveSink


class Rotate(ImageOperation):
    """绕图像中心逆时针旋转 degrees 度，超出画布部分被裁掉，空白处填 0"""

    def __init__(self, degrees: float = 0.0, save: SaveSink | None = None):
        super().__init__(save)
        self.degrees = float(degrees)

    def apply(self, image: np.ndarray) -> np.ndarray:
        h, w = image.shape[:2]
        if self.degrees % 360 == 0:
            return image.copy()
        center = ((w - 1) / 2.0, (h - 1) / 2.0)
        matrix = cv2.getRotationMatrix2D(center, self.degrees, 1.0)
        return cv2.warpAffine(
            image,
            matrix,
            (w, h),
            flags=cv2.INTER_LINEAR,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=0
        )

    def get_output_shape(self, input_shape: ShapeLike) -> ShapeLike:
        return input_shape

"""
Convert - 颜色模式转换
"""

import cv2
import numpy as np

from ..context import UNKNOWN_SHAPE, ColorMode, ImageShape, ShapeLike, is_known
from .base import ImageOperation, SaveSink


class Convert(ImageOperation):
    """
    将图像转换到目标颜色模式的通道数

    图像内部始终按 RGB 顺序存储，BGR 仅在转为缓冲区时生效，
    因此 RGB 与 BGR 目标在此处等价。
    """

    def __init__(self, color_mode: ColorMode | str, save: SaveSink | None = None):
        super().__init__(save)
        self.color_mode = ColorMode(color_mode)

    def apply(self, image: np.ndarray) -> np.ndarray:
        is_gray = image.ndim == 2

        if self.color_mode is ColorMode.GRAYSCALE:
            if is_gray:
                return image.copy()
            return cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)

        if is_gray:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
        return image.copy()

    def get_output_shape(self, input_shape: ShapeLike) -> ShapeLike:
        if not is_known(input_shape):
            return UNKNOWN_SHAPE
        return ImageShape(input_shape.width, input_shape.height, self.color_mode.channels)

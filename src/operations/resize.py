"""
Resize - 固定尺寸缩放
"""

from enum import Enum

import cv2
import numpy as np

from ..context import ImageShape, ShapeLike, is_known
from .base import ImageOperation, SaveSink


class InterpolationType(str, Enum):
    """插值方法"""
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
    AREA = "area"


_CV2_INTERPOLATION = {
    InterpolationType.NEAREST: cv2.INTER_NEAREST,
    InterpolationType.BILINEAR: cv2.INTER_LINEAR,
    InterpolationType.BICUBIC: cv2.INTER_CUBIC,
    InterpolationType.AREA: cv2.INTER_AREA,
}


class Resize(ImageOperation):
    """将图像缩放到固定宽高"""

    def __init__(
        self,
        output_width: int,
        output_height: int,
        interpolation: InterpolationType | str = InterpolationType.BILINEAR,
        save: SaveSink | None = None
    ):
        super().__init__(save)
        if output_width <= 0 or output_height <= 0:
            raise ValueError(
                f"Resize 目标尺寸必须为正，当前: {output_width}x{output_height}"
            )
        self.output_width = output_width
        self.output_height = output_height
        self.interpolation = InterpolationType(interpolation)

    def apply(self, image: np.ndarray) -> np.ndarray:
        return cv2.resize(
            image,
            (self.output_width, self.output_height),  # cv2.resize 使用 (width, height)
            interpolation=_CV2_INTERPOLATION[self.interpolation]
        )

    def get_output_shape(self, input_shape: ShapeLike) -> ShapeLike:
        # 通道数沿用输入；输入未知时留空，由 Preprocessing 按颜色模式补齐
        channels = input_shape.channels if is_known(input_shape) else None
        return ImageShape(self.output_width, self.output_height, channels)

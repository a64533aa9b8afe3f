"""
Crop - 按边距裁剪
"""

import numpy as np

from ..context import UNKNOWN_SHAPE, ImageShape, ShapeLike, is_known
from .base import ImageOperation, SaveSink


class Crop(ImageOperation):
    """从四边裁掉指定像素数"""

    def __init__(
        self,
        top: int = 0,
        bottom: int = 0,
        left: int = 0,
        right: int = 0,
        save: SaveSink | None = None
    ):
        super().__init__(save)
        if min(top, bottom, left, right) < 0:
            raise ValueError(
                f"Crop 边距不能为负: top={top}, bottom={bottom}, left={left}, right={right}"
            )
        self.top = top
        self.bottom = bottom
        self.left = left
        self.right = right

    def _check_size(self, width: int, height: int) -> tuple[int, int]:
        new_w = width - self.left - self.right
        new_h = height - self.top - self.bottom
        if new_w <= 0 or new_h <= 0:
            raise ValueError(
                f"Crop 边距超过图像尺寸: 图像 {width}x{height}, 裁剪后 {new_w}x{new_h}"
            )
        return new_w, new_h

    def apply(self, image: np.ndarray) -> np.ndarray:
        h, w = image.shape[:2]
        self._check_size(w, h)
        return image[self.top:h - self.bottom, self.left:w - self.right].copy()

    def get_output_shape(self, input_shape: ShapeLike) -> ShapeLike:
        if not is_known(input_shape):
            return UNKNOWN_SHAPE
        new_w, new_h = self._check_size(input_shape.width, input_shape.height)
        return ImageShape(new_w, new_h, input_shape.channels)

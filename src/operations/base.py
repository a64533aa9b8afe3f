"""
Operation 基类 - 图像阶段与张量阶段操作的通用接口
"""

from abc import ABC, abstractmethod
from typing import Protocol

import numpy as np

from ..context import ImageShape, ShapeLike


class SaveSink(Protocol):
    """中间图像保存接口（见 preprocess.saving.ImageSaver）"""

    def save(self, image_name: str, image: np.ndarray) -> object: ...


class ImageOperation(ABC):
    """图像阶段操作基类"""

    def __init__(self, save: SaveSink | None = None):
        """
        Args:
            save: 可选的保存接口，操作执行后保存当前图像
        """
        self.save = save

    @abstractmethod
    def apply(self, image: np.ndarray) -> np.ndarray:
        """
        变换图像

        Args:
            image: uint8 图像，(H,W,3) RGB 或 (H,W)

        Returns:
            变换后的图像
        """
        pass

    @abstractmethod
    def get_output_shape(self, input_shape: ShapeLike) -> ShapeLike:
        """
        根据输入形状计算输出形状

        Args:
            input_shape: 输入形状，可能为 UNKNOWN_SHAPE

        Returns:
            输出形状；无法确定时返回 UNKNOWN_SHAPE
        """
        pass

    def __repr__(self) -> str:
        params = ", ".join(
            f"{k}={v!r}" for k, v in vars(self).items() if not k.startswith("_")
        )
        return f"{type(self).__name__}({params})"


class TensorOperation(ABC):
    """张量阶段操作基类（作用于展平的 float32 缓冲区）"""

    @abstractmethod
    def apply(self, data: np.ndarray, shape: ImageShape) -> np.ndarray:
        """
        变换缓冲区

        Args:
            data: float32 一维缓冲区，HWC 排列
            shape: 图像阶段结束后的实际形状

        Returns:
            变换后的缓冲区（长度可以改变）
        """
        pass

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"

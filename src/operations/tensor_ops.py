"""
张量阶段操作

- Rescaling: 整体除以缩放系数
- Normalizing: 按通道减均值除标准差
- CustomTensorOperation: 包装任意函数
"""

from typing import Callable, Sequence

import numpy as np

from ..context import ImageShape
from .base import TensorOperation


class Rescaling(TensorOperation):
    """所有元素除以 scale（默认 255，将像素值映射到 [0,1]）"""

    def __init__(self, scale: float = 255.0):
        if scale == 0:
            raise ValueError("Rescaling scale 不能为 0")
        self.scale = float(scale)

    def apply(self, data: np.ndarray, shape: ImageShape) -> np.ndarray:
        return (data / self.scale).astype(np.float32)


class Normalizing(TensorOperation):
    """对 HWC 排列的缓冲区按通道做 (x - mean) / std"""

    def __init__(self, mean: Sequence[float], std: Sequence[float]):
        if len(mean) != len(std):
            raise ValueError(f"mean 与 std 长度不一致: {len(mean)} vs {len(std)}")
        if any(s == 0 for s in std):
            raise ValueError("std 不能包含 0")
        self.mean = tuple(float(m) for m in mean)
        self.std = tuple(float(s) for s in std)

    def apply(self, data: np.ndarray, shape: ImageShape) -> np.ndarray:
        channels = shape.channels
        if channels != len(self.mean):
            raise ValueError(
                f"Normalizing 需要 {len(self.mean)} 个通道，实际形状: {shape}"
            )
        mean = np.asarray(self.mean, dtype=np.float32)
        std = np.asarray(self.std, dtype=np.float32)
        # HWC 展平后通道是最内层维度
        out = (data.reshape(-1, channels) - mean) / std
        return out.reshape(-1).astype(np.float32)


class CustomTensorOperation(TensorOperation):
    """包装用户函数 fn(data, shape) -> data"""

    def __init__(self, fn: Callable[[np.ndarray, ImageShape], np.ndarray]):
        self.fn = fn

    def apply(self, data: np.ndarray, shape: ImageShape) -> np.ndarray:
        return np.asarray(self.fn(data, shape), dtype=np.float32)

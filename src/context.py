"""
Context - 预处理流水线的共享数据结构

形状推断与颜色模式贯穿整个 Preprocessing 流程。
"""

from dataclasses import dataclass, replace
from enum import Enum


class ColorMode(str, Enum):
    """颜色模式枚举，决定像素通道如何写入数值缓冲区"""
    RGB = "RGB"
    BGR = "BGR"
    GRAYSCALE = "GRAYSCALE"

    @property
    def channels(self) -> int:
        """该颜色模式对应的通道数"""
        return 1 if self is ColorMode.GRAYSCALE else 3


@dataclass(frozen=True)
class ImageShape:
    """图像形状（不可变）"""

    width: int
    height: int
    channels: int | None = None    # 规划阶段可能暂不确定

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"图像尺寸不能为负: {self.width}x{self.height}")
        if self.channels is not None and self.channels < 0:
            raise ValueError(f"通道数不能为负: {self.channels}")

    @property
    def num_elements(self) -> int:
        """展平后的元素个数 (W * H * C)"""
        return self.width * self.height * (self.channels or 0)

    def with_channels(self, channels: int | None) -> "ImageShape":
        return replace(self, channels=channels)


@dataclass(frozen=True)
class UnknownShape:
    """尚未确定的形状"""

    def __repr__(self) -> str:
        return "UNKNOWN_SHAPE"


UNKNOWN_SHAPE = UnknownShape()

# 形状推断使用的和类型：已知 ImageShape 或 UNKNOWN_SHAPE
ShapeLike = ImageShape | UnknownShape


def is_known(shape: ShapeLike) -> bool:
    """判断形状是否已确定"""
    return isinstance(shape, ImageShape)

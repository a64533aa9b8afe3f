"""
Operations 模块 - 预处理操作

职责：
- 图像阶段：Resize、Crop、Rotate、Convert（可附带保存接口）
- 张量阶段：Rescaling、Normalizing、自定义函数
- 每个图像操作提供输出形状推断
"""

from .base import ImageOperation, TensorOperation, SaveSink
from .resize import Resize, InterpolationType
from .crop import Crop
from .rotate import Rotate
from .convert import Convert
from .tensor_ops import Rescaling, Normalizing, CustomTensorOperation

__all__ = [
    "ImageOperation",
    "TensorOperation",
    "SaveSink",
    "Resize",
    "InterpolationType",
    "Crop",
    "Rotate",
    "Convert",
    "Rescaling",
    "Normalizing",
    "CustomTensorOperation",
]

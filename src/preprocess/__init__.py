"""
Preprocess 模块 - 图像预处理流水线

职责：
- 加载图像并按顺序执行图像阶段、张量阶段操作
- 在不读取图像的情况下推断最终形状
- 从 YAML 配置构建流水线，输出可转为 torch.Tensor
"""

from .errors import ShapeIndeterminateError, InvalidTargetError
from .loading import Loading, list_images, image_to_bytes, to_raw_vector, to_uint8, get_shape
from .saving import ImageSaver
from .preprocessing import Preprocessing, preprocess
from .builder import DEFAULT_CONFIG_PATH, load_config, build_preprocessing, load_preprocessing
from .tensor import to_tensor, resolve_device

__all__ = [
    "ShapeIndeterminateError",
    "InvalidTargetError",
    "Loading",
    "list_images",
    "image_to_bytes",
    "to_raw_vector",
    "to_uint8",
    "get_shape",
    "ImageSaver",
    "Preprocessing",
    "preprocess",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "build_preprocessing",
    "load_preprocessing",
    "to_tensor",
    "resolve_device",
]

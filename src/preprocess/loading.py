"""
Loading - 图像加载描述与编解码辅助函数

核心功能：
- Loading: 数据路径、颜色模式、可选的声明形状
- file_to_image: 使用 Pillow 解码为 uint8 ndarray
- image_to_bytes / to_raw_vector: 图像 -> 原始字节 -> float32 向量
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from ..context import ColorMode, ImageShape

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff")


@dataclass(frozen=True)
class Loading:
    """图像加载描述（创建后只读）"""

    path_to_data: Path | None = None
    color_mode: ColorMode = ColorMode.RGB
    image_shape: ImageShape | None = None    # 声明形状，仅用于形状规划

    def __post_init__(self):
        # 允许传入 str，统一为 Path
        if self.path_to_data is not None and not isinstance(self.path_to_data, Path):
            object.__setattr__(self, "path_to_data", Path(self.path_to_data))
        if not isinstance(self.color_mode, ColorMode):
            object.__setattr__(self, "color_mode", ColorMode(self.color_mode))

        # 通道数由颜色模式决定
        shape = self.image_shape
        if shape is not None:
            if shape.channels is None:
                object.__setattr__(
                    self, "image_shape", shape.with_channels(self.color_mode.channels)
                )
            elif shape.channels != self.color_mode.channels:
                raise ValueError(
                    f"声明形状的通道数 {shape.channels} 与颜色模式 "
                    f"{self.color_mode.value} ({self.color_mode.channels} 通道) 不一致"
                )

    def file_to_image(self, file: str | Path) -> np.ndarray:
        """
        读取图像文件并转换到当前颜色模式的通道数

        Args:
            file: 图像文件路径

        Returns:
            uint8 图像，(H,W,3) RGB 顺序或 (H,W) 单通道

        Raises:
            FileNotFoundError: 文件不存在
        """
        file = Path(file)
        if not file.is_file():
            raise FileNotFoundError(f"Could not read image: {file}")

        pil_mode = "L" if self.color_mode is ColorMode.GRAYSCALE else "RGB"
        with Image.open(file) as img:
            return np.array(img.convert(pil_mode))


def list_images(
    dir_path: str | Path,
    extensions: tuple[str, ...] = IMAGE_EXTENSIONS,
) -> list[Path]:
    """按文件名排序列出目录下的图像文件"""
    p = Path(dir_path)
    return [
        fp for fp in sorted(p.iterdir())
        if fp.is_file() and fp.suffix.lower() in extensions
    ]


def to_uint8(image: np.ndarray) -> np.ndarray:
    """
    统一为 uint8 图像

    浮点图像视为 [0,1] 范围并放大到 [0,255]，其他整数类型直接裁剪。
    """
    if image.dtype == np.uint8:
        return image
    if np.issubdtype(image.dtype, np.floating):
        return np.clip(image * 255, 0, 255).astype(np.uint8)
    return np.clip(image, 0, 255).astype(np.uint8)


def image_to_bytes(image: np.ndarray, color_mode: ColorMode) -> bytes:
    """
    将图像转换为 HWC 排列的原始字节

    颜色模式只决定三通道图像的通道顺序（BGR 时反转），
    单通道图像原样输出。

    Args:
        image: uint8 图像
        color_mode: 目标颜色模式

    Returns:
        原始字节，长度为 W * H * C
    """
    image = to_uint8(image)
    if image.ndim == 3 and image.shape[2] == 3 and color_mode is ColorMode.BGR:
        image = image[:, :, ::-1]
    return np.ascontiguousarray(image).tobytes()


def to_raw_vector(data: bytes) -> np.ndarray:
    """将原始字节按无符号数转换为 float32 向量"""
    return np.frombuffer(data, dtype=np.uint8).astype(np.float32)


def get_shape(image: np.ndarray) -> ImageShape:
    """从图像本身测量实际形状"""
    h, w = image.shape[:2]
    channels = image.shape[2] if image.ndim == 3 else 1
    return ImageShape(width=w, height=h, channels=channels)

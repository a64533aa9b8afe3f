"""
Preprocessing - 图像预处理流水线

核心功能：
- load: 描述如何获取原始图像（文件或目录）及其声明形状
- transform_image: 图像阶段操作，依次作用于图像，可保存中间结果
- transform_tensor: 张量阶段操作，作用于展平的 float32 缓冲区
- final_shape: 不读取图像，仅通过形状推断得到最终形状
"""

from pathlib import Path
from typing import Iterable

import numpy as np

from ..context import UNKNOWN_SHAPE, ImageShape, ShapeLike, is_known
from ..operations.base import ImageOperation, TensorOperation
from .errors import InvalidTargetError, ShapeIndeterminateError
from .loading import Loading, get_shape, image_to_bytes, to_raw_vector, to_uint8


class Preprocessing:
    """
    图像预处理流水线

    控制流：load -> 图像阶段操作 -> 转为数值缓冲区 -> 张量阶段操作。
    三个阶段在构造时确定，之后只读；未提供的阶段视为空序列。
    """

    def __init__(
        self,
        load: Loading | None = None,
        transform_image: Iterable[ImageOperation] = (),
        transform_tensor: Iterable[TensorOperation] = ()
    ):
        """
        初始化流水线

        Args:
            load: 加载描述，默认 RGB、无路径、无声明形状
            transform_image: 图像阶段操作（按顺序）
            transform_tensor: 张量阶段操作（按顺序）
        """
        self._load = load if load is not None else Loading()
        self._image_operations: tuple[ImageOperation, ...] = tuple(transform_image)
        self._tensor_operations: tuple[TensorOperation, ...] = tuple(transform_tensor)

    @property
    def load(self) -> Loading:
        return self._load

    @property
    def image_operations(self) -> tuple[ImageOperation, ...]:
        return self._image_operations

    @property
    def tensor_operations(self) -> tuple[TensorOperation, ...]:
        return self._tensor_operations

    @property
    def final_shape(self) -> ImageShape:
        """
        图像阶段结束后的形状（仅用于规划）

        Raises:
            ShapeIndeterminateError: 没有固定尺寸的操作且未声明形状
        """
        shape: ShapeLike = self._load.image_shape or UNKNOWN_SHAPE
        for operation in self._image_operations:
            shape = operation.get_output_shape(shape)

        if not is_known(shape):
            raise ShapeIndeterminateError()

        # 通道数由颜色模式决定
        if shape.channels is None:
            shape = shape.with_channels(self._load.color_mode.channels)
        return shape

    def run(self) -> tuple[np.ndarray, ImageShape]:
        """
        对 load.path_to_data 指向的单个文件执行流水线

        Returns:
            (float32 缓冲区, 实际形状)

        Raises:
            InvalidTargetError: 路径未设置、不存在或是目录
        """
        file = self._load.path_to_data
        if file is None or not file.is_file():
            raise InvalidTargetError(
                f"Run call is available for one file preprocessing only, got: {file}"
            )
        return self.handle_file(file)

    def __call__(self) -> tuple[np.ndarray, ImageShape]:
        return self.run()

    def handle_file(self, file: str | Path) -> tuple[np.ndarray, ImageShape]:
        """读取文件并执行流水线，中间结果以文件名保存"""
        file = Path(file)
        return self.handle_image(self._load.file_to_image(file), file.name)

    def handle_image(
        self,
        image: np.ndarray,
        image_name: str
    ) -> tuple[np.ndarray, ImageShape]:
        """
        对已加载的图像执行流水线

        Args:
            image: 图像，(H,W,3) RGB 或 (H,W)；非 uint8 输入先转为 uint8（浮点视为 [0,1]）
            image_name: 保存中间结果时使用的名字

        Returns:
            (float32 缓冲区, 实际形状)
        """
        image = to_uint8(image)
        for operation in self._image_operations:
            image = operation.apply(image)
            if operation.save is not None:
                operation.save.save(image_name, image)

        data = to_raw_vector(image_to_bytes(image, self._load.color_mode))
        shape = get_shape(image)

        for operation in self._tensor_operations:
            data = operation.apply(data, shape)

        return data, shape

    def __repr__(self) -> str:
        return (
            f"Preprocessing(load={self._load!r}, "
            f"transform_image={list(self._image_operations)!r}, "
            f"transform_tensor={list(self._tensor_operations)!r})"
        )


def preprocess(
    load: Loading | None = None,
    transform_image: Iterable[ImageOperation] = (),
    transform_tensor: Iterable[TensorOperation] = ()
) -> Preprocessing:
    """
    便捷函数：创建预处理流水线

    Example:
        pre = preprocess(
            load=Loading("digit.png", color_mode=ColorMode.GRAYSCALE),
            transform_image=[Resize(28, 28)],
            transform_tensor=[Rescaling(255.0)],
        )
        data, shape = pre()
    """
    return Preprocessing(load, transform_image, transform_tensor)

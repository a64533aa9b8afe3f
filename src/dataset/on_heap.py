"""
OnHeapDataset - 内存数据集

将目录中的所有图像通过 Preprocessing 处理后保存在内存中。
"""

from pathlib import Path
from typing import Callable

import numpy as np

from ..preprocess.errors import InvalidTargetError
from ..preprocess.loading import list_images
from ..preprocess.preprocessing import Preprocessing


class OnHeapDataset:
    """内存数据集：x 为 (N, D) float32，y 为 (N,) float32"""

    def __init__(self, x: np.ndarray, y: np.ndarray):
        if len(x) != len(y):
            raise ValueError(f"x 与 y 数量不一致: {len(x)} vs {len(y)}")
        self.x = x
        self.y = y

    @classmethod
    def create(
        cls,
        preprocessing: Preprocessing,
        label_generator: Callable[[Path], float]
    ) -> "OnHeapDataset":
        """
        对 load.path_to_data 目录下的每个图像执行流水线

        Args:
            preprocessing: 预处理流水线，load.path_to_data 必须是目录
            label_generator: 根据文件路径给出标签

        Returns:
            OnHeapDataset

        Raises:
            InvalidTargetError: path_to_data 不是目录
            ValueError: 各图像处理后的缓冲区长度不一致
        """
        dir_path = preprocessing.load.path_to_data
        if dir_path is None or not dir_path.is_dir():
            raise InvalidTargetError(
                f"Dataset creation requires a directory, got: {dir_path}"
            )

        files = list_images(dir_path)
        xs: list[np.ndarray] = []
        ys: list[float] = []
        for file in files:
            data, _ = preprocessing.handle_file(file)
            if xs and data.size != xs[0].size:
                raise ValueError(
                    f"{file.name} 处理后长度 {data.size} 与之前的 {xs[0].size} 不一致，"
                    "请使用固定尺寸的操作（如 Resize）"
                )
            xs.append(data)
            ys.append(float(label_generator(file)))

        print(f"[Dataset] Loaded {len(files)} images from {dir_path}")

        if not xs:
            return cls(np.zeros((0, 0), dtype=np.float32), np.zeros(0, dtype=np.float32))
        return cls(np.stack(xs).astype(np.float32), np.asarray(ys, dtype=np.float32))

    def __len__(self) -> int:
        return len(self.x)

    def get_x(self, index: int) -> np.ndarray:
        return self.x[index]

    def get_y(self, index: int) -> float:
        return float(self.y[index])

    def shuffle(self, seed: int | None = None) -> "OnHeapDataset":
        """返回打乱顺序后的新数据集"""
        order = np.random.default_rng(seed).permutation(len(self))
        return OnHeapDataset(self.x[order], self.y[order])

    def split(self, train_ratio: float) -> tuple["OnHeapDataset", "OnHeapDataset"]:
        """
        按比例切分为 (train, test)

        Args:
            train_ratio: 训练集比例，(0, 1)
        """
        if not 0.0 < train_ratio < 1.0:
            raise ValueError(f"train_ratio 必须在 (0, 1) 之间，当前: {train_ratio}")
        n_train = int(round(len(self) * train_ratio))
        return (
            OnHeapDataset(self.x[:n_train], self.y[:n_train]),
            OnHeapDataset(self.x[n_train:], self.y[n_train:]),
        )

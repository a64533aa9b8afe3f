"""
缓冲区 -> torch.Tensor 转换
"""

import numpy as np
import torch

from ..context import ImageShape


def resolve_device(device: str) -> str:
    """
    解析设备配置

    Args:
        device: "auto" | "cuda" | "cpu"

    Returns:
        实际使用的设备名
    """
    if device == "auto":
        return "cuda" if torch.cuda.is_available() else "cpu"
    return device


def to_tensor(
    data: np.ndarray,
    shape: ImageShape,
    device: str = "auto",
    channels_first: bool = True,
    batch: bool = True
) -> torch.Tensor:
    """
    将 HWC 展平缓冲区转换为张量

    Args:
        data: float32 缓冲区，长度必须等于 shape.num_elements
        shape: 实际形状
        device: "auto" | "cuda" | "cpu"
        channels_first: True 输出 (C,H,W)，False 输出 (H,W,C)
        batch: 是否添加 batch 维

    Returns:
        float32 张量，如 (1,C,H,W)

    Raises:
        ValueError: 缓冲区长度与形状不匹配
    """
    if data.size != shape.num_elements:
        raise ValueError(
            f"缓冲区长度 {data.size} 与形状 {shape} 不匹配"
        )

    array = np.asarray(data, dtype=np.float32).reshape(
        shape.height, shape.width, shape.channels
    )
    if channels_first:
        array = array.transpose(2, 0, 1)

    tensor = torch.from_numpy(np.ascontiguousarray(array))
    if batch:
        tensor = tensor.unsqueeze(0)
    return tensor.to(resolve_device(device))

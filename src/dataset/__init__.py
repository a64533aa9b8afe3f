"""
Dataset 模块 - 批量处理目录中的图像
"""

from .on_heap import OnHeapDataset

__all__ = ["OnHeapDataset"]

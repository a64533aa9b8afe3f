"""
ImageSaver - 中间结果保存
"""

from pathlib import Path

import numpy as np
from PIL import Image


class ImageSaver:
    """将图像以 PNG 格式保存到指定目录"""

    def __init__(self, dir_path: str | Path):
        self.dir_path = Path(dir_path)

    def save(self, image_name: str, image: np.ndarray) -> Path:
        """
        保存图像

        Args:
            image_name: 图像名（通常是源文件名）
            image: uint8 图像，(H,W,3) RGB 或 (H,W)

        Returns:
            写入的文件路径
        """
        self.dir_path.mkdir(parents=True, exist_ok=True)
        # 保留完整文件名，避免 a.png 与 a.bmp 互相覆盖
        file_name = image_name if image_name.lower().endswith(".png") else f"{image_name}.png"
        out_path = self.dir_path / Path(file_name).name
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(out_path)
        print(f"[ImageSaver] Saved {out_path}")
        return out_path

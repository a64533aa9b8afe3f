#!/usr/bin/env python
"""
Preprocessing Demo - 命令行演示脚本

使用方法:
    python examples/demo.py [input_image] [--config CONFIG] [--model MODEL.onnx]

示例:
    python examples/demo.py examples/digit.png --model cache/lenet.onnx
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import numpy as np
from PIL import Image

from src.preprocess import load_config, build_preprocessing, to_tensor


def create_sample_image(size: int = 64) -> np.ndarray:
    """
    创建一个示例图像（黑底白色竖线，类似手写数字 1）

    Returns:
        uint8 灰度图像
    """
    img = np.zeros((size, size), dtype=np.uint8)
    left = size // 2 - size // 16
    right = size // 2 + size // 16
    img[size // 8: size - size // 8, left:right] = 255
    return img


def run_onnx(model_path: str, batch: np.ndarray) -> np.ndarray:
    """使用 onnxruntime 推理，返回第一个输出"""
    import onnxruntime as ort

    session = ort.InferenceSession(model_path, providers=["CPUExecutionProvider"])
    input_name = session.get_inputs()[0].name
    print(f"[Demo] Model input: {input_name} {session.get_inputs()[0].shape}")
    return session.run(None, {input_name: batch})[0]


def main():
    parser = argparse.ArgumentParser(description="Preprocessing Demo")
    parser.add_argument("input", nargs="?", help="输入图像路径")
    parser.add_argument("--config", default=None, help="配置文件路径")
    parser.add_argument("--model", default=None, help="本地 ONNX 模型路径（可选）")
    parser.add_argument("--channels-last", action="store_true", help="以 NHWC 排列送入模型")

    args = parser.parse_args()

    # 创建示例图像
    if args.input is None:
        print("创建示例图像...")
        sample_path = project_root / "examples" / "sample_digit.png"
        Image.fromarray(create_sample_image()).save(sample_path)
        print(f"示例图像已保存到: {sample_path}")
        input_path = sample_path
    else:
        input_path = Path(args.input)

    cfg = load_config(args.config, overrides={"load": {"path_to_data": str(input_path)}})
    pre = build_preprocessing(cfg)

    print(f"规划形状: {pre.final_shape}")
    data, shape = pre()
    print(f"实际形状: {shape}, 缓冲区长度: {data.size}")

    # 使用 getattr 访问 'global' 因为它是 Python 保留字
    device = getattr(cfg, "global").device
    tensor = to_tensor(data, shape, device=device, channels_first=not args.channels_last)
    print(f"张量: {tuple(tensor.shape)} on {tensor.device}")

    if args.model:
        logits = run_onnx(args.model, tensor.cpu().numpy())
        print(f"预测标签: {int(np.argmax(logits))}")

    print("完成!")


if __name__ == "__main__":
    main()

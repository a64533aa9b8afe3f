"""
从 YAML 配置构建 Preprocessing
"""

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from ..context import ColorMode, ImageShape
from ..operations import (
    Convert,
    Crop,
    ImageOperation,
    Normalizing,
    Rescaling,
    Resize,
    Rotate,
    TensorOperation,
)
from .loading import Loading
from .preprocessing import Preprocessing
from .saving import ImageSaver

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None
) -> DictConfig:
    """
    加载配置文件

    Args:
        config_path: 配置文件路径，默认使用 src/config/default.yaml（随包安装）
        overrides: 覆盖项，与文件内容合并

    Returns:
        DictConfig
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    cfg = OmegaConf.load(config_path)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.create(overrides))
    return cfg


def _build_loading(load_cfg: DictConfig | None) -> Loading:
    if load_cfg is None:
        return Loading()

    image_shape = None
    shape_cfg = load_cfg.get("image_shape")
    if shape_cfg is not None:
        image_shape = ImageShape(
            width=shape_cfg.width,
            height=shape_cfg.height,
            channels=shape_cfg.get("channels"),
        )

    return Loading(
        path_to_data=load_cfg.get("path_to_data"),
        color_mode=ColorMode(load_cfg.get("color_mode", "RGB")),
        image_shape=image_shape,
    )


def _build_image_operation(op_cfg: DictConfig) -> ImageOperation:
    op_type = op_cfg.get("type")
    save_dir = op_cfg.get("save_dir")
    save = ImageSaver(save_dir) if save_dir else None

    if op_type == "resize":
        return Resize(
            output_width=op_cfg.width,
            output_height=op_cfg.height,
            interpolation=op_cfg.get("interpolation", "bilinear"),
            save=save,
        )
    elif op_type == "crop":
        return Crop(
            top=op_cfg.get("top", 0),
            bottom=op_cfg.get("bottom", 0),
            left=op_cfg.get("left", 0),
            right=op_cfg.get("right", 0),
            save=save,
        )
    elif op_type == "rotate":
        return Rotate(degrees=op_cfg.get("degrees", 0.0), save=save)
    elif op_type == "convert":
        return Convert(color_mode=op_cfg.color_mode, save=save)
    else:
        raise ValueError(f"Unknown image operation: {OmegaConf.to_container(op_cfg)}")


def _build_tensor_operation(op_cfg: DictConfig) -> TensorOperation:
    op_type = op_cfg.get("type")

    if op_type == "rescale":
        return Rescaling(scale=op_cfg.get("scale", 255.0))
    elif op_type == "normalize":
        return Normalizing(mean=list(op_cfg.mean), std=list(op_cfg.std))
    else:
        raise ValueError(f"Unknown tensor operation: {OmegaConf.to_container(op_cfg)}")


def build_preprocessing(cfg: DictConfig) -> Preprocessing:
    """
    根据配置对象构建流水线

    Args:
        cfg: 配置对象，可包含 load、transform_image、transform_tensor

    Returns:
        Preprocessing 实例
    """
    image_ops = [_build_image_operation(c) for c in cfg.get("transform_image") or []]
    tensor_ops = [_build_tensor_operation(c) for c in cfg.get("transform_tensor") or []]

    pre = Preprocessing(
        load=_build_loading(cfg.get("load")),
        transform_image=image_ops,
        transform_tensor=tensor_ops,
    )
    print(
        f"[Preprocessing] Built pipeline: {len(image_ops)} image ops, "
        f"{len(tensor_ops)} tensor ops"
    )
    return pre


def load_preprocessing(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None
) -> Preprocessing:
    """
    便捷函数：加载配置并构建流水线

    Args:
        config_path: 配置文件路径
        overrides: 覆盖项

    Returns:
        Preprocessing 实例
    """
    return build_preprocessing(load_config(config_path, overrides))

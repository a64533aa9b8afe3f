"""
Loading / ImageSaver / to_tensor 单元测试
"""

import sys
from pathlib import Path

# 添加 src 到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
import torch
from PIL import Image

from src.context import UNKNOWN_SHAPE, ColorMode, ImageShape, is_known
from src.preprocess import (
    ImageSaver,
    Loading,
    get_shape,
    image_to_bytes,
    list_images,
    resolve_device,
    to_raw_vector,
    to_tensor,
    to_uint8,
)


@pytest.fixture
def rgb_file(tmp_path):
    """写入磁盘的 RGB 图像 (10x20)"""
    img = np.random.randint(0, 256, (10, 20, 3), dtype=np.uint8)
    path = tmp_path / "rgb.png"
    Image.fromarray(img).save(path)
    return path, img


class TestLoading:
    """Loading 测试"""

    def test_path_str_to_path(self):
        assert Loading("a/b.png").path_to_data == Path("a/b.png")

    def test_color_mode_from_string(self):
        assert Loading(color_mode="GRAYSCALE").color_mode is ColorMode.GRAYSCALE

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Loading().color_mode = ColorMode.BGR

    def test_declared_shape_fills_channels(self):
        """测试声明形状未给通道数时按颜色模式补齐"""
        load = Loading(color_mode=ColorMode.GRAYSCALE, image_shape=ImageShape(64, 48))
        assert load.image_shape == ImageShape(64, 48, 1)

    def test_declared_shape_channel_mismatch(self):
        """测试声明形状通道数与颜色模式不一致时报错"""
        with pytest.raises(ValueError, match="不一致"):
            Loading(color_mode=ColorMode.GRAYSCALE, image_shape=ImageShape(64, 48, 3))

    def test_file_to_image_rgb(self, rgb_file):
        path, img = rgb_file
        loaded = Loading(color_mode=ColorMode.RGB).file_to_image(path)
        np.testing.assert_array_equal(loaded, img)

    def test_file_to_image_grayscale(self, rgb_file):
        path, _ = rgb_file
        loaded = Loading(color_mode=ColorMode.GRAYSCALE).file_to_image(path)
        assert loaded.shape == (10, 20)
        assert loaded.dtype == np.uint8

    def test_file_to_image_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Loading().file_to_image(tmp_path / "missing.png")

    def test_list_images(self, tmp_path):
        for name in ["b.png", "a.JPG", "c.txt"]:
            (tmp_path / name).write_bytes(b"")
        assert [p.name for p in list_images(tmp_path)] == ["a.JPG", "b.png"]


class TestCodec:
    """字节转换与形状测量测试"""

    def test_image_to_bytes_rgb(self):
        img = np.array([[[1, 2, 3], [4, 5, 6]]], dtype=np.uint8)
        assert image_to_bytes(img, ColorMode.RGB) == bytes([1, 2, 3, 4, 5, 6])

    def test_image_to_bytes_gray_ignores_bgr(self):
        img = np.array([[7, 8]], dtype=np.uint8)
        assert image_to_bytes(img, ColorMode.BGR) == bytes([7, 8])

    def test_to_raw_vector_unsigned(self):
        vec = to_raw_vector(bytes([0, 128, 255]))
        assert vec.dtype == np.float32
        np.testing.assert_array_equal(vec, [0.0, 128.0, 255.0])

    def test_to_uint8_float_scaled(self):
        """测试浮点图像按 [0,1] 放大到 [0,255]"""
        img = np.array([[0.0, 0.5, 1.0, 1.5]], dtype=np.float32)
        np.testing.assert_array_equal(to_uint8(img), [[0, 127, 255, 255]])

    def test_to_uint8_int_clipped(self):
        img = np.array([[-5, 100, 300]], dtype=np.int32)
        result = to_uint8(img)
        assert result.dtype == np.uint8
        np.testing.assert_array_equal(result, [[0, 100, 255]])

    def test_image_to_bytes_float(self):
        img = np.array([[1.0, 0.0]], dtype=np.float64)
        assert image_to_bytes(img, ColorMode.GRAYSCALE) == bytes([255, 0])

    def test_get_shape(self):
        assert get_shape(np.zeros((4, 6, 3), dtype=np.uint8)) == ImageShape(6, 4, 3)
        assert get_shape(np.zeros((4, 6), dtype=np.uint8)) == ImageShape(6, 4, 1)


class TestShapeTypes:
    """形状类型测试"""

    def test_unknown_is_not_known(self):
        assert not is_known(UNKNOWN_SHAPE)
        assert is_known(ImageShape(1, 1, 1))

    def test_negative_dimensions(self):
        with pytest.raises(ValueError):
            ImageShape(-1, 2, 3)

    def test_num_elements(self):
        assert ImageShape(28, 28, 1).num_elements == 784

    def test_color_mode_channels(self):
        assert ColorMode.GRAYSCALE.channels == 1
        assert ColorMode.RGB.channels == 3
        assert ColorMode.BGR.channels == 3


class TestImageSaver:
    """ImageSaver 测试"""

    def test_save(self, tmp_path):
        img = np.random.randint(0, 256, (5, 7, 3), dtype=np.uint8)
        saver = ImageSaver(tmp_path / "out")
        out_path = saver.save("photo.jpg", img)

        assert out_path == tmp_path / "out" / "photo.jpg.png"
        np.testing.assert_array_equal(np.array(Image.open(out_path)), img)

    def test_save_grayscale(self, tmp_path):
        img = np.random.randint(0, 256, (5, 7), dtype=np.uint8)
        out_path = ImageSaver(tmp_path).save("g.png", img)
        np.testing.assert_array_equal(np.array(Image.open(out_path)), img)


class TestToTensor:
    """to_tensor 测试"""

    def test_channels_first(self):
        shape = ImageShape(4, 2, 3)
        data = np.arange(24, dtype=np.float32)
        tensor = to_tensor(data, shape, device="cpu")

        assert tuple(tensor.shape) == (1, 3, 2, 4)
        assert tensor.dtype == torch.float32
        # 第 0 通道取 HWC 中每隔 3 个元素
        np.testing.assert_array_equal(tensor[0, 0].numpy().reshape(-1), data[::3])

    def test_channels_last_no_batch(self):
        shape = ImageShape(4, 2, 3)
        tensor = to_tensor(
            np.zeros(24, dtype=np.float32), shape,
            device="cpu", channels_first=False, batch=False
        )
        assert tuple(tensor.shape) == (2, 4, 3)

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="不匹配"):
            to_tensor(np.zeros(5, dtype=np.float32), ImageShape(2, 2, 1), device="cpu")

    def test_resolve_device(self):
        assert resolve_device("cpu") == "cpu"
        expected = "cuda" if torch.cuda.is_available() else "cpu"
        assert resolve_device("auto") == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

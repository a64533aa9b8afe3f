"""
Preprocessing 错误类型
"""


class ShapeIndeterminateError(RuntimeError):
    """最终形状无法确定"""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Final image shape is unclear. An operation with fixed output size "
               "(such as Resize) should be used, or load.image_shape with width, "
               "height and channels should be declared."
        )


class InvalidTargetError(ValueError):
    """加载目标与调用方式不匹配（例如对目录调用单文件入口）"""

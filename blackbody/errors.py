class BlackbodyError(Exception):
    """黑体计算相关错误的基类"""


class InvalidTemperatureError(BlackbodyError, ValueError):
    """温度输入非数字、非有限值或超出允许范围"""

    def __init__(self, value, reason="temperature must be a finite positive number"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid temperature {value!r}: {reason}")


class UnknownPresetError(BlackbodyError, KeyError):
    """预设名称不在目录中（精确匹配）"""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown preset: {self.name!r}"

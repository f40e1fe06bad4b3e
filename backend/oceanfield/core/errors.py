"""
异常定义。
"""


class OceanFieldError(ValueError):
    """海面模型相关错误的基类。"""


class ConfigurationError(OceanFieldError):
    """参数违反约束时抛出，一次性列出所有违反项。"""

    def __init__(self, violations):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))

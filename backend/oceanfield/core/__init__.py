"""
核心模块：配置与异常。
"""

from oceanfield.core.config import Settings, settings
from oceanfield.core.errors import ConfigurationError, OceanFieldError

__all__ = [
    "Settings",
    "settings",
    "OceanFieldError",
    "ConfigurationError",
]

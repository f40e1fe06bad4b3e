"""
通用工具函数模块。
"""

from oceanfield.utils.coordinate import create_grid, resolve_sample_position
from oceanfield.utils.numerical import (
    clamp,
    fract,
    interp,
    lerp,
    ramp_above,
    ramp_below,
)

__all__ = [
    "resolve_sample_position",
    "create_grid",
    "lerp",
    "clamp",
    "fract",
    "interp",
    "ramp_above",
    "ramp_below",
]

"""
内部数据模型模块。

包含波浪库、相位项、海面求值结果等内部数据结构。
"""

from oceanfield.models.field import PhaseTerms, SurfaceField
from oceanfield.models.wave import ElementaryWave, WaveBank

__all__ = [
    "ElementaryWave",
    "WaveBank",
    "PhaseTerms",
    "SurfaceField",
]

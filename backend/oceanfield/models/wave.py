"""
波浪库模型定义。
"""

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from oceanfield.schemas.base import WaveBankConfig


@dataclass(frozen=True)
class ElementaryWave:
    """单个基本波。"""

    index: int  # 全局索引
    octave: int  # 所属八度
    local_index: int  # 八度内索引
    wavelength: float  # 波长
    amplitude: float  # 振幅
    direction: Tuple[float, float, float]  # 传播方向（单位向量，z=0）
    angular_frequency: float  # 角频率 w = 2 / 波长
    steepness: float  # 陡度系数 q
    phase_speed: float  # 相速度 phi


def _readonly(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class WaveBank:
    """
    波浪库。

    构建后不可变，可在多个线程的采样求值之间共享。
    数组视图按全局索引排列，供向量化求值使用。
    """

    config: WaveBankConfig  # 生成参数
    waves: Tuple[ElementaryWave, ...]  # 波成分
    wavelengths: np.ndarray = field(init=False, repr=False, compare=False)
    amplitudes: np.ndarray = field(init=False, repr=False, compare=False)
    directions: np.ndarray = field(init=False, repr=False, compare=False)
    angular_frequencies: np.ndarray = field(init=False, repr=False, compare=False)
    steepnesses: np.ndarray = field(init=False, repr=False, compare=False)
    phase_speeds: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        waves = self.waves
        object.__setattr__(self, "wavelengths", _readonly([w.wavelength for w in waves]))
        object.__setattr__(self, "amplitudes", _readonly([w.amplitude for w in waves]))
        object.__setattr__(
            self,
            "directions",
            _readonly([w.direction for w in waves]).reshape(len(waves), 3),
        )
        object.__setattr__(
            self,
            "angular_frequencies",
            _readonly([w.angular_frequency for w in waves]),
        )
        object.__setattr__(self, "steepnesses", _readonly([w.steepness for w in waves]))
        object.__setattr__(self, "phase_speeds", _readonly([w.phase_speed for w in waves]))

    def __len__(self) -> int:
        return len(self.waves)

    def __iter__(self):
        return iter(self.waves)

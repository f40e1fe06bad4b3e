"""
海面求值结果模型定义。

这些结构只在一次求值内有效，不回写到波浪库。
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PhaseTerms:
    """各波成分在采样点处的相位三角值，shape: (..., n_waves)。"""

    cos: np.ndarray
    sin: np.ndarray


@dataclass(frozen=True)
class SurfaceField:
    """
    海面求值结果。

    批量形状记为 S（单点求值时 S 为 ()），向量字段 shape 为 (S, 3)，
    标量字段 shape 为 S。
    """

    displacement: np.ndarray  # 位移向量
    tangent: np.ndarray  # 对 y 的偏导
    bitangent: np.ndarray  # 对 x 的偏导
    normal: np.ndarray  # 单位法线
    jacobian_xx: np.ndarray
    jacobian_xy: np.ndarray
    jacobian_yy: np.ndarray
    eigen_min: np.ndarray  # 较小特征值
    eigen_plus: np.ndarray  # 较大特征值
    determinant: np.ndarray  # J = eigen_min * eigen_plus
    sea_level_mask: np.ndarray
    break_mask: np.ndarray
    foam_mask: np.ndarray
    foam_mask_two: np.ndarray

    @property
    def height(self) -> np.ndarray:
        """竖直位移。"""
        return self.displacement[..., 2]

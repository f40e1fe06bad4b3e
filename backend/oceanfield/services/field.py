"""
海面求值服务。

给定波浪库、采样位置与时间，计算 Gerstner 叠加位移、切线/副切线/法线，
以及基于雅可比行列式的破碎与泡沫分类。

叠加公式（w = 2 / 波长）：
    phase = w * dot(D, p) + phi * t
    P.x = Σ q A D.x cos(phase)
    P.y = Σ q A D.y cos(phase)
    P.z = Σ A sin(phase)

所有函数均为纯函数，不修改波浪库，可并发调用。
"""

from typing import Optional, Tuple

import numpy as np

from oceanfield.models.field import PhaseTerms, SurfaceField
from oceanfield.models.wave import WaveBank
from oceanfield.schemas.base import SurfaceConfig
from oceanfield.utils.numerical import ramp_above, ramp_below


def compute_phase_terms(bank: WaveBank, positions, time: float) -> PhaseTerms:
    """
    计算各波成分的相位三角值。

    Args:
        bank: 波浪库
        positions: 采样位置，shape: (..., 2)
        time: 时间（秒）

    Returns:
        相位项，cos/sin 的 shape 为 (..., n_waves)
    """
    positions = np.asarray(positions, dtype=np.float64)
    # dot(D, p)，方向的 z 分量为 0
    projection = positions @ bank.directions[:, :2].T
    phase = bank.angular_frequencies * projection + bank.phase_speeds * time
    return PhaseTerms(cos=np.cos(phase), sin=np.sin(phase))


def compute_displacement(bank: WaveBank, terms: PhaseTerms) -> np.ndarray:
    """
    计算位移向量。

    Returns:
        位移，shape: (..., 3)
    """
    horizontal = bank.steepnesses * bank.amplitudes * terms.cos
    dx = np.sum(horizontal * bank.directions[:, 0], axis=-1)
    dy = np.sum(horizontal * bank.directions[:, 1], axis=-1)
    dz = np.sum(bank.amplitudes * terms.sin, axis=-1)
    return np.stack([dx, dy, dz], axis=-1)


def compute_derivatives(
    bank: WaveBank, terms: PhaseTerms
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    计算切线、副切线与法线。

    对 position + displacement 求偏导（含恒等项）：
        副切线 ∂/∂x = (1 - Σ qwA Dx² S, -Σ qwA DxDy S, Σ wA Dx C)
        切线   ∂/∂y = (-Σ qwA DxDy S, 1 - Σ qwA Dy² S, Σ wA Dy C)
        法线 = normalize(副切线 × 切线)

    Returns:
        (tangent, bitangent, normal)，shape 均为 (..., 3)
    """
    dir_x = bank.directions[:, 0]
    dir_y = bank.directions[:, 1]
    wa = bank.angular_frequencies * bank.amplitudes
    qwa_sin = bank.steepnesses * wa * terms.sin
    wa_cos = wa * terms.cos

    sum_xx = np.sum(qwa_sin * dir_x * dir_x, axis=-1)
    sum_xy = np.sum(qwa_sin * dir_x * dir_y, axis=-1)
    sum_yy = np.sum(qwa_sin * dir_y * dir_y, axis=-1)
    slope_x = np.sum(wa_cos * dir_x, axis=-1)
    slope_y = np.sum(wa_cos * dir_y, axis=-1)

    bitangent = np.stack([1.0 - sum_xx, -sum_xy, slope_x], axis=-1)
    tangent = np.stack([-sum_xy, 1.0 - sum_yy, slope_y], axis=-1)

    normal = np.cross(bitangent, tangent)
    length = np.linalg.norm(normal, axis=-1, keepdims=True)
    # 完全折叠处法线退化，保持竖直向上
    up = np.broadcast_to(np.array([0.0, 0.0, 1.0]), normal.shape)
    safe_length = np.where(length > 0, length, 1.0)
    normal = np.where(length > 0, normal / safe_length, up)
    return tangent, bitangent, normal


def jacobian_terms(
    tangent: np.ndarray, bitangent: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    从切线与副切线取出对称 2x2 雅可比矩阵的元素。

    Returns:
        (Jxx, Jxy, Jyy)
    """
    return bitangent[..., 0], bitangent[..., 1], tangent[..., 1]


def classify_jacobian(jxx, jxy, jyy) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    计算对称 2x2 雅可比矩阵的两个特征值与行列式。

    Jmin/Jplus = 0.5 (Jxx + Jyy) ∓ 0.5 sqrt((Jxx - Jyy)^2 + 4 Jxy^2)

    Returns:
        (Jmin, Jplus, J)，J = Jmin * Jplus
    """
    jxx = np.asarray(jxx, dtype=np.float64)
    jxy = np.asarray(jxy, dtype=np.float64)
    jyy = np.asarray(jyy, dtype=np.float64)
    mean = 0.5 * (jxx + jyy)
    radius = 0.5 * np.sqrt((jxx - jyy) ** 2 + 4.0 * jxy**2)
    eigen_min = mean - radius
    eigen_plus = mean + radius
    return eigen_min, eigen_plus, eigen_min * eigen_plus


def break_mask(determinant) -> np.ndarray:
    """破碎遮罩：J < 0（表面局部折叠）为 1，否则为 0。"""
    return np.where(np.asarray(determinant) < 0, 1.0, 0.0)


def foam_mask(determinant, surface: SurfaceConfig) -> np.ndarray:
    """泡沫遮罩：J < 阈值为 1，启用渐变时阈值之上一段带宽内平滑过渡。"""
    return ramp_above(
        determinant,
        surface.foam_threshold,
        surface.foam_ramp_size,
        surface.foam_ramp_k,
        surface.foam_ramp,
    )


def foam_mask_two(determinant, surface: SurfaceConfig) -> np.ndarray:
    """第二泡沫遮罩：clamp(亮度 * (-J + 阈值), 0, 1)，无阈值/渐变逻辑。"""
    value = surface.foam_two_brightness * (
        -np.asarray(determinant, dtype=np.float64) + surface.foam_two_threshold
    )
    return np.clip(value, 0.0, 1.0)


def sea_level_mask(height, surface: SurfaceConfig) -> np.ndarray:
    """海平面遮罩：高度不低于海平面为 1，启用渐变时海平面以下一段带宽内平滑过渡。"""
    return ramp_below(
        height,
        surface.sea_level,
        surface.sea_level_ramp_size,
        surface.sea_level_ramp_k,
        surface.sea_level_ramp,
    )


def evaluate(
    bank: WaveBank,
    positions,
    time: float,
    surface: Optional[SurfaceConfig] = None,
) -> SurfaceField:
    """
    在采样位置与时间处求值海面。

    Args:
        bank: 波浪库（只读）
        positions: 单个 (u, v) 或 shape 为 (..., 2) 的位置数组
        time: 时间（秒）
        surface: 海面分类参数，默认使用 SurfaceConfig()

    Returns:
        海面求值结果
    """
    if surface is None:
        surface = SurfaceConfig()

    terms = compute_phase_terms(bank, positions, time)
    displacement = compute_displacement(bank, terms)
    tangent, bitangent, normal = compute_derivatives(bank, terms)

    jxx, jxy, jyy = jacobian_terms(tangent, bitangent)
    eigen_min, eigen_plus, determinant = classify_jacobian(jxx, jxy, jyy)

    return SurfaceField(
        displacement=displacement,
        tangent=tangent,
        bitangent=bitangent,
        normal=normal,
        jacobian_xx=jxx,
        jacobian_xy=jxy,
        jacobian_yy=jyy,
        eigen_min=eigen_min,
        eigen_plus=eigen_plus,
        determinant=determinant,
        sea_level_mask=sea_level_mask(displacement[..., 2], surface),
        break_mask=break_mask(determinant),
        foam_mask=foam_mask(determinant, surface),
        foam_mask_two=foam_mask_two(determinant, surface),
    )

"""
数值计算工具。

提供插值、截断以及海平面/泡沫共用的渐变曲线。
"""

import math

import numpy as np

# 渐变曲线形状系数的线性阈值（k 接近 0 时指数公式奇异）
RAMP_EPSILON = 1e-4


def lerp(a, b, t):
    """
    线性插值。

    Args:
        a: 起点
        b: 终点
        t: 插值比例

    Returns:
        a + t * (b - a)
    """
    return a + t * (b - a)


def clamp(value, low: float = 0.0, high: float = 1.0):
    """将值截断到 [low, high]，支持标量与数组。"""
    if isinstance(value, np.ndarray):
        return np.clip(value, low, high)
    return min(max(value, low), high)


def fract(x: float) -> float:
    """取小数部分（x - floor(x)），结果在 [0, 1)。"""
    return x - math.floor(x)


def interp(k: float, percent):
    """
    渐变曲线。

    k > 0 为指数缓动，k < 0 为对数缓动，|k| < 1e-4 时退化为线性。
    对所有 k 都满足 interp(k, 0) == 0 且 interp(k, 1) == 1。

    Args:
        k: 曲线形状系数
        percent: 渐变比例，标量或数组

    Returns:
        映射后的比例
    """
    if abs(k) < RAMP_EPSILON:
        return percent
    return np.expm1(k * np.asarray(percent, dtype=np.float64)) / np.expm1(k)


def ramp_below(value, edge: float, size: float, k: float, enabled: bool):
    """
    上阶跃遮罩：value >= edge 为 1，[edge - size, edge) 内按渐变曲线过渡。

    用于海平面遮罩。

    Args:
        value: 输入值（标量或数组）
        edge: 阶跃位置
        size: 渐变带宽度（> 0）
        k: 渐变曲线形状
        enabled: 是否启用渐变，关闭时为硬阶跃

    Returns:
        [0, 1] 内的遮罩值
    """
    value = np.asarray(value, dtype=np.float64)
    mask = np.where(value >= edge, 1.0, 0.0)
    if enabled:
        band = (value < edge) & (value >= edge - size)
        percent = np.clip((value - (edge - size)) / size, 0.0, 1.0)
        mask = np.where(band, interp(k, percent), mask)
    return mask


def ramp_above(value, edge: float, size: float, k: float, enabled: bool):
    """
    下阶跃遮罩：value < edge 为 1，(edge, edge + size] 内按渐变曲线过渡。

    用于泡沫遮罩。

    Args:
        value: 输入值（标量或数组）
        edge: 阶跃位置
        size: 渐变带宽度（> 0）
        k: 渐变曲线形状
        enabled: 是否启用渐变，关闭时为硬阶跃

    Returns:
        [0, 1] 内的遮罩值
    """
    value = np.asarray(value, dtype=np.float64)
    mask = np.where(value < edge, 1.0, 0.0)
    if enabled:
        band = (value >= edge) & (value <= edge + size)
        percent = np.clip(1.0 - (value - edge) / size, 0.0, 1.0)
        mask = np.where(band, interp(k, percent), mask)
    return mask

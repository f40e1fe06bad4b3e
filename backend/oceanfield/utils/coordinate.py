"""
表面坐标工具。

提供采样位置解析（主/备用 UV 通道 + 常量偏移）以及区域网格生成功能。
"""

import logging
import math
from typing import Tuple

import numpy as np

from oceanfield.schemas.base import DiscretizationConfig, Region, SampleConfig

logger = logging.getLogger(__name__)


def resolve_sample_position(sample: SampleConfig) -> Tuple[float, float]:
    """
    解析采样位置。

    指定了备用 UV 通道且通道存在时使用该通道的值，否则回退到主通道；
    最后叠加常量偏移。

    Args:
        sample: 采样坐标配置

    Returns:
        (u, v) 采样位置
    """
    u, v = sample.u, sample.v
    if sample.uv_set is not None:
        if sample.uv_set in sample.uv_sets:
            u, v = sample.uv_sets[sample.uv_set]
        else:
            logger.warning(
                f"UV set '{sample.uv_set}' not found, falling back to primary UVs"
            )
    return u + sample.offset_u, v + sample.offset_v


def create_grid(region: Region, config: DiscretizationConfig) -> np.ndarray:
    """
    创建离散网格。

    Args:
        region: 区域定义
        config: 离散化配置

    Returns:
        网格点位置数组，shape: (n_points, 2)，按 y 从小到大、x 从小到大排列
    """
    # 计算网格范围
    x_range = region.x_max - region.x_min
    y_range = region.y_max - region.y_min

    # 计算网格数量
    n_x = max(1, int(x_range / config.dx) + 1)
    n_y = max(1, int(y_range / config.dy) + 1)
    total_points = n_x * n_y

    # 检查点数上限
    if total_points > config.max_points:
        # 按比例缩小网格
        scale = math.sqrt(config.max_points / total_points)
        n_x = max(1, int(n_x * scale))
        n_y = max(1, int(n_y * scale))
        logger.debug(
            f"Grid of {total_points} points exceeds limit {config.max_points}, "
            f"reduced to {n_x}x{n_y}"
        )

    x_values = np.linspace(region.x_min, region.x_max, n_x)
    y_values = np.linspace(region.y_min, region.y_max, n_y)
    xx, yy = np.meshgrid(x_values, y_values)
    return np.stack([xx.ravel(), yy.ravel()], axis=-1)

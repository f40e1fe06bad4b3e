"""
海面采样服务。

在单点、区域网格以及时间序列上求值海面，并按输出模式选择着色结果。
波浪库对同一组参数只构建一次，在所有采样点与帧之间复用。
"""

import logging
from typing import List, Optional

import numpy as np

from oceanfield.models.field import SurfaceField
from oceanfield.models.wave import WaveBank
from oceanfield.schemas.base import (
    DiscretizationConfig,
    OutputMode,
    Region,
    SampleConfig,
    SurfaceConfig,
    TimeConfig,
    WaveBankConfig,
)
from oceanfield.schemas.data import SurfaceFrame, SurfacePoint, SurfaceSample
from oceanfield.services.field import evaluate
from oceanfield.services.noise import NoiseSource
from oceanfield.services.wave_bank import build_wave_bank
from oceanfield.utils.coordinate import create_grid, resolve_sample_position

logger = logging.getLogger(__name__)

_VECTOR_OUTPUTS = {
    OutputMode.DISPLACEMENT: "displacement",
    OutputMode.NORMAL: "normal",
    OutputMode.TANGENT: "tangent",
    OutputMode.BITANGENT: "bitangent",
}

_MASK_OUTPUTS = {
    OutputMode.SEA_LEVEL: "sea_level_mask",
    OutputMode.BREAK: "break_mask",
    OutputMode.FOAM: "foam_mask",
    OutputMode.FOAM_TWO: "foam_mask_two",
}


def select_output(field: SurfaceField, mode: OutputMode) -> np.ndarray:
    """
    按输出模式选择着色结果。

    向量字段原样输出，标量遮罩扩展为三通道灰度。

    Args:
        field: 海面求值结果
        mode: 输出模式

    Returns:
        shape 为 (..., 3) 的颜色数组
    """
    mode = OutputMode(mode)
    if mode in _VECTOR_OUTPUTS:
        return getattr(field, _VECTOR_OUTPUTS[mode])
    mask = np.asarray(getattr(field, _MASK_OUTPUTS[mode]))
    return np.repeat(mask[..., np.newaxis], 3, axis=-1)


def evaluate_sample(
    bank: WaveBank,
    sample: SampleConfig,
    time: float,
    surface: Optional[SurfaceConfig] = None,
    output_mode: OutputMode = OutputMode.DISPLACEMENT,
) -> SurfaceSample:
    """
    单点求值。

    Args:
        bank: 波浪库
        sample: 采样坐标配置
        time: 时间（秒）
        surface: 海面分类参数
        output_mode: 输出模式

    Returns:
        单点求值结果
    """
    u, v = resolve_sample_position(sample)
    field = evaluate(bank, (u, v), time, surface)
    return SurfaceSample(
        u=u,
        v=v,
        time=time,
        displacement=field.displacement.tolist(),
        normal=field.normal.tolist(),
        tangent=field.tangent.tolist(),
        bitangent=field.bitangent.tolist(),
        jacobian_xx=float(field.jacobian_xx),
        jacobian_xy=float(field.jacobian_xy),
        jacobian_yy=float(field.jacobian_yy),
        determinant=float(field.determinant),
        sea_level_mask=float(field.sea_level_mask),
        break_mask=float(field.break_mask),
        foam_mask=float(field.foam_mask),
        foam_mask_two=float(field.foam_mask_two),
        output=select_output(field, output_mode).tolist(),
    )


def evaluate_frame(
    bank: WaveBank,
    region: Region,
    positions: np.ndarray,
    time: float,
    surface: Optional[SurfaceConfig] = None,
    output_mode: OutputMode = OutputMode.DISPLACEMENT,
) -> SurfaceFrame:
    """
    在网格上求值单个时刻。

    Args:
        bank: 波浪库
        region: 区域配置
        positions: 网格点位置，shape: (n_points, 2)
        time: 时间（秒）
        surface: 海面分类参数
        output_mode: 输出模式

    Returns:
        该时刻的区域求值帧
    """
    field = evaluate(bank, positions, time, surface)
    output = select_output(field, output_mode)
    points = [
        SurfacePoint(
            x=float(position[0]),
            y=float(position[1]),
            displacement=field.displacement[i].tolist(),
            output=output[i].tolist(),
        )
        for i, position in enumerate(positions)
    ]
    return SurfaceFrame(
        time=float(time), region=region, output_mode=output_mode, points=points
    )


def simulate_frames(
    wave_config: WaveBankConfig,
    region: Region,
    discretization_config: DiscretizationConfig,
    time_config: TimeConfig,
    surface: Optional[SurfaceConfig] = None,
    output_mode: OutputMode = OutputMode.DISPLACEMENT,
    noise_source: Optional[NoiseSource] = None,
) -> List[SurfaceFrame]:
    """
    完整区域求值流程。

    Args:
        wave_config: 波浪库生成参数
        region: 区域配置
        discretization_config: 离散化配置
        time_config: 时间配置
        surface: 海面分类参数
        output_mode: 输出模式
        noise_source: 随机源

    Returns:
        求值时间序列帧列表
    """
    # 1. 创建网格
    positions = create_grid(region, discretization_config)

    # 2. 构建波浪库（所有帧共用）
    bank = build_wave_bank(wave_config, noise_source)

    # 3. 逐帧求值
    times = time_config.t_start + time_config.dt * np.arange(time_config.n_frames)
    frames = [
        evaluate_frame(bank, region, positions, float(t), surface, output_mode)
        for t in times
    ]

    logger.info(
        f"Evaluated {len(frames)} frames of {len(positions)} points "
        f"with {len(bank)} waves"
    )
    return frames

"""
波浪库构建服务。

根据艺术参数与随机源，确定性地生成多八度基本波集合。
"""

import logging
import math
from typing import Optional

from oceanfield.core.errors import ConfigurationError
from oceanfield.models.wave import ElementaryWave, WaveBank
from oceanfield.schemas.base import WaveBankConfig, capacity_violations
from oceanfield.services.noise import (
    VARIANT_COORDINATES,
    NoiseSource,
    default_noise_source,
    sample_coordinates,
)
from oceanfield.utils.numerical import lerp

logger = logging.getLogger(__name__)

# 重力加速度（与原着色器一致）
G = 9.8

# 每个八度内波长采样范围的倍率
WAVELENGTH_SPREAD = 1.5


def build_wave_bank(
    config: WaveBankConfig, noise_source: Optional[NoiseSource] = None
) -> WaveBank:
    """
    构建波浪库。

    第 j 个八度的中心波长为 wavelength / 2^j，波长在
    [中心 / 1.5, 中心 * 1.5] 内按随机数插值；振幅与陡度随八度升高衰减。
    陡度系数按总波数归一化，保证所有波的水平位移之和有界。

    注意角频率取 w = 2 / 波长（而非 2π / 波长），下游公式全部基于该约定。

    相同的 (config, noise_source) 总是得到完全相同的波浪库。

    Args:
        config: 波浪库生成参数
        noise_source: 随机源，默认使用内置实现

    Returns:
        波浪库对象

    Raises:
        ConfigurationError: 波数超出容量上限
    """
    violations = capacity_violations(config.octaves, config.waves_per_octave)
    if violations:
        raise ConfigurationError(violations)

    if noise_source is None:
        noise_source = default_noise_source

    octaves = config.octaves
    waves_per_octave = config.waves_per_octave
    total = config.total_waves
    mode = VARIANT_COORDINATES[config.randomness]
    amplitude_ratio = config.amplitude / config.wavelength

    waves = []
    for octave in range(octaves):
        # 每个八度波长减半
        current_wavelength = config.wavelength / 2.0**octave
        min_wavelength = current_wavelength / WAVELENGTH_SPREAD
        max_wavelength = current_wavelength * WAVELENGTH_SPREAD

        # 高八度的振幅与陡度衰减
        decay_fraction = octave / octaves
        amplitude_decay = 1.0 / (1.0 + decay_fraction * config.amplitude_decay)
        steepness_decay = 1.0 / (
            1.0 + decay_fraction * config.steepness_decay * config.steepness
        )

        for local_index in range(waves_per_octave):
            index = octave * waves_per_octave + local_index
            a, b = sample_coordinates(
                mode, index, local_index, waves_per_octave, total, config.seed
            )
            rng = noise_source.sample(config.randomness, a, b)

            wavelength = lerp(min_wavelength, max_wavelength, rng)
            amplitude = wavelength * amplitude_ratio * amplitude_decay
            angular_frequency = 2.0 / wavelength

            # 振幅为 0 时（平静海面）陡度系数取 0，位移恒为 0
            denominator = amplitude * angular_frequency * total
            if denominator > 0:
                steepness = config.steepness * steepness_decay / denominator
            else:
                steepness = 0.0

            phase_speed = config.speed * math.sqrt(G * (2.0 * math.pi / wavelength))

            angle = math.radians(
                config.direction_deg
                + lerp(-config.deviation_deg, config.deviation_deg, rng)
            )
            direction = (math.cos(angle), math.sin(angle), 0.0)

            waves.append(
                ElementaryWave(
                    index=index,
                    octave=octave,
                    local_index=local_index,
                    wavelength=wavelength,
                    amplitude=amplitude,
                    direction=direction,
                    angular_frequency=angular_frequency,
                    steepness=steepness,
                    phase_speed=phase_speed,
                )
            )

    logger.debug(
        f"Built wave bank: {octaves} octaves x {waves_per_octave} waves "
        f"({config.randomness.value}, seed={config.seed})"
    )
    return WaveBank(config=config, waves=tuple(waves))

"""
业务服务模块。

包含随机源、波浪库构建、海面求值、区域采样等服务。
"""

from oceanfield.services.field import evaluate
from oceanfield.services.noise import NoiseSource, default_noise_source
from oceanfield.services.surface import (
    evaluate_frame,
    evaluate_sample,
    select_output,
    simulate_frames,
)
from oceanfield.services.wave_bank import build_wave_bank

__all__ = [
    "NoiseSource",
    "default_noise_source",
    "build_wave_bank",
    "evaluate",
    "select_output",
    "evaluate_sample",
    "evaluate_frame",
    "simulate_frames",
]

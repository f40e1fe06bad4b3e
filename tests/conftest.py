"""
Pytest 配置文件。

提供全局的测试配置和 fixture。
"""

import sys
from pathlib import Path

import pytest

# 获取项目根目录
project_root = Path(__file__).parent.parent

# 添加 backend 目录到 Python 路径（让测试可以导入 oceanfield 模块）
backend_path = project_root / "backend"
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from oceanfield.schemas.base import RandomnessVariant, WaveBankConfig  # noqa: E402


@pytest.fixture
def single_wave_config():
    """单个确定性波（均匀分布，rng = 0）。"""
    return WaveBankConfig(
        octaves=1,
        waves_per_octave=1,
        wavelength=80.0,
        amplitude=3.0,
        steepness=5.0,
        direction_deg=45.0,
        deviation_deg=0.0,
        speed=1.0,
        seed=0,
        randomness=RandomnessVariant.EVEN_DISTRIBUTION,
    )


@pytest.fixture
def ocean_config():
    """多八度的常规海面参数。"""
    return WaveBankConfig(
        octaves=4,
        waves_per_octave=6,
        wavelength=60.0,
        amplitude=1.5,
        steepness=0.6,
        direction_deg=30.0,
        deviation_deg=40.0,
        seed=7,
        randomness=RandomnessVariant.RAND1,
    )

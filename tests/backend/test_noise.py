"""
随机源测试。
"""

import math

import pytest

from oceanfield.schemas.base import RandomnessVariant
from oceanfield.services.noise import (
    VARIANT_COORDINATES,
    CoordinateMode,
    NoiseSource,
    RandNoise,
    rand,
    sample_coordinates,
)


@pytest.fixture(scope="module")
def noise_source():
    return NoiseSource()


@pytest.mark.parametrize("variant", list(RandomnessVariant))
def test_samples_in_unit_interval(noise_source, variant):
    """测试所有变体的输出都在 [0, 1] 内。"""
    for a in [0.0, 0.37, 1.0, 5.0, 17.5, 383.0]:
        for b in [0.0, 1.0, 42.0]:
            value = noise_source.sample(variant, a, b)
            assert 0.0 <= value <= 1.0


@pytest.mark.parametrize("variant", list(RandomnessVariant))
def test_samples_are_deterministic(variant):
    """测试不同实例、重复调用结果一致。"""
    first = NoiseSource()
    second = NoiseSource()
    for a, b in [(0.0, 0.0), (3.0, 1.0), (0.25, 9.0)]:
        assert first.sample(variant, a, b) == second.sample(variant, a, b)


def test_variant_accepts_string_name(noise_source):
    """测试变体可以用参数名称字符串指定。"""
    assert noise_source.sample("Rand1", 3.0, 1.0) == noise_source.sample(
        RandomnessVariant.RAND1, 3.0, 1.0
    )


def test_rand_formula():
    """测试正弦伪随机公式。"""
    x = 12.0
    expected = math.sin(x * 91.3458) * 47453.5453
    expected -= math.floor(expected)
    assert rand(x) == expected
    assert rand(0.0) == 0.0


def test_rand_noise_sums_coordinates():
    """测试 rand 变体对 a + b 取值。"""
    assert RandNoise().sample(3.0, 4.0) == rand(7.0)


def test_even_distribution_returns_coordinate(noise_source):
    """测试均匀分布直接返回坐标。"""
    assert noise_source.sample(RandomnessVariant.EVEN_DISTRIBUTION, 0.25, 99.0) == 0.25


def test_gradient_noise_varies(noise_source):
    """测试 Perlin/Simplex 在归一化坐标上不是常数。"""
    for variant in (RandomnessVariant.PERLIN, RandomnessVariant.SIMPLEX):
        values = {
            round(noise_source.sample(variant, i / 16.0, 3.0), 12) for i in range(16)
        }
        assert len(values) > 1


def test_every_variant_has_coordinate_mode():
    """测试每个变体都绑定了坐标模式。"""
    assert set(VARIANT_COORDINATES) == set(RandomnessVariant)


def test_sample_coordinates():
    """测试各坐标模式。"""
    args = dict(index=10, local_index=2, waves_per_octave=4, total_waves=20, seed=3)
    assert sample_coordinates(CoordinateMode.ABSOLUTE, **args) == (10.0, 3.0)
    assert sample_coordinates(CoordinateMode.NORMALIZED, **args) == (0.5, 3.0)
    assert sample_coordinates(CoordinateMode.LOCAL, **args) == (2.0, 3.0)
    assert sample_coordinates(CoordinateMode.EVEN, **args) == (0.5, 0.0)

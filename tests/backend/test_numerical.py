"""
数值工具测试。
"""

import numpy as np
import pytest

from oceanfield.utils.numerical import clamp, fract, interp, lerp, ramp_above, ramp_below


@pytest.mark.parametrize("k", [-8.0, -1.0, -1e-3, -5e-5, 0.0, 5e-5, 1e-3, 1.0, 8.0])
def test_interp_endpoints(k):
    """测试渐变曲线端点（覆盖线性与指数两个分支）。"""
    assert interp(k, 0.0) == 0.0
    assert interp(k, 1.0) == 1.0


@pytest.mark.parametrize("percent", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_interp_linear_when_k_is_zero(percent):
    """测试 k = 0 时为线性。"""
    assert interp(0.0, percent) == percent


def test_interp_easing_direction():
    """测试 k > 0 为指数缓动（低于线性），k < 0 为对数缓动（高于线性）。"""
    assert interp(3.0, 0.5) < 0.5
    assert interp(-3.0, 0.5) > 0.5


def test_interp_matches_formula():
    """测试指数公式。"""
    k, p = 2.0, 0.3
    expected = (np.exp(k * p) - 1.0) / (np.exp(k) - 1.0)
    assert interp(k, p) == pytest.approx(expected)


def test_interp_array():
    """测试数组输入。"""
    values = interp(2.0, np.array([0.0, 0.5, 1.0]))
    assert values.shape == (3,)
    assert values[0] == 0.0
    assert values[-1] == 1.0


def test_lerp_clamp_fract():
    """测试基础插值与截断。"""
    assert lerp(2.0, 4.0, 0.5) == 3.0
    assert clamp(1.5) == 1.0
    assert clamp(-0.5) == 0.0
    assert np.array_equal(clamp(np.array([-1.0, 0.5, 2.0])), [0.0, 0.5, 1.0])
    assert fract(2.25) == 0.25
    assert fract(-0.25) == 0.75


def test_ramp_below_hard_step():
    """测试未启用渐变时为硬阶跃。"""
    mask = ramp_below(np.array([-0.5, 0.0, 0.5]), 0.0, 1.0, 0.0, False)
    assert mask.tolist() == [0.0, 1.0, 1.0]


def test_ramp_below_linear_band():
    """测试海平面以下的线性渐变带。"""
    mask = ramp_below(np.array([-1.5, -1.0, -0.25, 0.1]), 0.0, 1.0, 0.0, True)
    assert mask.tolist() == pytest.approx([0.0, 0.0, 0.75, 1.0])


def test_ramp_above_linear_band():
    """测试阈值之上的线性渐变带。"""
    mask = ramp_above(np.array([0.4, 0.5, 0.75, 1.0, 1.01]), 0.5, 0.5, 0.0, True)
    assert mask.tolist() == pytest.approx([1.0, 1.0, 0.5, 0.0, 0.0])


def test_ramp_above_hard_step():
    """测试未启用渐变时为硬阶跃。"""
    mask = ramp_above(np.array([0.4, 0.5, 0.75]), 0.5, 0.5, 0.0, False)
    assert mask.tolist() == [1.0, 0.0, 0.0]

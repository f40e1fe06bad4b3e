"""
区域采样与输出选择测试。
"""

import numpy as np
import pytest

from oceanfield.schemas.base import (
    DiscretizationConfig,
    OutputMode,
    Region,
    SampleConfig,
    SurfaceConfig,
    TimeConfig,
)
from oceanfield.services.field import evaluate
from oceanfield.services.surface import evaluate_sample, select_output, simulate_frames
from oceanfield.services.wave_bank import build_wave_bank


@pytest.mark.parametrize("mode", list(OutputMode))
def test_select_output_shape(ocean_config, mode):
    """测试所有输出模式都返回三通道颜色。"""
    bank = build_wave_bank(ocean_config)
    positions = np.zeros((4, 5, 2))

    field = evaluate(bank, positions, 0.0)

    assert select_output(field, mode).shape == (4, 5, 3)


def test_select_output_mask_is_grey(ocean_config):
    """测试标量遮罩扩展为灰度。"""
    bank = build_wave_bank(ocean_config)
    field = evaluate(bank, (1.0, 2.0), 0.0)

    color = select_output(field, OutputMode.SEA_LEVEL)

    assert color.tolist() == [float(field.sea_level_mask)] * 3


def test_evaluate_sample(single_wave_config):
    """测试单点求值结果与核心求值一致。"""
    bank = build_wave_bank(single_wave_config)
    sample = SampleConfig(u=1.0, v=2.0, offset_u=1.0)

    result = evaluate_sample(bank, sample, 0.5, SurfaceConfig(), OutputMode.NORMAL)
    field = evaluate(bank, (2.0, 2.0), 0.5)

    assert (result.u, result.v) == (2.0, 2.0)
    assert result.displacement == pytest.approx(field.displacement.tolist())
    assert result.output == pytest.approx(field.normal.tolist())
    assert result.determinant == pytest.approx(float(field.determinant))


def test_simulate_frames(ocean_config):
    """测试时间序列帧。"""
    region = Region(x_min=0.0, y_min=0.0, x_max=4.0, y_max=2.0)
    discretization = DiscretizationConfig(dx=1.0, dy=1.0)
    time_config = TimeConfig(t_start=1.0, dt=0.5, n_frames=3)

    frames = simulate_frames(
        ocean_config, region, discretization, time_config, output_mode=OutputMode.FOAM
    )

    assert [frame.time for frame in frames] == pytest.approx([1.0, 1.5, 2.0])
    for frame in frames:
        assert len(frame.points) == 15
        assert frame.output_mode == OutputMode.FOAM
        for point in frame.points:
            assert all(0.0 <= c <= 1.0 for c in point.output)


def test_simulate_frames_matches_point_evaluation(ocean_config):
    """测试网格帧与单点求值一致。"""
    region = Region(x_min=-2.0, y_min=-2.0, x_max=2.0, y_max=2.0)
    frames = simulate_frames(
        ocean_config,
        region,
        DiscretizationConfig(dx=2.0, dy=2.0),
        TimeConfig(t_start=3.0, n_frames=1),
    )
    bank = build_wave_bank(ocean_config)

    for point in frames[0].points:
        field = evaluate(bank, (point.x, point.y), 3.0)
        assert point.displacement == pytest.approx(field.displacement.tolist())

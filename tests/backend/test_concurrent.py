"""
并发测试：多个线程共享同一个波浪库同时求值，结果与顺序求值一致。
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from oceanfield.services.field import evaluate
from oceanfield.services.wave_bank import build_wave_bank


def test_concurrent_evaluation_shares_bank(ocean_config):
    """测试并发求值不修改波浪库，且与顺序求值逐位一致。"""
    bank = build_wave_bank(ocean_config)
    snapshot = bank.amplitudes.copy(), bank.steepnesses.copy()
    positions = np.random.default_rng(0).uniform(-200, 200, size=(64, 2))
    times = np.linspace(0.0, 10.0, 64)

    def run(i):
        return evaluate(bank, positions[i], times[i])

    expected = [run(i) for i in range(len(positions))]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(run, range(len(positions))))

    for result, reference in zip(results, expected):
        assert np.array_equal(result.displacement, reference.displacement)
        assert np.array_equal(result.determinant, reference.determinant)
        assert np.array_equal(result.foam_mask_two, reference.foam_mask_two)

    assert np.array_equal(bank.amplitudes, snapshot[0])
    assert np.array_equal(bank.steepnesses, snapshot[1])


def test_concurrent_builds_are_identical(ocean_config):
    """测试并发构建得到相同的波浪库。"""
    with ThreadPoolExecutor(max_workers=4) as pool:
        banks = list(pool.map(lambda _: build_wave_bank(ocean_config), range(8)))

    assert all(bank == banks[0] for bank in banks)

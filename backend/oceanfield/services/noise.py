"""
随机源服务。

为波浪库构建提供 [0, 1] 内的确定性随机数。每个 RandomnessVariant 对应
一个噪声原语（hash / cell / rand / perlin / simplex / even）与一种采样
坐标模式（绝对索引 / 归一化索引 / 八度内索引）。
"""

import math
from enum import Enum
from typing import Dict, Protocol, Tuple

import numpy as np

from oceanfield.schemas.base import RandomnessVariant
from oceanfield.utils.numerical import clamp, fract

# 排列表种子，固定以保证跨进程结果一致
PERMUTATION_SEED = 0

# 梯度噪声采样偏移，避开整数格点（格点处 Perlin 恒为 0）
LATTICE_OFFSET = 0.5

# 哈希噪声坐标量化精度
HASH_RESOLUTION = 4096.0

_MASK32 = 0xFFFFFFFF


class NoisePrimitive(Protocol):
    """噪声原语：给定两个标量坐标返回 [0, 1] 内的值。"""

    def sample(self, a: float, b: float) -> float:
        ...


class CoordinateMode(str, Enum):
    """采样坐标模式。"""

    ABSOLUTE = "absolute"  # (全局索引, 种子)
    NORMALIZED = "normalized"  # (全局索引 / 总波数, 种子)
    LOCAL = "local"  # (八度内索引, 种子)
    EVEN = "even"  # (八度内索引 / 每八度波数, 0)


def sample_coordinates(
    mode: CoordinateMode,
    index: int,
    local_index: int,
    waves_per_octave: int,
    total_waves: int,
    seed: int,
) -> Tuple[float, float]:
    """
    计算某个波成分的噪声采样坐标。

    Args:
        mode: 坐标模式
        index: 全局索引
        local_index: 八度内索引
        waves_per_octave: 每八度波数
        total_waves: 总波数
        seed: 随机种子

    Returns:
        (a, b) 采样坐标
    """
    if mode is CoordinateMode.ABSOLUTE:
        return float(index), float(seed)
    if mode is CoordinateMode.NORMALIZED:
        return index / total_waves, float(seed)
    if mode is CoordinateMode.LOCAL:
        return float(local_index), float(seed)
    return local_index / waves_per_octave, 0.0


def _hash32(x: int) -> int:
    """32 位整数雪崩哈希（lowbias32）。"""
    x &= _MASK32
    x ^= x >> 16
    x = (x * 0x7FEB352D) & _MASK32
    x ^= x >> 15
    x = (x * 0x846CA68B) & _MASK32
    x ^= x >> 16
    return x


def _hash2(ix: int, iy: int) -> int:
    return _hash32(ix ^ _hash32(iy + 0x9E3779B9))


class HashNoise:
    """哈希噪声：对量化后的坐标做整数哈希。"""

    def sample(self, a: float, b: float) -> float:
        ia = int(math.floor(a * HASH_RESOLUTION))
        ib = int(math.floor(b * HASH_RESOLUTION))
        return _hash2(ia, ib) / _MASK32


class CellNoise:
    """
    细胞噪声（Worley F1）。

    每个整数格子放置一个哈希抖动的特征点，返回到最近特征点的距离，
    截断到 [0, 1]。
    """

    def sample(self, a: float, b: float) -> float:
        ca = math.floor(a)
        cb = math.floor(b)
        nearest = math.inf
        for da in (-1, 0, 1):
            for db in (-1, 0, 1):
                ia = int(ca) + da
                ib = int(cb) + db
                h = _hash2(ia, ib)
                fa = ia + (h & 0xFFFF) / 0xFFFF
                fb = ib + (h >> 16) / 0xFFFF
                nearest = min(nearest, math.hypot(a - fa, b - fb))
        return clamp(nearest)


class RandNoise:
    """
    正弦伪随机：fract(sin(x * 91.3458) * 47453.5453)，x = a + b。

    公式需与原着色器逐位一致。
    """

    def sample(self, a: float, b: float) -> float:
        return rand(a + b)


def rand(x: float) -> float:
    """闭式伪随机函数，结果在 [0, 1)。"""
    return fract(math.sin(x * 91.3458) * 47453.5453)


class EvenDistribution:
    """均匀分布：直接返回坐标 a（即八度内索引 / 每八度波数）。"""

    def sample(self, a: float, b: float) -> float:
        return clamp(a)


class PerlinNoise:
    """二维 Perlin 梯度噪声，[-1, 1] 映射到 [0, 1]。"""

    _GRADIENTS = np.array(
        [[1, 1], [-1, 1], [1, -1], [-1, -1], [1, 0], [-1, 0], [0, 1], [0, -1]],
        dtype=np.float64,
    )

    def __init__(self, permutation: np.ndarray):
        self._perm = np.concatenate([permutation, permutation])

    @staticmethod
    def _fade(t: float) -> float:
        "6t^5 - 15t^4 + 10t^3"
        return t * t * t * (t * (t * 6 - 15) + 10)

    def _gradient(self, ix: int, iy: int, x: float, y: float) -> float:
        h = self._perm[self._perm[ix & 255] + (iy & 255)]
        g = self._GRADIENTS[h % 8]
        return g[0] * x + g[1] * y

    def noise(self, x: float, y: float) -> float:
        """原始 Perlin 噪声，范围约为 [-1, 1]。"""
        xi = math.floor(x)
        yi = math.floor(y)
        xf = x - xi
        yf = y - yi
        u = self._fade(xf)
        v = self._fade(yf)

        g00 = self._gradient(xi, yi, xf, yf)
        g10 = self._gradient(xi + 1, yi, xf - 1, yf)
        g01 = self._gradient(xi, yi + 1, xf, yf - 1)
        g11 = self._gradient(xi + 1, yi + 1, xf - 1, yf - 1)

        x1 = g00 + u * (g10 - g00)
        x2 = g01 + u * (g11 - g01)
        return float(x1 + v * (x2 - x1))

    def sample(self, a: float, b: float) -> float:
        n = self.noise(a + LATTICE_OFFSET, b + LATTICE_OFFSET)
        return clamp(0.5 * (n + 1.0))


class SimplexNoise:
    """二维 Simplex 噪声，[-1, 1] 映射到 [0, 1]。"""

    _F2 = 0.5 * (math.sqrt(3.0) - 1.0)
    _G2 = (3.0 - math.sqrt(3.0)) / 6.0
    _GRADIENTS = np.array(
        [
            [1, 1], [-1, 1], [1, -1], [-1, -1],
            [1, 0], [-1, 0], [0, 1], [0, -1],
        ],
        dtype=np.float64,
    )

    def __init__(self, permutation: np.ndarray):
        self._perm = np.concatenate([permutation, permutation])

    def _corner(self, ix: int, iy: int, x: float, y: float) -> float:
        t = 0.5 - x * x - y * y
        if t < 0:
            return 0.0
        h = self._perm[ix + self._perm[iy]]
        g = self._GRADIENTS[h % 8]
        t *= t
        return t * t * (g[0] * x + g[1] * y)

    def noise(self, x: float, y: float) -> float:
        """原始 Simplex 噪声，范围约为 [-1, 1]。"""
        s = (x + y) * self._F2
        i = math.floor(x + s)
        j = math.floor(y + s)
        t = (i + j) * self._G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + self._G2
        y1 = y0 - j1 + self._G2
        x2 = x0 - 1.0 + 2.0 * self._G2
        y2 = y0 - 1.0 + 2.0 * self._G2

        ii = i & 255
        jj = j & 255
        n0 = self._corner(ii, jj, x0, y0)
        n1 = self._corner(ii + i1, jj + j1, x1, y1)
        n2 = self._corner(ii + 1, jj + 1, x2, y2)
        return float(70.0 * (n0 + n1 + n2))

    def sample(self, a: float, b: float) -> float:
        n = self.noise(a + LATTICE_OFFSET, b + LATTICE_OFFSET)
        return clamp(0.5 * (n + 1.0))


# 各变体的采样坐标模式
VARIANT_COORDINATES: Dict[RandomnessVariant, CoordinateMode] = {
    RandomnessVariant.HASH1: CoordinateMode.ABSOLUTE,
    RandomnessVariant.HASH2: CoordinateMode.NORMALIZED,
    RandomnessVariant.HASH3: CoordinateMode.LOCAL,
    RandomnessVariant.CELL1: CoordinateMode.ABSOLUTE,
    RandomnessVariant.CELL2: CoordinateMode.NORMALIZED,
    RandomnessVariant.RAND1: CoordinateMode.ABSOLUTE,
    RandomnessVariant.RAND2: CoordinateMode.NORMALIZED,
    RandomnessVariant.RAND3: CoordinateMode.LOCAL,
    RandomnessVariant.PERLIN: CoordinateMode.NORMALIZED,
    RandomnessVariant.EVEN_DISTRIBUTION: CoordinateMode.EVEN,
    RandomnessVariant.SIMPLEX: CoordinateMode.NORMALIZED,
}


class NoiseSource:
    """
    随机源。

    按 RandomnessVariant 分派到对应的噪声原语。实例不持有可变状态，
    可在线程间共享。
    """

    def __init__(self, permutation_seed: int = PERMUTATION_SEED):
        permutation = np.random.default_rng(permutation_seed).permutation(256)
        hash_noise = HashNoise()
        cell_noise = CellNoise()
        rand_noise = RandNoise()
        self._primitives: Dict[RandomnessVariant, NoisePrimitive] = {
            RandomnessVariant.HASH1: hash_noise,
            RandomnessVariant.HASH2: hash_noise,
            RandomnessVariant.HASH3: hash_noise,
            RandomnessVariant.CELL1: cell_noise,
            RandomnessVariant.CELL2: cell_noise,
            RandomnessVariant.RAND1: rand_noise,
            RandomnessVariant.RAND2: rand_noise,
            RandomnessVariant.RAND3: rand_noise,
            RandomnessVariant.PERLIN: PerlinNoise(permutation),
            RandomnessVariant.EVEN_DISTRIBUTION: EvenDistribution(),
            RandomnessVariant.SIMPLEX: SimplexNoise(permutation),
        }

    def sample(self, variant: RandomnessVariant, a: float, b: float) -> float:
        """
        采样随机数。

        Args:
            variant: 随机源变体
            a: 第一个采样坐标
            b: 第二个采样坐标

        Returns:
            [0, 1] 内的随机数
        """
        primitive = self._primitives[RandomnessVariant(variant)]
        return float(primitive.sample(a, b))


default_noise_source = NoiseSource()

"""
基础配置 Schema 定义。

包含波浪库、海面分类、采样、区域、离散化、时间等配置模型。
所有约束在构造时一次性校验，违反项汇总在同一个 ValidationError 中。
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from oceanfield.core.config import settings


class RandomnessVariant(str, Enum):
    """波浪库随机源变体（名称与原着色器参数取值一致）。"""

    HASH1 = "Hash1"
    HASH2 = "Hash2"
    HASH3 = "Hash3"
    CELL1 = "Cell1"
    CELL2 = "Cell2"
    RAND1 = "Rand1"
    RAND2 = "Rand2"
    RAND3 = "Rand3"
    PERLIN = "Perlin"
    EVEN_DISTRIBUTION = "EvenDistribution"
    SIMPLEX = "Simplex"


class OutputMode(str, Enum):
    """着色输出选择。"""

    DISPLACEMENT = "displacement"
    NORMAL = "normal"
    TANGENT = "tangent"
    BITANGENT = "bitangent"
    SEA_LEVEL = "sea_level"
    BREAK = "break"
    FOAM = "foam"
    FOAM_TWO = "foam_two"


def capacity_violations(octaves: int, waves_per_octave: int) -> List[str]:
    """
    检查八度数与每八度波数是否超出容量上限。

    Args:
        octaves: 八度数
        waves_per_octave: 每八度波数

    Returns:
        违反项描述列表，为空表示合法
    """
    violations = []
    if octaves > settings.max_octaves:
        violations.append(
            f"octaves must be at most {settings.max_octaves}, got {octaves}"
        )
    if waves_per_octave > settings.max_waves_per_octave:
        violations.append(
            f"waves_per_octave must be at most {settings.max_waves_per_octave}, "
            f"got {waves_per_octave}"
        )
    total = octaves * waves_per_octave
    if total > settings.max_total_waves:
        violations.append(
            f"octaves * waves_per_octave must be at most "
            f"{settings.max_total_waves}, got {total}"
        )
    return violations


class WaveBankConfig(BaseModel):
    """波浪库生成参数。"""

    model_config = {"frozen": True}

    octaves: int = Field(default=6, ge=1, description="八度数，每个八度波长减半")
    waves_per_octave: int = Field(default=8, ge=1, description="每个八度的波数")
    wavelength: float = Field(default=80.0, gt=0, description="基础波长")
    amplitude: float = Field(default=3.0, ge=0, description="基础振幅")
    amplitude_decay: float = Field(
        default=1.0, ge=0, description="高八度振幅衰减强度"
    )
    steepness: float = Field(default=0.5, ge=0, description="陡度")
    steepness_decay: float = Field(
        default=1.0, ge=0, description="高八度陡度衰减强度"
    )
    direction_deg: float = Field(
        default=0.0, ge=0, le=360, description="主传播方向（度），绕竖直轴从 +x 起算"
    )
    deviation_deg: float = Field(
        default=30.0, ge=0, le=180, description="传播方向随机偏离范围（度）"
    )
    speed: float = Field(default=1.0, ge=0, description="全局速度系数")
    seed: int = Field(default=0, ge=0, description="随机种子")
    randomness: RandomnessVariant = Field(
        default=RandomnessVariant.RAND1, description="随机源变体"
    )

    @field_validator("octaves")
    def validate_octaves(cls, v):
        """验证八度数不超过容量上限。"""
        if v > settings.max_octaves:
            raise ValueError(f"octaves must be at most {settings.max_octaves}")
        return v

    @field_validator("waves_per_octave")
    def validate_waves_per_octave(cls, v):
        """验证每八度波数不超过容量上限。"""
        if v > settings.max_waves_per_octave:
            raise ValueError(
                f"waves_per_octave must be at most {settings.max_waves_per_octave}"
            )
        return v

    @model_validator(mode="after")
    def validate_total_waves(self):
        """验证总波数不超过波浪库容量。"""
        if self.total_waves > settings.max_total_waves:
            raise ValueError(
                f"octaves * waves_per_octave must be at most "
                f"{settings.max_total_waves}, got {self.total_waves}"
            )
        return self

    @property
    def total_waves(self) -> int:
        """总波数。"""
        return self.octaves * self.waves_per_octave


class SurfaceConfig(BaseModel):
    """海面分类参数（海平面遮罩、泡沫、破碎）。"""

    model_config = {"frozen": True}

    sea_level: float = Field(default=0.0, description="海平面高度")
    sea_level_ramp: bool = Field(default=False, description="是否启用海平面渐变")
    sea_level_ramp_size: float = Field(
        default=1.0, gt=0, description="海平面以下渐变带宽度"
    )
    sea_level_ramp_k: float = Field(
        default=0.0,
        ge=-50,
        le=50,
        description="海平面渐变曲线形状，0 为线性，>0 指数，<0 对数",
    )
    foam_threshold: float = Field(default=0.5, description="泡沫雅可比阈值")
    foam_ramp: bool = Field(default=False, description="是否启用泡沫渐变")
    foam_ramp_size: float = Field(default=0.5, gt=0, description="泡沫渐变带宽度")
    foam_ramp_k: float = Field(
        default=0.0, ge=-50, le=50, description="泡沫渐变曲线形状"
    )
    foam_two_brightness: float = Field(
        default=1.0, ge=0, description="第二泡沫遮罩亮度"
    )
    foam_two_threshold: float = Field(
        default=0.0, description="第二泡沫遮罩阈值"
    )


class SampleConfig(BaseModel):
    """表面采样坐标（UV + 可选的备用 UV 通道 + 常量偏移）。"""

    u: float = Field(default=0.0, description="主 UV 通道 u 坐标")
    v: float = Field(default=0.0, description="主 UV 通道 v 坐标")
    uv_set: Optional[str] = Field(
        default=None, description="备用 UV 通道名，None 表示使用主通道"
    )
    uv_sets: Dict[str, Tuple[float, float]] = Field(
        default_factory=dict, description="可用的备用 UV 通道值"
    )
    offset_u: float = Field(default=0.0, description="u 方向常量偏移")
    offset_v: float = Field(default=0.0, description="v 方向常量偏移")


class Region(BaseModel):
    """矩形采样区域（表面坐标）。"""

    x_min: float = Field(..., description="最小 x 坐标")
    y_min: float = Field(..., description="最小 y 坐标")
    x_max: float = Field(..., description="最大 x 坐标")
    y_max: float = Field(..., description="最大 y 坐标")

    @field_validator("x_max")
    def validate_x_range(cls, v, info):
        """验证 x 范围合理性。"""
        if "x_min" in info.data and v <= info.data["x_min"]:
            raise ValueError("x_max must be greater than x_min")
        return v

    @field_validator("y_max")
    def validate_y_range(cls, v, info):
        """验证 y 范围合理性。"""
        if "y_min" in info.data and v <= info.data["y_min"]:
            raise ValueError("y_max must be greater than y_min")
        return v


class DiscretizationConfig(BaseModel):
    """空间离散化配置。"""

    dx: float = Field(default=1.0, gt=0, description="x 方向离散间隔")
    dy: float = Field(default=1.0, gt=0, description="y 方向离散间隔")
    max_points: int = Field(
        default=settings.max_grid_points,
        ge=1,
        description="最大离散点数量上限，用于控制性能和内存",
    )


class TimeConfig(BaseModel):
    """时间序列配置。"""

    t_start: float = Field(default=0.0, description="起始时间（秒）")
    dt: float = Field(default=0.2, gt=0, description="帧间隔（秒）")
    n_frames: int = Field(default=1, ge=1, le=1000, description="帧数")

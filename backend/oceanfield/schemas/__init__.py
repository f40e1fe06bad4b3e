"""
Pydantic Schema 模块。

包含请求/响应模型、配置模型、数据模型等。
"""

from oceanfield.schemas.api import (
    ErrorResponse,
    FramesEvaluationRequest,
    FramesResponse,
    GridEvaluationRequest,
    PointEvaluationRequest,
    PointEvaluationResponse,
    WaveBankRequest,
    WaveBankResponse,
)
from oceanfield.schemas.base import (
    DiscretizationConfig,
    OutputMode,
    RandomnessVariant,
    Region,
    SampleConfig,
    SurfaceConfig,
    TimeConfig,
    WaveBankConfig,
)
from oceanfield.schemas.data import (
    SurfaceFrame,
    SurfacePoint,
    SurfaceSample,
    WaveRecord,
)

__all__ = [
    # 基础配置
    "WaveBankConfig",
    "SurfaceConfig",
    "SampleConfig",
    "Region",
    "DiscretizationConfig",
    "TimeConfig",
    "RandomnessVariant",
    "OutputMode",
    # 数据模型
    "WaveRecord",
    "SurfaceSample",
    "SurfacePoint",
    "SurfaceFrame",
    # API 请求/响应
    "WaveBankRequest",
    "WaveBankResponse",
    "PointEvaluationRequest",
    "PointEvaluationResponse",
    "GridEvaluationRequest",
    "FramesEvaluationRequest",
    "FramesResponse",
    "ErrorResponse",
]

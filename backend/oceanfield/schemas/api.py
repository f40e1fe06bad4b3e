"""
API 请求/响应 Schema 定义。
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from oceanfield.schemas.base import (
    DiscretizationConfig,
    OutputMode,
    Region,
    SampleConfig,
    SurfaceConfig,
    TimeConfig,
    WaveBankConfig,
)
from oceanfield.schemas.data import SurfaceFrame, SurfaceSample, WaveRecord


class WaveBankRequest(BaseModel):
    """构建波浪库请求体。"""

    waves: WaveBankConfig = Field(default_factory=WaveBankConfig)


class WaveBankResponse(BaseModel):
    """构建波浪库的响应。"""

    total_waves: int = Field(..., description="波成分总数")
    waves: List[WaveRecord] = Field(..., description="波成分列表")


class PointEvaluationRequest(BaseModel):
    """单点求值请求体。"""

    waves: WaveBankConfig = Field(default_factory=WaveBankConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    sample: SampleConfig = Field(default_factory=SampleConfig)
    time: float = Field(default=0.0, description="时间（秒）", examples=[0.0])
    output_mode: OutputMode = Field(default=OutputMode.DISPLACEMENT)


class GridEvaluationRequest(BaseModel):
    """区域网格单时刻求值请求体。"""

    waves: WaveBankConfig = Field(default_factory=WaveBankConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    region: Region
    discretization: DiscretizationConfig = Field(
        default_factory=DiscretizationConfig
    )
    time: float = Field(default=0.0, description="时间（秒）")
    output_mode: OutputMode = Field(default=OutputMode.DISPLACEMENT)


class FramesEvaluationRequest(BaseModel):
    """区域网格时间序列求值请求体。"""

    waves: WaveBankConfig = Field(default_factory=WaveBankConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    region: Region
    discretization: DiscretizationConfig = Field(
        default_factory=DiscretizationConfig
    )
    time: TimeConfig = Field(default_factory=TimeConfig)
    output_mode: OutputMode = Field(default=OutputMode.DISPLACEMENT)


class PointEvaluationResponse(BaseModel):
    """单点求值响应体。"""

    sample: SurfaceSample


class FramesResponse(BaseModel):
    """区域求值结果（多帧）。"""

    total_waves: int = Field(..., description="参与求值的波成分总数")
    frames: List[SurfaceFrame] = Field(..., description="求值时间序列帧")


class ErrorResponse(BaseModel):
    """通用错误响应。"""

    code: str = Field(..., description="错误码")
    message: str = Field(..., description="错误描述")
    details: Optional[Dict] = Field(
        default=None, description="可选的详细错误信息"
    )

"""
数据 Schema 定义。

包含波成分记录、采样结果、网格帧等数据模型。
"""

from typing import List

from pydantic import BaseModel, Field

from oceanfield.schemas.base import OutputMode, Region

Vector3 = List[float]


class WaveRecord(BaseModel):
    """波浪库中单个波成分的可序列化表示。"""

    index: int = Field(..., description="全局索引")
    octave: int = Field(..., description="所属八度")
    local_index: int = Field(..., description="八度内索引")
    wavelength: float = Field(..., description="波长")
    amplitude: float = Field(..., description="振幅")
    direction: Vector3 = Field(..., description="传播方向（单位向量，z=0）")
    angular_frequency: float = Field(..., description="角频率 w = 2 / 波长")
    steepness: float = Field(..., description="陡度系数 q")
    phase_speed: float = Field(..., description="相速度 phi")


class SurfaceSample(BaseModel):
    """单个采样点的完整求值结果。"""

    u: float = Field(..., description="采样点 u 坐标")
    v: float = Field(..., description="采样点 v 坐标")
    time: float = Field(..., description="时间（秒）")
    displacement: Vector3 = Field(..., description="位移向量")
    normal: Vector3 = Field(..., description="表面法线")
    tangent: Vector3 = Field(..., description="切线（对 v 的偏导）")
    bitangent: Vector3 = Field(..., description="副切线（对 u 的偏导）")
    jacobian_xx: float
    jacobian_xy: float
    jacobian_yy: float
    determinant: float = Field(..., description="雅可比行列式 J")
    sea_level_mask: float
    break_mask: float
    foam_mask: float
    foam_mask_two: float
    output: Vector3 = Field(..., description="按输出模式选择的颜色")


class SurfacePoint(BaseModel):
    """某一时刻网格上某一点的求值结果。"""

    x: float = Field(..., description="采样点 x 坐标")
    y: float = Field(..., description="采样点 y 坐标")
    displacement: Vector3 = Field(..., description="位移向量")
    output: Vector3 = Field(..., description="按输出模式选择的颜色")


class SurfaceFrame(BaseModel):
    """某一时刻的区域海面求值结果。"""

    time: float = Field(..., description="时间（秒）")
    region: Region = Field(..., description="区域定义")
    output_mode: OutputMode = Field(..., description="输出模式")
    points: List[SurfacePoint] = Field(..., description="区域内离散点的求值结果")

"""
海面求值相关 API 路由。
"""

import logging

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from oceanfield.core.config import settings
from oceanfield.core.errors import ConfigurationError
from oceanfield.schemas.api import (
    FramesEvaluationRequest,
    FramesResponse,
    GridEvaluationRequest,
    PointEvaluationRequest,
    PointEvaluationResponse,
)
from oceanfield.schemas.base import TimeConfig
from oceanfield.services.surface import evaluate_sample, simulate_frames
from oceanfield.services.wave_bank import build_wave_bank

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


def _check_grid_limit(discretization) -> None:
    """网格点数上限不得超过全局配置。"""
    if discretization.max_points > settings.max_grid_points:
        raise ConfigurationError(
            [
                f"discretization.max_points must be at most "
                f"{settings.max_grid_points}, got {discretization.max_points}"
            ]
        )


@router.post(
    "/point",
    response_model=PointEvaluationResponse,
    summary="单点海面求值",
)
async def evaluate_point(request: PointEvaluationRequest) -> PointEvaluationResponse:
    """
    在单个采样点与时刻求值位移、法线、切线与各类遮罩。
    """
    bank = build_wave_bank(request.waves)
    sample = evaluate_sample(
        bank,
        request.sample,
        request.time,
        request.surface,
        request.output_mode,
    )
    return PointEvaluationResponse(sample=sample)


@router.post(
    "/grid",
    response_model=FramesResponse,
    summary="区域网格单时刻求值",
)
async def evaluate_grid(request: GridEvaluationRequest) -> FramesResponse:
    """
    在区域网格上求值单个时刻，返回一帧。
    """
    _check_grid_limit(request.discretization)
    time_config = TimeConfig(t_start=request.time, n_frames=1)
    frames = await run_in_threadpool(
        simulate_frames,
        request.waves,
        request.region,
        request.discretization,
        time_config,
        request.surface,
        request.output_mode,
    )
    return FramesResponse(total_waves=request.waves.total_waves, frames=frames)


@router.post(
    "/frames",
    response_model=FramesResponse,
    summary="区域网格时间序列求值",
)
async def evaluate_frames(request: FramesEvaluationRequest) -> FramesResponse:
    """
    在区域网格上求值一段时间序列，波浪库在所有帧之间复用。
    """
    _check_grid_limit(request.discretization)
    frames = await run_in_threadpool(
        simulate_frames,
        request.waves,
        request.region,
        request.discretization,
        request.time,
        request.surface,
        request.output_mode,
    )
    logger.debug(f"Returned {len(frames)} frames")
    return FramesResponse(total_waves=request.waves.total_waves, frames=frames)

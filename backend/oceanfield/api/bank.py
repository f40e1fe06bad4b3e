"""
波浪库相关 API 路由。
"""

from fastapi import APIRouter

from oceanfield.schemas.api import WaveBankRequest, WaveBankResponse
from oceanfield.schemas.data import WaveRecord
from oceanfield.services.wave_bank import build_wave_bank

router = APIRouter(tags=["bank"])


@router.post(
    "/bank",
    response_model=WaveBankResponse,
    summary="构建波浪库",
)
async def create_wave_bank(request: WaveBankRequest) -> WaveBankResponse:
    """
    根据波浪库参数构建波浪库并返回全部波成分。

    相同参数总是返回相同结果。
    """
    bank = build_wave_bank(request.waves)
    return WaveBankResponse(
        total_waves=len(bank),
        waves=[
            WaveRecord(
                index=wave.index,
                octave=wave.octave,
                local_index=wave.local_index,
                wavelength=wave.wavelength,
                amplitude=wave.amplitude,
                direction=list(wave.direction),
                angular_frequency=wave.angular_frequency,
                steepness=wave.steepness,
                phase_speed=wave.phase_speed,
            )
            for wave in bank
        ],
    )

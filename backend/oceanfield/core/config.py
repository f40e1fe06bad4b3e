"""
全局配置模块。

集中管理：
- 波浪库容量上限（八度数、每八度波数、总波数）
- 网格采样点数上限
- 日志级别
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置，可通过 OCEANFIELD_ 前缀的环境变量覆盖。"""

    model_config = SettingsConfigDict(env_prefix="OCEANFIELD_")

    app_name: str = "OceanField Backend"
    log_level: str = "INFO"

    # 容量上限（与原着色器的固定数组容量一致）
    max_octaves: int = 12
    max_waves_per_octave: int = 32
    max_total_waves: int = 384

    # 网格求值时的采样点数上限
    max_grid_points: int = 5000


settings = Settings()

"""
FastAPI 应用入口。
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from oceanfield import __version__
from oceanfield.api import api_router
from oceanfield.core.config import settings
from oceanfield.core.errors import ConfigurationError, OceanFieldError
from oceanfield.schemas.api import ErrorResponse

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """按配置初始化日志。"""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理器。

    处理应用启动和关闭事件。
    """
    logger.info(
        f"Starting backend server (capacity: {settings.max_octaves} octaves, "
        f"{settings.max_waves_per_octave} waves/octave, "
        f"{settings.max_total_waves} total)..."
    )

    yield

    logger.info("Backend server shutdown complete.")


async def ocean_field_error_handler(request: Request, exc: OceanFieldError):
    """将模型参数错误转换为 400 响应。"""
    details = None
    if isinstance(exc, ConfigurationError):
        details = {"violations": exc.violations}
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    body = ErrorResponse(code="invalid_configuration", message=str(exc), details=details)
    return JSONResponse(status_code=400, content=body.model_dump())


def create_app() -> FastAPI:
    """创建并配置 FastAPI 应用实例。"""
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="程序化海面位移与泡沫/破碎分类服务",
        lifespan=lifespan,
    )

    # 配置 CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(OceanFieldError, ocean_field_error_handler)

    # 挂载 API 路由
    app.include_router(api_router, prefix="/api")

    @app.get("/", tags=["root"])
    async def root():
        """根路径。"""
        return {
            "message": "OceanField Backend API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health", tags=["health"])
    async def health():
        """健康检查。"""
        return {"status": "healthy"}

    return app


app = create_app()

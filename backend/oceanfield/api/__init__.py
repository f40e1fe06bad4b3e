"""
HTTP API 模块。
"""

from oceanfield.api.router import api_router

__all__ = ["api_router"]

"""
API 路由主文件。

统一管理所有 API 路由。
"""

from fastapi import APIRouter

from oceanfield.api import bank, evaluate

api_router = APIRouter()

# 挂载子路由
api_router.include_router(bank.router)
api_router.include_router(evaluate.router)

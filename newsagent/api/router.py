from fastapi import APIRouter
from .v1 import health
from .v1 import news


api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(news.router)
api_router.include_router(news.router, prefix="/mcp")
api_router.include_router(news.mcp_router, prefix="/mcp")

from fastapi import APIRouter

from robot_logs.interfaces.http.routers import logs


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(logs.router, prefix="/logs", tags=["logs"])
    return router


__all__ = [
    "create_api_router",
]

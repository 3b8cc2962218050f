from fastapi import APIRouter

from .grade import grade_router

v1_router = APIRouter(prefix="/api/v1", tags=["v1"])
v1_router.include_router(grade_router)

__all__ = ["v1_router"]

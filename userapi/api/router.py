"""API router aggregation.

/health sits at the root; everything else lives under /api.
"""

from fastapi import APIRouter

from userapi.api.endpoints import diagnostics, health, users

api_router = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(diagnostics.router, tags=["diagnostics"])

health_router = APIRouter()
health_router.include_router(health.router, prefix="/health", tags=["health"])

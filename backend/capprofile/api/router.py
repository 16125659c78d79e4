"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from capprofile.api.health import router as health_router
from capprofile.api.checks import router as checks_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Profile identity + alert checks
api_router.include_router(checks_router, tags=["Checks"])

"""API v1 router aggregation."""

from fastapi import APIRouter

from growthcheck.api.v1.endpoints import health, predictions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(predictions.router, prefix="/predictions", tags=["predictions"])

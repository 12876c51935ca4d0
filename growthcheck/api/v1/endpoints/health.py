"""Health check endpoint for load balancers and monitoring."""

import os

from fastapi import APIRouter

from growthcheck.core.config import get_settings

router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check. Optionally includes built_at if BACKEND_BUILT_AT env is set."""
    payload: dict = {"status": "ok", "environment": get_settings().environment}
    built_at = os.environ.get("BACKEND_BUILT_AT") or os.environ.get("RENDER_GIT_COMMIT_TIMESTAMP")
    if built_at:
        payload["built_at"] = built_at
    return payload

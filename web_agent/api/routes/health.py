"""Health check endpoint."""

import time

from fastapi import APIRouter

router = APIRouter()


@router.get("")
async def health_check():
    """Minimal health check; touches no downstream services."""
    return {
        "status": "ok",
        "timestamp": int(time.time() * 1000),
    }

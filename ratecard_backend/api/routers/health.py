"""
Health check API endpoint.

Routes: GET /health

System role: Unauthenticated liveness probe
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ratecard_backend.models.common import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))

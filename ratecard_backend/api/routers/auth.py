"""
Auth probe endpoint.

Routes: GET /auth/check

System role: Lets clients verify their bearer token
"""

from fastapi import APIRouter, Depends

from ratecard_backend.api.deps import require_data_engineer
from ratecard_backend.models.common import AuthCheckResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/check", response_model=AuthCheckResponse)
async def check_auth(role: str = Depends(require_data_engineer)) -> AuthCheckResponse:
    """Confirm the caller's token is valid."""
    return AuthCheckResponse(authenticated=True, role=role)

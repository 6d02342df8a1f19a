"""
Bearer token authorization.

Every data engineer endpoint requires `Authorization: Bearer <token>`
matching the configured API token.

Dependencies: fastapi.security, ratecard_backend.configs
System role: Request authorization
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ratecard_backend.api.deps.dependencies import get_settings_dependency
from ratecard_backend.configs import Settings

logger = logging.getLogger(__name__)

UNAUTHORIZED_DETAIL = "Unauthorized access"

_bearer_scheme = HTTPBearer(auto_error=False)


async def require_data_engineer(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """
    Verify the bearer token.

    Returns:
        str: Role granted to the caller

    Raises:
        HTTPException(401): Missing, malformed or wrong token
    """
    expected = settings.auth.api_token
    # Bytes comparison; str compare_digest rejects non-ASCII header values
    if credentials is None or not secrets.compare_digest(
        credentials.credentials.encode("utf-8"), expected.encode("utf-8")
    ):
        logger.warning("Rejected request with invalid bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return settings.auth.role

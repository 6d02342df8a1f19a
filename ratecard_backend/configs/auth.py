"""
Authentication configuration settings.

Dependencies: pydantic_settings
System role: Static bearer token for the data engineer API
"""

from pydantic import Field

from ratecard_backend.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Static bearer token configuration."""

    api_token: str = Field(
        default="data_engineer_test_token",
        description="Bearer token required on data engineer endpoints",
    )
    role: str = Field(
        default="data_engineer",
        description="Role reported by the auth check endpoint",
    )

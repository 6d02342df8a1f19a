"""
Upload configuration settings.

Where uploaded rate cards are staged and how large they may be.

Dependencies: pydantic, pydantic_settings
System role: Upload validation limits and staging directory
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ratecard_backend.configs.base import BaseSettings


class UploadSettings(BaseSettings):
    """Upload staging configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UPLOAD_",
        case_sensitive=False,
        extra="ignore",
    )

    dir: str = Field(default="uploads", description="Staging directory for uploads")
    max_file_size_mb: int = Field(default=50, gt=0, description="Maximum upload size in MB")

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum upload size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

"""
Upload staging and download helpers.

Dependencies: fastapi
System role: File I/O helpers for upload and export endpoints
"""

import logging
import uuid
from pathlib import Path

from fastapi import Response

logger = logging.getLogger(__name__)


def save_upload(content: bytes, file_name: str, upload_dir: str) -> str:
    """
    Write uploaded bytes to a uniquely named file in the upload directory.

    The original extension is kept so the text extractor can pick a loader.

    Args:
        content: Uploaded file bytes
        file_name: Original upload name
        upload_dir: Staging directory, created if missing

    Returns:
        str: Path of the staged file
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / f"{uuid.uuid4().hex}_{Path(file_name).name}"
    path.write_bytes(content)

    logger.info(
        "File saved to upload directory",
        extra={"temp_path": str(path), "size": len(content)},
    )
    return str(path)


def csv_attachment(content: str, file_name: str) -> Response:
    """Build a text/csv download response."""
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )

"""Shared router helpers."""

from .error_handling import handle_ratecard_errors
from .file_utils import csv_attachment, save_upload

__all__ = [
    "csv_attachment",
    "handle_ratecard_errors",
    "save_upload",
]

"""
Rate card extraction core.

Exports: ExtractionProvider, RawExtraction, RatecardEntryData, TextExtractor,
normalize_extraction, build_job_csv, build_all_entries_csv
"""

from .csv_export import build_all_entries_csv, build_job_csv
from .normalizer import (
    normalize_extraction,
    normalize_reasoning_output,
    normalize_structured_output,
)
from .ratecard_schema import (
    Confidence,
    ExtractionProvider,
    RatecardEntryData,
    RawExtraction,
)
from .text_extractor import TextExtractor

__all__ = [
    "Confidence",
    "ExtractionProvider",
    "RatecardEntryData",
    "RawExtraction",
    "TextExtractor",
    "normalize_extraction",
    "normalize_reasoning_output",
    "normalize_structured_output",
    "build_job_csv",
    "build_all_entries_csv",
]

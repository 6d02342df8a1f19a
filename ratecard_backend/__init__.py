"""Rate card extraction service: document upload, LLM extraction, CSV export."""

__version__ = "0.1.0"

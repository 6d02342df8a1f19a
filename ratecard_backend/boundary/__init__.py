"""Boundary adapters: database persistence and LLM extraction clients."""

"""Domain core: exceptions and rate card extraction logic."""

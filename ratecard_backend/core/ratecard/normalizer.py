"""
Rate card result normalizer.

Converts each extraction provider's completion into canonical
RatecardEntryData records. Normalizers are pure functions of their input and
never raise on malformed completions: unparseable output yields no entries.

Dependencies: json, re, pydantic
System role: Provider output to canonical entry reshaping
"""

import json
import logging
import re
from collections.abc import Callable
from typing import Any

from .ratecard_schema import (
    Confidence,
    ExtractionProvider,
    RatecardEntryData,
    RawExtraction,
)

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "$"

# Greedy: first "[" through last "]" of the completion
_JSON_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")

_TEXT_FIELDS = (
    "media_type",
    "media_format",
    "placement_name",
    "dimensions",
    "cost_media_4weeks",
    "production_cost",
    "total_cost",
    "notes",
)


def _as_text(value: Any) -> str | None:
    """Render a scalar provider value as a display string."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def _as_page(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _as_confidence(value: Any) -> Confidence:
    if isinstance(value, str):
        try:
            return Confidence(value.strip().lower())
        except ValueError:
            pass
    return Confidence.MEDIUM


def _lookup(item: dict, field_name: str) -> Any:
    """Read a canonical field by its camelCase alias, falling back to snake_case."""
    alias = RatecardEntryData.model_fields[field_name].alias or field_name
    if alias in item:
        return item[alias]
    return item.get(field_name)


def _format_amount(currency: str, amount: Any) -> str | None:
    # Falsy rates (missing, null, 0, "") produce no cost string
    if not amount:
        return None
    return f"{currency}{_as_text(amount)}"


def normalize_reasoning_output(content: str) -> list[RatecardEntryData]:
    """
    Normalize a free-form completion that should contain a JSON array.

    The array items already follow the canonical camelCase shape. Unknown keys
    are dropped, scalar values are rendered as strings and a missing or
    unrecognised confidence falls back to medium.

    Args:
        content: Completion text from the reasoning provider

    Returns:
        list[RatecardEntryData]: Canonical entries, empty when no array parses
    """
    if not isinstance(content, str):
        return []

    match = _JSON_ARRAY_PATTERN.search(content)
    if not match:
        logger.warning("No JSON array found in reasoning completion")
        return []

    try:
        items = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse reasoning completion", extra={"error": str(e)})
        return []

    if not isinstance(items, list):
        return []

    entries: list[RatecardEntryData] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        fields = {name: _as_text(_lookup(item, name)) for name in _TEXT_FIELDS}
        entries.append(
            RatecardEntryData(
                source_page=_as_page(_lookup(item, "source_page")),
                confidence=_as_confidence(item.get("confidence")),
                **fields,
            )
        )
    return entries


def normalize_structured_output(content: str | dict) -> list[RatecardEntryData]:
    """
    Flatten a nested media type payload into canonical entries.

    Produces one entry per (media type group, placement) pair. Cost strings are
    the placement currency (default "$") prefixed to the numeric rates.
    Confidence is always medium because this provider reports none.

    Args:
        content: JSON text or already-decoded payload from the structured provider

    Returns:
        list[RatecardEntryData]: Canonical entries, empty on malformed payloads
    """
    payload: Any = content
    if isinstance(content, str):
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse structured completion", extra={"error": str(e)})
            return []

    if not isinstance(payload, dict):
        return []

    groups = payload.get("mediaTypes")
    if not isinstance(groups, list):
        return []

    additional_terms = _as_text(payload.get("additionalTerms"))
    entries: list[RatecardEntryData] = []

    for group in groups:
        if not isinstance(group, dict):
            continue
        placements = group.get("placements") or []
        if not isinstance(placements, list):
            continue

        media_type = _as_text(group.get("type"))
        for placement in placements:
            if not isinstance(placement, dict):
                continue

            name = _as_text(placement.get("name"))
            size = _as_text(placement.get("size"))
            currency = _as_text(placement.get("currency")) or DEFAULT_CURRENCY
            base_rate = _format_amount(currency, placement.get("baseRate"))

            entries.append(
                RatecardEntryData(
                    media_type=media_type,
                    media_format=size or name,
                    placement_name=name or size,
                    dimensions=size,
                    cost_media_4weeks=base_rate,
                    production_cost=_format_amount(currency, placement.get("discountedRate")),
                    total_cost=base_rate,
                    notes=_as_text(placement.get("notes")) or additional_terms,
                    confidence=Confidence.MEDIUM,
                )
            )

    return entries


_NORMALIZERS: dict[ExtractionProvider, Callable[[str], list[RatecardEntryData]]] = {
    ExtractionProvider.ANTHROPIC: normalize_reasoning_output,
    ExtractionProvider.OPENAI: normalize_structured_output,
}


def normalize_extraction(raw: RawExtraction) -> list[RatecardEntryData]:
    """
    Normalize a provider completion using the normalizer for its provider.

    Args:
        raw: Completion tagged with the provider that produced it

    Returns:
        list[RatecardEntryData]: Canonical entries
    """
    return _NORMALIZERS[raw.provider](raw.content)

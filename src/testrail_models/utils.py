"""JSON helpers shared by every record type."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar

from testrail_models.exceptions import ParseError

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def epoch_to_datetime(seconds: int) -> datetime:
    """Convert TestRail epoch seconds to an aware UTC datetime."""
    return EPOCH + timedelta(seconds=seconds)


def datetime_to_epoch(value: datetime) -> int:
    """Convert a datetime to epoch seconds. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int((value - EPOCH).total_seconds())


def has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def convert_list(items: Iterable[Any], parse: Callable[[Any], T]) -> list[T]:
    """Map every element of a JSON array through *parse*, keeping order."""
    return [parse(item) for item in items]


def load_json_object(text: str | bytes, record_type: str = "JSON object") -> dict[str, Any]:
    """Decode *text* and return the top-level JSON object.

    Raises:
        ParseError: If the text is not valid JSON or not an object.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(record_type, [f"invalid JSON: {exc}"]) from exc
    if not isinstance(payload, dict):
        raise ParseError(record_type, [f"expected a JSON object, got {type(payload).__name__}"])
    return payload

"""Annotated field types shared by the record models.

TestRail sends unsigned ids and counts as plain JSON numbers, flags as JSON
booleans and dates as integer seconds since the Unix epoch. These aliases
carry those wire rules so each record only has to declare ``id: UInt64`` or
``created_on: EpochDateTime``.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer, ValidationInfo

from testrail_models.exceptions import ParseError
from testrail_models.utils import datetime_to_epoch, epoch_to_datetime

if TYPE_CHECKING:
    from testrail_models.models.base import TestRailType

FROM_RESPONSE = "testrail_response"
"""Validation-context flag set by ``TestRailType.parse``."""

UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
UInt64 = Annotated[int, Field(ge=0, le=2**64 - 1)]


def _coerce_bool(value: Any) -> Any:
    # JSON true/false, plus the 0/1 some TestRail versions send for flags.
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError("expected a JSON boolean")


WireBool = Annotated[bool, BeforeValidator(_coerce_bool)]


def _epoch_seconds(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("expected integer seconds since the Unix epoch")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError("expected integer seconds since the Unix epoch")


def _coerce_epoch(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    seconds = _epoch_seconds(value)
    try:
        return epoch_to_datetime(seconds)
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"epoch seconds out of range: {seconds}") from exc


EpochDateTime = Annotated[
    datetime,
    BeforeValidator(_coerce_epoch),
    PlainSerializer(datetime_to_epoch, return_type=int),
]


def is_response(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get(FROM_RESPONSE))


def _prefix_errors(location: str, errors: list[str]) -> list[str]:
    prefixed = []
    for error in errors:
        if error.startswith("<root>"):
            prefixed.append(location + error[len("<root>") :])
        else:
            prefixed.append(f"{location}.{error}")
    return prefixed


def records_from(record_type: type[TestRailType]) -> BeforeValidator:
    """Build a validator that parses a nested JSON array of *record_type*.

    While parsing a response, a JSON array is mapped element by element
    through ``record_type.parse`` so each child keeps its own raw JSON, and
    anything that is not an array becomes ``None``. A child that fails is
    reported with its position, e.g. ``entries.1.created_on``. Plain
    construction passes the value through to normal validation.
    """

    def convert(value: Any, info: ValidationInfo) -> Any:
        if not is_response(info):
            return value
        if not isinstance(value, list):
            return None
        records = []
        for index, item in enumerate(value):
            try:
                records.append(record_type.parse(item))
            except ParseError as exc:
                location = f"{info.field_name}.{index}"
                raise ParseError(exc.record_type, _prefix_errors(location, exc.errors)) from exc
        return records

    return BeforeValidator(convert)

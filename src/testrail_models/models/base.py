"""Base class for every TestRail record.

A record is read from an API response with :meth:`TestRailType.parse` and
written back as a sparse request payload with :meth:`TestRailType.get_json`.
Plain construction builds a record for a create/update request, so fields
the server fills in (ids, counts, timestamps) default to ``None`` there and
are only enforced when parsing a response.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, PrivateAttr, ValidationError

from testrail_models.exceptions import ParseError
from testrail_models.models.fields import FROM_RESPONSE
from testrail_models.utils import convert_list, load_json_object

logger = logging.getLogger(__name__)


def _format_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"]) or "<root>"
    return f"{location}: {error['msg']}"


def records_to_json(records: Iterable[TestRailType | None]) -> list[dict[str, Any]]:
    """Serialize nested records in order, skipping ``None`` elements."""
    return [record.get_json() for record in records if record is not None]


class TestRailType(BaseModel):
    """Common parse/serialize behaviour shared by all TestRail records."""

    __test__ = False

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "extra": "ignore",
        "coerce_numbers_to_str": True,
    }

    required_fields: ClassVar[tuple[str, ...]] = ()
    """Field names that must be present and non-null in a response."""

    _json_from_response: Mapping[str, Any] | None = PrivateAttr(default=None)

    @property
    def json_from_response(self) -> Mapping[str, Any] | None:
        """The JSON object this record was parsed from, if any."""
        return self._json_from_response

    @classmethod
    def _missing_required(cls, payload: Mapping[str, Any]) -> list[str]:
        errors: list[str] = []
        for name in cls.required_fields:
            key = cls.model_fields[name].alias or name
            if key not in payload:
                errors.append(f"{key}: Field required")
            elif payload[key] is None:
                errors.append(f"{key}: Field must not be null")
        return errors

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> Self:
        """Parse a JSON object from an API response into a record.

        Args:
            payload: Decoded JSON object.

        Returns:
            The fully populated record.

        Raises:
            ParseError: If *payload* is not an object, a required key is
                missing or null, or a value cannot be converted.
        """
        if not isinstance(payload, Mapping):
            raise ParseError(cls.__name__, [f"<root>: expected a JSON object, got {type(payload).__name__}"])

        errors = cls._missing_required(payload)
        if errors:
            logger.debug("Rejected %s payload: %s", cls.__name__, errors)
            raise ParseError(cls.__name__, errors)

        try:
            record = cls.model_validate(dict(payload), context={FROM_RESPONSE: True})
        except ValidationError as exc:
            errors = [_format_error(e) for e in exc.errors()]
            logger.debug("Rejected %s payload: %s", cls.__name__, errors)
            raise ParseError(cls.__name__, errors) from exc
        except ParseError as exc:
            # A nested record failed; its errors already carry their position.
            logger.debug("Rejected %s payload: %s", cls.__name__, exc.errors)
            raise ParseError(cls.__name__, exc.errors) from exc

        record._json_from_response = payload
        logger.debug("Parsed %s id=%s", cls.__name__, payload.get("id"))
        return record

    @classmethod
    def parse_list(cls, payload: Any) -> list[Self]:
        """Parse a JSON array of objects, preserving order."""
        if not isinstance(payload, list):
            raise ParseError(cls.__name__, [f"expected a JSON array, got {type(payload).__name__}"])
        return convert_list(payload, cls.parse)

    @classmethod
    def parse_text(cls, text: str | bytes) -> Self:
        """Decode a JSON response body and parse it."""
        return cls.parse(load_json_object(text, cls.__name__))

    def get_json(self) -> dict[str, Any]:
        """Build the sparse request payload for this record.

        Raises:
            NotImplementedError: If not implemented by the record subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__}.get_json() not implemented")

    def __str__(self) -> str:
        return getattr(self, "name", None) or ""

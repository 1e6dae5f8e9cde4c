"""Custom exception hierarchy for testrail_models.

All library exceptions inherit from :class:`TestRailError`, so callers can
catch any mapping failure with a single ``except`` clause.
"""

from __future__ import annotations


class TestRailError(Exception):
    """Base exception for all testrail_models errors."""

    # Keep pytest from collecting this class because of its name.
    __test__ = False


class ParseError(TestRailError):
    """Raised when a JSON object cannot be mapped onto a record.

    Attributes:
        record_type: Name of the record class being parsed.
        errors: Individual field error messages.
    """

    def __init__(self, record_type: str, errors: list[str]) -> None:
        self.record_type = record_type
        self.errors = errors
        joined = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Failed to parse {record_type}:\n{joined}")

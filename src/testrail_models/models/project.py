"""Project record."""

from __future__ import annotations

from typing import Any, ClassVar

from testrail_models.models.base import TestRailType
from testrail_models.models.enums import SuiteMode
from testrail_models.models.fields import EpochDateTime, UInt64, WireBool
from testrail_models.utils import has_text


class Project(TestRailType):
    """A TestRail project."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "id",
        "name",
        "is_completed",
        "show_announcement",
        "suite_mode",
    )

    id: UInt64 | None = None
    name: str | None = None
    announcement: str | None = None
    show_announcement: WireBool | None = None
    suite_mode: SuiteMode | None = None
    is_completed: WireBool | None = None
    completed_on: EpochDateTime | None = None
    url: str | None = None

    def get_json(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if has_text(self.name):
            params["name"] = self.name
        if has_text(self.announcement):
            params["announcement"] = self.announcement
        if self.show_announcement is not None:
            params["show_announcement"] = self.show_announcement
        if self.suite_mode is not None:
            params["suite_mode"] = int(self.suite_mode)
        if self.is_completed is not None:
            params["is_completed"] = self.is_completed
        return params

"""Test run record."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from testrail_models.models.base import TestRailType
from testrail_models.models.fields import EpochDateTime, UInt32, UInt64, WireBool
from testrail_models.utils import has_text


class Run(TestRailType):
    """A test run, standalone or inside a plan entry."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "id",
        "name",
        "is_completed",
        "project_id",
        "created_by",
        "created_on",
        "passed_count",
        "blocked_count",
        "untested_count",
        "retest_count",
        "failed_count",
        "custom_status1_count",
        "custom_status2_count",
        "custom_status3_count",
        "custom_status4_count",
        "custom_status5_count",
        "custom_status6_count",
        "custom_status7_count",
    )

    id: UInt64 | None = None
    name: str | None = None
    description: str | None = None
    suite_id: UInt64 | None = None
    milestone_id: UInt64 | None = None
    plan_id: UInt64 | None = None
    assigned_to_id: UInt64 | None = Field(default=None, alias="assignedto_id")
    include_all: WireBool | None = None
    case_ids: list[UInt64] | None = None
    config: str | None = None
    config_ids: list[UInt64] | None = None
    entry_id: str | None = None
    entry_index: UInt32 | None = None
    refs: str | None = None
    is_completed: WireBool | None = None
    completed_on: EpochDateTime | None = None
    created_by: UInt32 | None = None
    created_on: EpochDateTime | None = None
    project_id: UInt64 | None = None
    url: str | None = None

    passed_count: UInt32 | None = None
    blocked_count: UInt32 | None = None
    untested_count: UInt32 | None = None
    retest_count: UInt32 | None = None
    failed_count: UInt32 | None = None
    custom_status1_count: UInt64 | None = None
    custom_status2_count: UInt64 | None = None
    custom_status3_count: UInt64 | None = None
    custom_status4_count: UInt64 | None = None
    custom_status5_count: UInt64 | None = None
    custom_status6_count: UInt64 | None = None
    custom_status7_count: UInt64 | None = None

    def get_json(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.suite_id is not None:
            params["suite_id"] = self.suite_id
        if has_text(self.name):
            params["name"] = self.name
        if has_text(self.description):
            params["description"] = self.description
        if self.milestone_id is not None:
            params["milestone_id"] = self.milestone_id
        if self.assigned_to_id is not None:
            params["assignedto_id"] = self.assigned_to_id
        if self.include_all is not None:
            params["include_all"] = self.include_all
        if has_text(self.refs):
            params["refs"] = self.refs
        if self.case_ids:
            params["case_ids"] = list(self.case_ids)
        if self.config_ids:
            params["config_ids"] = list(self.config_ids)
        return params

"""Test plan record."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import Field

from testrail_models.models.base import TestRailType, records_to_json
from testrail_models.models.fields import EpochDateTime, UInt32, UInt64, WireBool, records_from
from testrail_models.models.plan_entry import PlanEntry
from testrail_models.utils import has_text


class Plan(TestRailType):
    """A test plan and its entries.

    Only ``name``, ``description``, ``milestone_id`` and ``entries`` are
    writable through ``add_plan``/``update_plan``; everything else is
    reported by the server.
    """

    required_fields: ClassVar[tuple[str, ...]] = (
        "id",
        "name",
        "created_by",
        "created_on",
        "is_completed",
        "passed_count",
        "blocked_count",
        "untested_count",
        "retest_count",
        "failed_count",
        "project_id",
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
    milestone_id: UInt64 | None = None
    created_by: UInt32 | None = None
    created_on: EpochDateTime | None = None
    is_completed: WireBool | None = None
    completed_on: EpochDateTime | None = None
    project_id: UInt64 | None = None
    assigned_to_id: UInt64 | None = Field(default=None, alias="assignedto_id")
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

    entries: Annotated[list[PlanEntry | None] | None, records_from(PlanEntry)] = None
    """Groups of test runs, in display order."""

    def get_json(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if has_text(self.name):
            params["name"] = self.name
        if has_text(self.description):
            params["description"] = self.description
        if self.milestone_id is not None:
            params["milestone_id"] = self.milestone_id
        if self.entries:
            params["entries"] = records_to_json(self.entries)
        return params

"""Plan entry record: a group of test runs inside a test plan."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field

from testrail_models.models.base import TestRailType, records_to_json
from testrail_models.models.fields import UInt64, WireBool, records_from
from testrail_models.models.run import Run
from testrail_models.utils import has_text


class PlanEntry(TestRailType):
    """One entry of a plan.

    Entries are returned inside ``get_plan`` and also sent as the body of
    ``add_plan_entry``, so every field is optional. ``id`` is the GUID the
    server assigns to the entry.
    """

    id: str | None = None
    suite_id: UInt64 | None = None
    name: str | None = None
    description: str | None = None
    assigned_to_id: UInt64 | None = Field(default=None, alias="assignedto_id")
    include_all: WireBool | None = None
    case_ids: list[UInt64] | None = None
    config_ids: list[UInt64] | None = None
    runs: Annotated[list[Run | None] | None, records_from(Run)] = None

    def get_json(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.suite_id is not None:
            params["suite_id"] = self.suite_id
        if has_text(self.name):
            params["name"] = self.name
        if has_text(self.description):
            params["description"] = self.description
        if self.assigned_to_id is not None:
            params["assignedto_id"] = self.assigned_to_id
        if self.include_all is not None:
            params["include_all"] = self.include_all
        if self.case_ids:
            params["case_ids"] = list(self.case_ids)
        if self.config_ids:
            params["config_ids"] = list(self.config_ids)
        if self.runs:
            params["runs"] = records_to_json(self.runs)
        return params

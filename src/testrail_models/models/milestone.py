"""Milestone record."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from testrail_models.models.base import TestRailType, records_to_json
from testrail_models.models.fields import EpochDateTime, UInt64, WireBool, records_from
from testrail_models.utils import datetime_to_epoch, has_text


class Milestone(TestRailType):
    """A milestone, optionally with sub-milestones."""

    required_fields: ClassVar[tuple[str, ...]] = ("id", "name", "is_completed", "project_id")

    id: UInt64 | None = None
    name: str | None = None
    description: str | None = None
    refs: str | None = None
    project_id: UInt64 | None = None
    parent_id: UInt64 | None = None
    is_completed: WireBool | None = None
    is_started: WireBool | None = None
    due_on: EpochDateTime | None = None
    start_on: EpochDateTime | None = None
    started_on: EpochDateTime | None = None
    completed_on: EpochDateTime | None = None
    url: str | None = None
    milestones: Annotated[list[Milestone | None] | None, records_from(Milestone)] = None

    def get_json(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if has_text(self.name):
            params["name"] = self.name
        if has_text(self.description):
            params["description"] = self.description
        if has_text(self.refs):
            params["refs"] = self.refs
        if self.parent_id is not None:
            params["parent_id"] = self.parent_id
        if self.due_on is not None:
            params["due_on"] = datetime_to_epoch(self.due_on)
        if self.start_on is not None:
            params["start_on"] = datetime_to_epoch(self.start_on)
        if self.is_completed is not None:
            params["is_completed"] = self.is_completed
        if self.is_started is not None:
            params["is_started"] = self.is_started
        return params


Milestone.model_rebuild()

"""Shared test fixtures for testrail_models tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def make_run_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": 81,
        "suite_id": 4,
        "name": "File Formats",
        "description": None,
        "milestone_id": 7,
        "assignedto_id": 6,
        "include_all": False,
        "is_completed": False,
        "completed_on": None,
        "config": "Firefox, Ubuntu 12",
        "config_ids": [2, 6],
        "passed_count": 2,
        "blocked_count": 0,
        "untested_count": 3,
        "retest_count": 1,
        "failed_count": 2,
        "custom_status1_count": 0,
        "custom_status2_count": 0,
        "custom_status3_count": 0,
        "custom_status4_count": 0,
        "custom_status5_count": 0,
        "custom_status6_count": 0,
        "custom_status7_count": 0,
        "project_id": 1,
        "plan_id": 80,
        "entry_index": 1,
        "entry_id": "3933d74b-4282-4c1f-be62-a641ab427063",
        "created_on": 1393845644,
        "created_by": 1,
        "url": "http://example.testrail.com/index.php?/runs/view/81",
    }
    payload.update(overrides)
    return payload


def make_entry_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "3933d74b-4282-4c1f-be62-a641ab427063",
        "suite_id": 4,
        "name": "File Formats",
        "description": None,
        "include_all": False,
        "runs": [make_run_payload()],
    }
    payload.update(overrides)
    return payload


def make_plan_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": 80,
        "name": "System test",
        "description": "Full regression before release",
        "milestone_id": 7,
        "assignedto_id": None,
        "created_by": 1,
        "created_on": 1393845644,
        "is_completed": False,
        "completed_on": None,
        "passed_count": 2,
        "blocked_count": 0,
        "untested_count": 3,
        "retest_count": 1,
        "failed_count": 2,
        "custom_status1_count": 0,
        "custom_status2_count": 0,
        "custom_status3_count": 0,
        "custom_status4_count": 0,
        "custom_status5_count": 0,
        "custom_status6_count": 0,
        "custom_status7_count": 0,
        "project_id": 1,
        "url": "http://example.testrail.com/index.php?/plans/view/80",
        "entries": [make_entry_payload()],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def run_payload() -> dict[str, Any]:
    """A complete ``get_run`` response object."""
    return make_run_payload()


@pytest.fixture
def entry_payload() -> dict[str, Any]:
    """A plan entry holding one run."""
    return make_entry_payload()


@pytest.fixture
def plan_payload() -> dict[str, Any]:
    """A complete ``get_plan`` response object with one entry."""
    return make_plan_payload()


@pytest.fixture
def milestone_payload() -> dict[str, Any]:
    """A ``get_milestone`` response object with one sub-milestone."""
    return {
        "id": 1,
        "name": "Release 1.5",
        "description": "Final release",
        "refs": "RF-1, RF-2",
        "project_id": 1,
        "parent_id": None,
        "is_completed": False,
        "is_started": True,
        "due_on": 1391968184,
        "start_on": 1389968184,
        "started_on": 1389968184,
        "completed_on": None,
        "url": "http://example.testrail.com/index.php?/milestones/view/1",
        "milestones": [
            {
                "id": 2,
                "name": "Release 1.5 RC",
                "project_id": 1,
                "parent_id": 1,
                "is_completed": True,
                "completed_on": 1389968184,
            }
        ],
    }


@pytest.fixture
def project_payload() -> dict[str, Any]:
    """A ``get_project`` response object."""
    return {
        "id": 1,
        "name": "Datahub",
        "announcement": "Welcome to project X",
        "show_announcement": True,
        "is_completed": False,
        "completed_on": None,
        "suite_mode": 3,
        "url": "http://example.testrail.com/index.php?/projects/overview/1",
    }


@pytest.fixture
def make_plan() -> Callable[..., dict[str, Any]]:
    """Factory for ``get_plan`` payloads with per-test overrides."""
    return make_plan_payload


@pytest.fixture
def make_entry() -> Callable[..., dict[str, Any]]:
    """Factory for plan entry payloads with per-test overrides."""
    return make_entry_payload


@pytest.fixture
def make_run() -> Callable[..., dict[str, Any]]:
    """Factory for ``get_run`` payloads with per-test overrides."""
    return make_run_payload

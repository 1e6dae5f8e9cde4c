"""TestRail record models.

Re-exports all public record classes for convenient access::

    from testrail_models.models import Plan, PlanEntry, Run
"""

from testrail_models.models.base import TestRailType
from testrail_models.models.enums import SuiteMode
from testrail_models.models.milestone import Milestone
from testrail_models.models.plan import Plan
from testrail_models.models.plan_entry import PlanEntry
from testrail_models.models.project import Project
from testrail_models.models.run import Run

__all__ = [
    "Milestone",
    "Plan",
    "PlanEntry",
    "Project",
    "Run",
    "SuiteMode",
    "TestRailType",
]

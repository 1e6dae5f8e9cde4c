"""Public API surface for testrail_models."""

__version__ = "0.1.0"

from testrail_models.exceptions import ParseError, TestRailError
from testrail_models.models import Milestone, Plan, PlanEntry, Project, Run, SuiteMode, TestRailType

__all__ = [
    "Milestone",
    "ParseError",
    "Plan",
    "PlanEntry",
    "Project",
    "Run",
    "SuiteMode",
    "TestRailError",
    "TestRailType",
    "__version__",
]

"""Enumerated types used across testrail_models."""

from __future__ import annotations

from enum import IntEnum


class SuiteMode(IntEnum):
    """How a project organizes its test suites."""

    SINGLE_SUITE = 1
    SINGLE_SUITE_BASELINES = 2
    MULTIPLE_SUITES = 3

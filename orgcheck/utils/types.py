"""Shared type definitions."""

from enum import StrEnum

type ValidationOutcome = dict[str, bool | str | list[str]]
type ReportFormat = str  # "table" | "json" | "summary"


class IssueKind(StrEnum):
    UNDERPAID = "underpaid"
    OVERPAID = "overpaid"


class AnalysisName(StrEnum):
    SALARIES = "salaries"
    REPORTING_LINES = "reporting-lines"
    ALL = "all"

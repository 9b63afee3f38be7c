"""Reporting-line depth checks: managers between an employee and the CEO."""

import logging
from dataclasses import dataclass

from orgcheck.config import DEFAULT_CONFIG, AnalyzerConfig
from orgcheck.models import Employee, EmployeeID
from orgcheck.org_structure import OrgIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportingLineIssue:
    employee: Employee
    reporting_line_length: int
    excess: int


@dataclass(frozen=True)
class ReportingLineAnalysisReport:
    issues: tuple[ReportingLineIssue, ...] = ()

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)


def reporting_line_length(index: OrgIndex, employee: Employee) -> int:
    """Count the managers above an employee, up to and including the CEO.

    The walk stops early at a manager id that does not resolve or that was
    already visited (a cycle); the count accumulated so far is returned.
    """
    length = 0
    visited: set[EmployeeID] = set()
    current = employee.manager_id

    while current:
        if current in visited:
            logger.debug("Cycle in reporting line of %r at %r", employee.employee_id, current)
            break
        visited.add(current)

        manager = index.get(current)
        if manager is None:
            logger.debug("Dangling manager %r in reporting line of %r", current, employee.employee_id)
            break

        length += 1
        current = manager.manager_id

    return length


def analyze_reporting_lines(
    index: OrgIndex,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> ReportingLineAnalysisReport:
    """Flag every non-CEO employee whose reporting line exceeds the limit."""
    limit = config.max_reporting_line_length
    issues = []

    for employee in index.employees():
        if employee.is_root:
            continue
        length = reporting_line_length(index, employee)
        if length > limit:
            issues.append(ReportingLineIssue(employee, length, length - limit))

    logger.info("Reporting line analysis: %d employees over %d managers", len(issues), limit)
    return ReportingLineAnalysisReport(issues=tuple(issues))

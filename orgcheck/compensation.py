"""Manager salary band checks against direct-report averages."""

import logging
from dataclasses import dataclass

import numpy as np

from orgcheck.config import DEFAULT_CONFIG, AnalyzerConfig
from orgcheck.models import Employee
from orgcheck.org_structure import OrgIndex
from orgcheck.utils.types import IssueKind

logger = logging.getLogger(__name__)

type SalaryRange = tuple[float, float]  # (min, max)


@dataclass(frozen=True)
class ManagerSalaryIssue:
    manager: Employee
    avg_subordinate_salary: float
    difference: float
    kind: IssueKind
    expected_salary: float  # the bound the salary falls outside of


@dataclass(frozen=True)
class SalaryAnalysisReport:
    underpaid: tuple[ManagerSalaryIssue, ...] = ()
    overpaid: tuple[ManagerSalaryIssue, ...] = ()

    @property
    def has_issues(self) -> bool:
        return bool(self.underpaid or self.overpaid)


def average_salary(employees: tuple[Employee, ...] | list[Employee]) -> float | None:
    if not employees:
        return None
    return float(np.mean([e.salary for e in employees]))


def salary_band(avg_subordinate_salary: float, config: AnalyzerConfig = DEFAULT_CONFIG) -> SalaryRange:
    return (
        avg_subordinate_salary * config.min_salary_ratio,
        avg_subordinate_salary * config.max_salary_ratio,
    )


def evaluate_manager_salary(
    manager: Employee,
    subordinates: tuple[Employee, ...],
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> ManagerSalaryIssue | None:
    """Return an issue if the manager's salary falls outside the band, else None.

    The band is inclusive: a salary exactly on either bound is compliant.
    """
    avg = average_salary(subordinates)
    if avg is None:
        return None

    min_expected, max_expected = salary_band(avg, config)
    if manager.salary < min_expected:
        return ManagerSalaryIssue(
            manager, avg, min_expected - manager.salary, IssueKind.UNDERPAID, min_expected
        )
    if manager.salary > max_expected:
        return ManagerSalaryIssue(
            manager, avg, manager.salary - max_expected, IssueKind.OVERPAID, max_expected
        )
    return None


def analyze_salaries(index: OrgIndex, config: AnalyzerConfig = DEFAULT_CONFIG) -> SalaryAnalysisReport:
    """Check every manager with direct reports against the salary band.

    Manager ids that do not resolve to an employee are skipped.
    """
    underpaid: list[ManagerSalaryIssue] = []
    overpaid: list[ManagerSalaryIssue] = []

    for manager_id, subordinates in index.subordinates_of.items():
        manager = index.get(manager_id)
        if manager is None:
            logger.debug("Skipping unknown manager %r with %d reports", manager_id, len(subordinates))
            continue

        match evaluate_manager_salary(manager, subordinates, config):
            case ManagerSalaryIssue(kind=IssueKind.UNDERPAID) as issue:
                underpaid.append(issue)
            case ManagerSalaryIssue(kind=IssueKind.OVERPAID) as issue:
                overpaid.append(issue)
            case None:
                pass

    logger.info(
        "Salary analysis: %d underpaid, %d overpaid managers", len(underpaid), len(overpaid)
    )
    return SalaryAnalysisReport(underpaid=tuple(underpaid), overpaid=tuple(overpaid))

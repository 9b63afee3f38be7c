"""Organizational index: employee lookup and manager -> direct reports map."""

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from orgcheck.models import Employee, EmployeeID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrgIndex:
    """Read-only snapshot of an employee list.

    ``by_id`` keeps the last record seen for a repeated id.
    ``subordinates_of`` is built from every record in source order, so it
    may name managers that have no entry in ``by_id``.
    """

    by_id: Mapping[EmployeeID, Employee]
    subordinates_of: Mapping[EmployeeID, tuple[Employee, ...]]
    duplicate_ids: frozenset[EmployeeID] = frozenset()

    @classmethod
    def from_employees(cls, employees: Iterable[Employee]) -> "OrgIndex":
        employees = list(employees)

        by_id: dict[EmployeeID, Employee] = {}
        for employee in employees:
            by_id[employee.employee_id] = employee

        tree: dict[EmployeeID, list[Employee]] = defaultdict(list)
        for employee in employees:
            if not employee.is_root:
                tree[employee.manager_id].append(employee)

        counts = Counter(e.employee_id for e in employees)
        duplicates = frozenset(eid for eid, n in counts.items() if n > 1)
        if duplicates:
            logger.warning(
                "Duplicate employee ids %s; keeping the last record for each",
                sorted(duplicates),
            )

        index = cls(
            by_id=MappingProxyType(by_id),
            subordinates_of=MappingProxyType({mgr: tuple(subs) for mgr, subs in tree.items()}),
            duplicate_ids=duplicates,
        )
        logger.info(
            "Built org index: %d employees, %d managers", len(by_id), len(index.subordinates_of)
        )
        return index

    def get(self, employee_id: EmployeeID | None) -> Employee | None:
        if employee_id is None:
            return None
        return self.by_id.get(employee_id)

    def subordinates(self, manager_id: EmployeeID) -> tuple[Employee, ...]:
        return self.subordinates_of.get(manager_id, ())

    def employees(self) -> list[Employee]:
        return list(self.by_id.values())

    def manager_ids(self) -> list[EmployeeID]:
        return list(self.subordinates_of.keys())

    def roots(self) -> list[Employee]:
        return [e for e in self.by_id.values() if e.is_root]

    def dangling_manager_ids(self) -> list[EmployeeID]:
        """Manager ids referenced by some employee but missing from the index."""
        return [mgr for mgr in self.subordinates_of if mgr not in self.by_id]

    def __len__(self) -> int:
        return len(self.by_id)

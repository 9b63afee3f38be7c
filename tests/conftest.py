from __future__ import annotations

from pathlib import Path

import pytest

from orgcheck.models import Employee

CSV_HEADER = "Id,firstName,lastName,salary,managerId"


def make_employee(
    employee_id: str,
    salary: float = 50_000,
    manager_id: str | None = None,
    first_name: str | None = None,
    last_name: str = "Doe",
) -> Employee:
    return Employee(
        employee_id=employee_id,
        first_name=first_name or f"Emp{employee_id}",
        last_name=last_name,
        salary=salary,
        manager_id=manager_id,
    )


def make_chain(length: int) -> list[Employee]:
    """CEO "1" plus ``length`` employees, each managed by the previous one."""
    employees = [make_employee("1", 200_000)]
    for n in range(2, length + 2):
        employees.append(make_employee(str(n), 50_000, str(n - 1)))
    return employees


@pytest.fixture
def small_org() -> list[Employee]:
    return [
        make_employee("1", 100_000, None, "Ceo"),
        make_employee("2", 45_000, "1", "Mgr"),
        make_employee("3", 50_000, "2", "Dev"),
        make_employee("4", 50_000, "2", "Dev"),
    ]


@pytest.fixture
def write_csv(tmp_path):
    def _write(*rows: str, header: str | None = CSV_HEADER, name: str = "employees.csv") -> Path:
        lines = ([header] if header is not None else []) + list(rows)
        path = tmp_path / name
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv) -> Path:
    return write_csv(
        "123,Joe,Doe,60000,",
        "124,Martin,Chekov,45000,123",
        "125,Bob,Ronstad,47000,123",
        "300,Alice,Hasacat,50000,124",
        "305,Brett,Hardleaf,34000,300",
    )

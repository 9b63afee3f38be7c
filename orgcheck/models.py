"""Employee record and the pandera schema for normalized record tables."""

from dataclasses import dataclass, field

import pandera.pandas as pa
from pandera.pandas import Check, Column

type EmployeeID = str
type SalaryAmount = float


@dataclass(frozen=True)
class Employee:
    employee_id: EmployeeID
    first_name: str = field(compare=False)
    last_name: str = field(compare=False)
    salary: SalaryAmount = field(compare=False)
    manager_id: EmployeeID | None = field(default=None, compare=False)

    @property
    def is_root(self) -> bool:
        """True for the CEO: an employee with no manager reference."""
        return not self.manager_id

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


REQUIRED_COLUMNS = ["employee_id", "first_name", "last_name", "salary", "manager_id"]


employee_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(str, Check.str_length(min_value=1)),
        "first_name": Column(str, Check.str_length(min_value=1)),
        "last_name": Column(str, Check.str_length(min_value=1)),
        "salary": Column(float, Check.greater_than_or_equal_to(0)),
        "manager_id": Column(str, nullable=True),  # "" for the CEO
    },
    strict=False,
)

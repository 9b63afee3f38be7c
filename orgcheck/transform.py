"""Normalize raw employee records and convert them to Employee values."""

import logging
from pathlib import Path

import pandas as pd

from orgcheck.ingest import ingest_employee_records
from orgcheck.models import REQUIRED_COLUMNS, Employee, employee_schema
from orgcheck.utils.transforms import normalize_columns
from orgcheck.utils.validators import validate_dataframe

logger = logging.getLogger(__name__)

COLUMN_MAPPING = {
    "id": "employee_id",
    "firstname": "first_name",
    "lastname": "last_name",
    "managerid": "manager_id",
    "manager": "manager_id",
}


def _record_number(index: int) -> int:
    return int(index) + 1


def _strip(value: str) -> str:
    return value.strip() if isinstance(value, str) else value


def normalize_employee_records(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Clean raw string records and validate them against ``employee_schema``.

    Raises ValueError for the first structural problem found (missing
    columns, short rows, non-numeric salaries) and otherwise one
    ValueError listing every schema failure.
    """
    df = normalize_columns(raw_df, COLUMN_MAPPING)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    df = df[REQUIRED_COLUMNS].reset_index(drop=True)
    if df.empty:
        logger.info("No employee records to normalize")
        return df.astype({"salary": float})

    short_rows = df.isna().any(axis=1)
    if short_rows.any():
        row = short_rows.idxmax()
        raise ValueError(
            f"Invalid record {_record_number(row)}: expected {len(REQUIRED_COLUMNS)} fields"
        )

    for col in REQUIRED_COLUMNS:
        df[col] = df[col].map(_strip)

    salaries = pd.to_numeric(df["salary"], errors="coerce")
    bad_salary = salaries.isna()
    if bad_salary.any():
        row = bad_salary.idxmax()
        raise ValueError(
            f"Invalid record {_record_number(row)}: invalid salary value {df.at[row, 'salary']!r}"
        )
    df["salary"] = salaries.astype(float)

    outcome = validate_dataframe(df, employee_schema)
    if not outcome["valid"]:
        raise ValueError("Invalid employee records:\n  " + "\n  ".join(outcome["errors"]))

    # Empty manager id marks the CEO
    df["manager_id"] = df["manager_id"].map(lambda mgr: mgr or None)

    logger.info("Normalized %d employee records", len(df))
    return df


def to_employees(df: pd.DataFrame) -> list[Employee]:
    """Convert a normalized record table to Employee values in source order."""
    return [
        Employee(
            employee_id=row.employee_id,
            first_name=row.first_name,
            last_name=row.last_name,
            salary=float(row.salary),
            manager_id=row.manager_id if isinstance(row.manager_id, str) else None,
        )
        for row in df.itertuples(index=False)
    ]


def load_employees(path: str | Path) -> list[Employee]:
    """Read, normalize and convert an employee CSV in one step."""
    return to_employees(normalize_employee_records(ingest_employee_records(path)))

"""Data validation utilities using pandera."""

import pandas as pd
from pandera.errors import SchemaErrors
from pandera.pandas import DataFrameSchema

from orgcheck.utils.types import ValidationOutcome

_SAMPLE_SIZE = 5


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationOutcome:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val, "index": idx} if pd.notna(idx):
                    errors.append(f"Record {int(idx) + 1}: column '{col}' failed check '{check}': {val!r}")
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val!r}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_unique(df: pd.DataFrame, columns: list[str]) -> ValidationOutcome:
    """Check that specified columns form a unique key."""
    duplicated = df[df.duplicated(subset=columns, keep=False)]

    match len(duplicated):
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            keys = sorted(duplicated[columns[0]].astype(str).unique())
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} duplicate rows on columns {columns}. Keys: {keys[:_SAMPLE_SIZE]}"],
            }


def validate_referential_integrity(
    child: pd.DataFrame,
    parent: pd.DataFrame,
    child_key: str,
    parent_key: str,
) -> ValidationOutcome:
    """Validate that all non-null child keys exist in parent."""
    orphans = set(child[child_key].dropna().unique()) - set(parent[parent_key].unique())

    match len(orphans):
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            sample = sorted(orphans)[:_SAMPLE_SIZE]
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} orphan keys in '{child_key}'. Sample: {sample}"],
            }

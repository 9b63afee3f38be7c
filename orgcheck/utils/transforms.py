"""Column-name normalization for raw record tables."""

import re

import pandas as pd

type ColumnMapping = dict[str, str]


def _snake_case(name: str) -> str:
    name = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name.strip())
    return name.lower().replace(" ", "_").replace("-", "_")


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to snake_case and apply optional mapping.

    camelCase headers are split, so ``firstName`` becomes ``first_name``.
    """
    df = df.copy()
    df.columns = [_snake_case(str(col)) for col in df.columns]

    if mapping:
        df = df.rename(columns=mapping)

    return df

"""Ingest raw employee records from CSV exports.

Expected layout is a headed CSV with one employee per line::

    Id,firstName,lastName,salary,managerId
    123,Joe,Doe,60000,
    124,Martin,Chekov,45000,123

An empty ``managerId`` marks the CEO.
"""

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

# latin-1 accepts any byte sequence, so it goes last
ENCODINGS = ("utf-8", "cp1252", "latin-1")


def _read_export_file(path: Path) -> pd.DataFrame:
    """Read a CSV export as text, handling encoding quirks.

    The header is read as an ordinary row so that it fixes the field count:
    any record with extra fields is a parse error rather than being taken
    as an index column.
    """
    for encoding in ENCODINGS:
        try:
            rows = pd.read_csv(
                path,
                encoding=encoding,
                header=None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
            df = rows.iloc[1:].reset_index(drop=True)
            df.columns = rows.iloc[0].tolist()
            return df
        except UnicodeDecodeError:
            continue
        except pd.errors.EmptyDataError as exc:
            raise ValueError("CSV file is empty") from exc
        except pd.errors.ParserError as exc:
            raise ValueError(f"Invalid CSV format: {exc}") from exc
    raise ValueError(f"Could not decode {path}")


def ingest_employee_records(path: str | Path, dry_run: bool = False) -> pd.DataFrame:
    """Load an employee CSV into a DataFrame of raw string fields.

    Fields missing from a short row come back as NaN while empty fields
    come back as ``""``, so later stages can tell them apart.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Employee file not found: {path}")
    if dry_run:
        return pd.DataFrame()

    logger.info("Reading employee export: %s", path.name)
    df = _read_export_file(path)
    logger.info("Ingested %d raw employee records", len(df))
    return df

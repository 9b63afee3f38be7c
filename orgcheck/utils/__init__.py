"""Shared utilities for the organizational checks."""

from orgcheck.utils.io import write_output
from orgcheck.utils.transforms import normalize_columns
from orgcheck.utils.validators import (
    validate_dataframe,
    validate_referential_integrity,
    validate_unique,
)
from orgcheck.utils.types import IssueKind, ValidationOutcome

"""Campaign Analyzer - CSV reader package."""

from .csv_reader import read_rows, split_fields
from .columns import (
    BODY_COLUMNS,
    SUBJECT_COLUMNS,
    DATE_COLUMNS,
    RECIPIENT_COLUMNS,
    OPENS_COLUMNS,
    CLICKS_COLUMNS,
    REPLIES_COLUMNS,
    lookup,
)

__all__ = [
    "read_rows",
    "split_fields",
    "lookup",
    "BODY_COLUMNS",
    "SUBJECT_COLUMNS",
    "DATE_COLUMNS",
    "RECIPIENT_COLUMNS",
    "OPENS_COLUMNS",
    "CLICKS_COLUMNS",
    "REPLIES_COLUMNS",
]

"""Engagement metrics extraction."""

from ..reader.columns import OPENS_COLUMNS, CLICKS_COLUMNS, REPLIES_COLUMNS, lookup
from .models import Metrics


def _parse_count(value: str) -> int:
    """Parse an event count, treating anything unreadable as zero."""
    value = (value or "").strip()
    if not value:
        return 0
    try:
        count = int(value)
    except ValueError:
        try:
            count = int(float(value))
        except (ValueError, OverflowError):
            return 0
    return max(count, 0)


def extract_metrics(row: dict) -> Metrics:
    """Pull opens/clicks/replies out of a row.

    Flags only record whether an event happened at all, so an email opened
    twelve times counts the same as one opened once.
    """
    opens = _parse_count(lookup(row, OPENS_COLUMNS))
    clicks = _parse_count(lookup(row, CLICKS_COLUMNS))
    replies = _parse_count(lookup(row, REPLIES_COLUMNS))

    return Metrics(
        opened=opens > 0,
        clicked=clicks > 0,
        replied=replies > 0,
        opens=opens,
        clicks=clicks,
        replies=replies,
    )

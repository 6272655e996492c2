"""CSV reader for campaign exports.

Exports from mail tools are rarely clean: bodies contain commas, quotes and
line breaks. The reader splits records with a quote-aware scanner and keeps
multi-line quoted fields together as one logical row.
"""

import logging
from typing import Iterator

from .columns import BODY_COLUMNS, SUBJECT_COLUMNS, RECIPIENT_COLUMNS, lookup

logger = logging.getLogger(__name__)

MIN_BODY_LENGTH = 10


def _clean_field(value: str) -> str:
    """Trim, strip one layer of surrounding quotes, unescape doubled quotes."""
    value = value.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value.replace('""', '"').strip()


def split_fields(record: str) -> list[str]:
    """Split one logical record on commas that are outside double quotes."""
    fields = []
    current = []
    in_quotes = False

    for char in record:
        if char == '"':
            in_quotes = not in_quotes
            current.append(char)
        elif char == "," and not in_quotes:
            fields.append(_clean_field("".join(current)))
            current = []
        else:
            current.append(char)

    fields.append(_clean_field("".join(current)))
    return fields


def _logical_records(text: str) -> Iterator[str]:
    """Join physical lines until every opened quote is closed again."""
    buffer = None
    quotes = 0

    for line in text.split("\n"):
        line = line.rstrip("\r")
        if buffer is None:
            if not line.strip():
                continue
            buffer = line
        else:
            buffer = f"{buffer}\n{line}"

        quotes += line.count('"')
        if quotes % 2 == 0:
            yield buffer
            buffer = None
            quotes = 0

    # Unterminated quote: whatever was collected is the last record
    if buffer is not None:
        yield buffer


def _keep_row(row: dict) -> bool:
    body = lookup(row, BODY_COLUMNS).strip()
    subject = lookup(row, SUBJECT_COLUMNS).strip()
    recipient = lookup(row, RECIPIENT_COLUMNS).strip()

    if not (body or subject or recipient):
        return False
    if body and len(body) < MIN_BODY_LENGTH:
        return False
    return True


def read_rows(text: str) -> list[dict[str, str]]:
    """Parse CSV text into row dicts keyed by lower-cased header.

    Malformed or too-short input gives an empty list instead of raising.
    """
    records = list(_logical_records(text or ""))
    if len(records) < 2:
        logger.debug("CSV has no data rows (%d record(s))", len(records))
        return []

    headers = [h.lower() for h in split_fields(records[0])]

    rows = []
    dropped = 0
    for record in records[1:]:
        values = split_fields(record)
        row = {header: (values[i] if i < len(values) else "") for i, header in enumerate(headers)}
        if _keep_row(row):
            rows.append(row)
        else:
            dropped += 1

    logger.debug("Parsed %d row(s), dropped %d empty or fragment row(s)", len(rows), dropped)
    return rows

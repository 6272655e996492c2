"""Column aliases for campaign exports.

Headers are lower-cased by the reader, so every alias here is lower case too.
"""

BODY_COLUMNS = ("body", "email body", "content", "message")
SUBJECT_COLUMNS = ("subject", "subject line", "subject_line")
DATE_COLUMNS = ("date", "sent date", "sent_date")
RECIPIENT_COLUMNS = ("to", "recipient", "email")

OPENS_COLUMNS = ("opens", "opened")
CLICKS_COLUMNS = ("clicks", "clicked")
REPLIES_COLUMNS = ("replies", "replied")


def lookup(row: dict, aliases: tuple, default: str = "") -> str:
    """Return the first non-empty value among the alias columns."""
    for name in aliases:
        value = row.get(name.lower())
        if value:
            return value
    return default

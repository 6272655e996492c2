"""Subject line feature extraction."""

import re

from .models import SubjectFeatures

_PERSONALIZATION_RE = re.compile(r"\{|\[|first|name", re.IGNORECASE)
_DIGIT_RE = re.compile(r"[0-9]")
_EMOJI_RE = re.compile("[\U0001F600-\U0001F64F]")


def extract_subject_features(subject: str) -> SubjectFeatures:
    """Derive length, question, personalization, number and emoji flags."""
    if not subject:
        return SubjectFeatures()

    return SubjectFeatures(
        length=len(subject),
        has_question="?" in subject,
        has_personalization=bool(_PERSONALIZATION_RE.search(subject)),
        has_numbers=bool(_DIGIT_RE.search(subject)),
        has_emoji=bool(_EMOJI_RE.search(subject)),
    )

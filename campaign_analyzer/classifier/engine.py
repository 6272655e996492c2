"""Template classification engine."""

import re
from typing import Optional, Sequence

from .models import (
    ClassificationResult,
    TemplateDefinition,
    EMPTY_BODY,
    SHORT_AND_DIRECT,
    LONG_FORM,
    STANDARD_OUTREACH,
)
from .registry import DEFAULT_TEMPLATES

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_SIGNATURE_RE = re.compile(
    r"--|\b(?:sincerely|best regards|regards|thanks|thank you|cheers)\b",
    re.IGNORECASE,
)

SHORT_WORD_LIMIT = 30
LONG_WORD_LIMIT = 150


def normalize_body(body: str) -> str:
    """Lower-case, drop HTML tags, collapse whitespace, cut the signature."""
    text = _TAG_RE.sub(" ", body.lower())
    text = _WHITESPACE_RE.sub(" ", text).strip()

    signature = _SIGNATURE_RE.search(text)
    if signature:
        text = text[:signature.start()].strip()
    return text


class TemplateClassifier:
    """Scores email bodies against a fixed template registry."""

    def __init__(self, templates: Optional[Sequence[TemplateDefinition]] = None):
        self.templates = tuple(templates if templates is not None else DEFAULT_TEMPLATES)

    def score_all(self, body: str) -> dict[str, int]:
        """Raw score of every template, in registry order."""
        text = normalize_body(body or "")
        return {template.name: template.score(text) for template in self.templates}

    def classify(self, body: str) -> ClassificationResult:
        """Pick the best qualifying template, or a length-based fallback."""
        if not body or not body.strip():
            return ClassificationResult(EMPTY_BODY, 0, "Email has no body text")

        text = normalize_body(body)

        best: Optional[TemplateDefinition] = None
        best_score = 0
        for template in self.templates:
            score = template.score(text)
            if score < template.min_score:
                continue
            # Strictly greater: earlier templates keep ties
            if best is None or score > best_score:
                best, best_score = template, score

        if best is not None:
            return ClassificationResult(best.name, best_score, best.description)

        return self._fallback(text)

    @staticmethod
    def _fallback(text: str) -> ClassificationResult:
        words = len(text.split())
        if words < SHORT_WORD_LIMIT:
            return ClassificationResult(SHORT_AND_DIRECT, 1, "Brief email, fewer than 30 words")
        if words > LONG_WORD_LIMIT:
            return ClassificationResult(LONG_FORM, 1, "Long email, more than 150 words")
        return ClassificationResult(STANDARD_OUTREACH, 0, "No distinctive template pattern")

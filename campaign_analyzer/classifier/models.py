"""Classifier models - indicator rules, template definitions and results."""

import re
from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class IndicatorRule:
    """A weighted pattern that hints at a template."""
    pattern: str
    weight: int = 1

    @cached_property
    def regex(self) -> re.Pattern:
        return re.compile(self.pattern, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        """Check if the pattern occurs anywhere in the text."""
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class TemplateDefinition:
    """A named email template recognised by its indicator rules."""
    name: str
    description: str
    indicators: tuple[IndicatorRule, ...]
    min_score: int = 1

    def score(self, text: str) -> int:
        """Sum the weights of every indicator found in the text."""
        return sum(rule.weight for rule in self.indicators if rule.matches(text))


@dataclass(frozen=True)
class ClassificationResult:
    """Template assigned to an email body."""
    template_name: str
    score: int
    description: str = ""

    @property
    def is_fallback(self) -> bool:
        """True when no template definition qualified."""
        return self.template_name in FALLBACK_TEMPLATES


EMPTY_BODY = "Empty/No Body"
SHORT_AND_DIRECT = "Short & Direct"
LONG_FORM = "Long-Form Narrative"
STANDARD_OUTREACH = "Standard Outreach"

FALLBACK_TEMPLATES = (EMPTY_BODY, SHORT_AND_DIRECT, LONG_FORM, STANDARD_OUTREACH)

"""Campaign Analyzer - Template classifier package."""

from .engine import TemplateClassifier, normalize_body
from .models import IndicatorRule, TemplateDefinition, ClassificationResult
from .registry import DEFAULT_TEMPLATES

__all__ = [
    "TemplateClassifier",
    "normalize_body",
    "IndicatorRule",
    "TemplateDefinition",
    "ClassificationResult",
    "DEFAULT_TEMPLATES",
]

"""Campaign Analyzer - Per-email extractors package."""

from .metrics import extract_metrics
from .subject import extract_subject_features
from .models import Metrics, SubjectFeatures

__all__ = ["extract_metrics", "extract_subject_features", "Metrics", "SubjectFeatures"]

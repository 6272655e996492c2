"""Campaign Analyzer - Report package."""

from .aggregator import Aggregator
from .export import ReportExporter, serialize_report, report_payload
from .insights import Insights, build_insights, rate_deltas, format_delta, volume_share
from .models import (
    EmailDetail,
    Overall,
    Report,
    SubjectAnalysis,
    SubjectBucket,
    TemplateGroup,
    format_rate,
)

__all__ = [
    "Aggregator",
    "ReportExporter",
    "serialize_report",
    "report_payload",
    "Insights",
    "build_insights",
    "rate_deltas",
    "format_delta",
    "volume_share",
    "EmailDetail",
    "Overall",
    "Report",
    "SubjectAnalysis",
    "SubjectBucket",
    "TemplateGroup",
    "format_rate",
]

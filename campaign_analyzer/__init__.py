"""Campaign Analyzer - Template classification and engagement metrics for email campaigns."""

__version__ = "0.1.0"

# Re-export main components for convenience
from .config import load_config, AnalyzerConfig
from .reader import read_rows
from .analyzer import extract_metrics, extract_subject_features, Metrics, SubjectFeatures
from .classifier import TemplateClassifier, TemplateDefinition, IndicatorRule, ClassificationResult
from .report import Aggregator, Report, ReportExporter, serialize_report, build_insights
from .pipeline import CampaignAnalyzer
from .errors import CampaignAnalyzerError, AnalysisError, ConfigError

__all__ = [
    "load_config",
    "AnalyzerConfig",
    "read_rows",
    "extract_metrics",
    "extract_subject_features",
    "Metrics",
    "SubjectFeatures",
    "TemplateClassifier",
    "TemplateDefinition",
    "IndicatorRule",
    "ClassificationResult",
    "Aggregator",
    "Report",
    "ReportExporter",
    "serialize_report",
    "build_insights",
    "CampaignAnalyzer",
    "CampaignAnalyzerError",
    "AnalysisError",
    "ConfigError",
]

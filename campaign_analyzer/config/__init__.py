"""Campaign Analyzer - Configuration package."""

from .loader import load_config, parse_templates
from .models import AnalyzerConfig

__all__ = ["load_config", "parse_templates", "AnalyzerConfig"]

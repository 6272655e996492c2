"""Exceptions raised at the edges of the analysis pipeline."""


class CampaignAnalyzerError(Exception):
    """Base class for campaign analyzer errors."""


class AnalysisError(CampaignAnalyzerError):
    """Parsing or analyzing an uploaded file failed."""


class ConfigError(CampaignAnalyzerError):
    """Configuration file could not be turned into a template registry."""

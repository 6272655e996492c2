"""Configuration models."""

from dataclasses import dataclass, field

from ..classifier.models import TemplateDefinition
from ..classifier.registry import DEFAULT_TEMPLATES


@dataclass
class AnalyzerConfig:
    """Main configuration container."""
    templates: tuple[TemplateDefinition, ...] = field(default_factory=lambda: DEFAULT_TEMPLATES)
    export_dir: str = "reports"
    log_level: str = "WARNING"

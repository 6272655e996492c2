"""Configuration loader."""

import logging
import os
import re
from pathlib import Path

import yaml
from dotenv import load_dotenv

from ..classifier.models import IndicatorRule, TemplateDefinition
from ..classifier.registry import DEFAULT_TEMPLATES
from ..errors import ConfigError
from .models import AnalyzerConfig


def _parse_indicator(template_name: str, data: dict) -> IndicatorRule:
    if not isinstance(data, dict):
        raise ConfigError(f"Template '{template_name}': indicator must be a mapping, got {data!r}")
    pattern = data.get("pattern")
    if not pattern or not isinstance(pattern, str):
        raise ConfigError(f"Template '{template_name}': indicator without a pattern")
    try:
        re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ConfigError(f"Template '{template_name}': invalid pattern {pattern!r}: {e}") from e
    try:
        weight = int(data.get("weight", 1))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Template '{template_name}': weight must be an integer") from e
    return IndicatorRule(pattern=pattern, weight=weight)


def parse_templates(items: list) -> tuple[TemplateDefinition, ...]:
    """Turn the `templates:` section of a config file into definitions."""
    if not isinstance(items, list):
        raise ConfigError("'templates' must be a list of template definitions")

    templates = []
    for template_data in items:
        if not isinstance(template_data, dict):
            raise ConfigError(f"Template must be a mapping, got {template_data!r}")
        name = template_data.get("name")
        if not name:
            raise ConfigError("Template without a name")
        try:
            min_score = int(template_data.get("min_score", 1))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Template '{name}': min_score must be an integer") from e
        indicators = template_data.get("indicators") or []
        if not isinstance(indicators, list):
            raise ConfigError(f"Template '{name}': indicators must be a list")
        templates.append(TemplateDefinition(
            name=str(name),
            description=str(template_data.get("description") or ""),
            indicators=tuple(_parse_indicator(name, rule) for rule in indicators),
            min_score=min_score,
        ))
    return tuple(templates)


def _check_log_level(level: str) -> str:
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown LOG_LEVEL {level!r}")
    return level


def load_config(config_path: str = "config.yaml") -> AnalyzerConfig:
    """Load configuration from YAML file and environment."""
    load_dotenv()

    export_dir = os.getenv("CAMPAIGN_EXPORT_DIR", "reports")
    log_level = _check_log_level(os.getenv("LOG_LEVEL", "WARNING").strip().upper())
    templates = DEFAULT_TEMPLATES

    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            try:
                yaml_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse {config_path}: {e}") from e

        if not isinstance(yaml_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping at the top level")

        export_dir = str(yaml_config.get("export_dir", export_dir))
        templates_data = yaml_config.get("templates")
        # An empty list keeps the built-in registry
        if templates_data is not None and templates_data != []:
            templates = parse_templates(templates_data)

    return AnalyzerConfig(
        templates=templates,
        export_dir=export_dir,
        log_level=log_level,
    )

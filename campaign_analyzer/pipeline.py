"""Campaign analysis pipeline - text in, report out."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from .classifier import TemplateClassifier, TemplateDefinition
from .errors import AnalysisError
from .reader import read_rows
from .report import Aggregator, Report

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Error parsing CSV file. Please check the format."


class CampaignAnalyzer:
    """Runs the parse-then-analyze sequence and keeps the last good result."""

    def __init__(self, templates: Optional[Sequence[TemplateDefinition]] = None):
        self.classifier = TemplateClassifier(templates)
        self.aggregator = Aggregator(self.classifier)
        self.rows: list[dict] = []
        self.report: Optional[Report] = None

    def analyze_text(self, text: str) -> Report:
        """Parse CSV text and analyze it.

        On failure the previous rows and report are kept and a single
        AnalysisError is raised.
        """
        try:
            rows = read_rows(text)
            report = self.aggregator.aggregate(rows)
        except Exception as e:
            logger.exception("Error parsing CSV")
            raise AnalysisError(PARSE_ERROR_MESSAGE) from e

        self.rows = rows
        self.report = report
        return report

    def analyze_file(self, path: str) -> Report:
        """Read a CSV file and analyze it."""
        try:
            # utf-8-sig drops the BOM spreadsheet exports like to add
            text = Path(path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Error reading %s", path)
            raise AnalysisError(PARSE_ERROR_MESSAGE) from e
        return self.analyze_text(text)

    def reset(self) -> None:
        """Forget the current analysis."""
        self.rows = []
        self.report = None

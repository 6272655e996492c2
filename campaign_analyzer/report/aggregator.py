"""Aggregation of classified emails into a campaign report."""

import logging
from typing import Optional

from ..analyzer import extract_metrics, extract_subject_features
from ..classifier import TemplateClassifier
from ..reader.columns import (
    BODY_COLUMNS,
    SUBJECT_COLUMNS,
    DATE_COLUMNS,
    RECIPIENT_COLUMNS,
    lookup,
)
from .models import EmailDetail, Overall, Report, SubjectAnalysis, TemplateGroup

logger = logging.getLogger(__name__)


class Aggregator:
    """Folds rows into per-template groups and subject-line buckets."""

    def __init__(self, classifier: Optional[TemplateClassifier] = None):
        self.classifier = classifier or TemplateClassifier()

    def aggregate(self, rows: list[dict]) -> Report:
        """Classify every row and build the report in a single pass."""
        groups: dict[str, TemplateGroup] = {}
        subjects = SubjectAnalysis()
        opened = clicked = replied = 0

        for row in rows:
            body = lookup(row, BODY_COLUMNS)
            subject = lookup(row, SUBJECT_COLUMNS)

            template = self.classifier.classify(body)
            metrics = extract_metrics(row)
            features = extract_subject_features(subject)

            group = groups.get(template.template_name)
            if group is None:
                group = TemplateGroup(name=template.template_name, description=template.description)
                groups[template.template_name] = group

            group.add(EmailDetail(
                subject=subject,
                body=body,
                metrics=metrics,
                sent_date=lookup(row, DATE_COLUMNS),
                recipient=lookup(row, RECIPIENT_COLUMNS),
            ))
            subjects.add(features.has_question, features.length, metrics.opened)

            opened += metrics.opened
            clicked += metrics.clicked
            replied += metrics.replied

        for group in groups.values():
            group.finalize()

        # sorted() is stable, so equal counts keep first-seen order
        ordered = tuple(sorted(groups.values(), key=lambda g: g.count, reverse=True))

        overall = Overall(
            total_emails=len(rows),
            total_opens=opened,
            total_clicks=clicked,
            total_replies=replied,
        )

        logger.info(
            "Analyzed %d email(s) into %d template(s), open rate %s%%",
            overall.total_emails, len(ordered), overall.open_rate,
        )
        return Report(template_groups=ordered, overall=overall, subject_analysis=subjects)

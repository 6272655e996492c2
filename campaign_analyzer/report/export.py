"""JSON export of analysis reports."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .models import Report

logger = logging.getLogger(__name__)

# Default export directory
EXPORT_DIR = Path("reports")


def report_payload(report: Report, generated_at: Optional[datetime] = None) -> dict:
    """Build the exported document for a report."""
    generated_at = generated_at or datetime.now(timezone.utc)
    return {
        "generatedAt": generated_at.isoformat(),
        "overall": report.overall.to_dict(),
        "templates": [
            {
                "name": group.name,
                "count": group.count,
                "openRate": group.open_rate,
                "clickRate": group.click_rate,
                "replyRate": group.reply_rate,
                "avgLength": group.avg_length,
            }
            for group in report.template_groups
        ],
        "subjectAnalysis": report.subject_analysis.to_dict(),
    }


def serialize_report(report: Report, generated_at: Optional[datetime] = None) -> bytes:
    """Serialize a report to pretty-printed UTF-8 JSON."""
    payload = report_payload(report, generated_at)
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


class ReportExporter:
    """Writes exported reports into a directory."""

    def __init__(self, export_dir: Optional[str] = None):
        self.export_dir = Path(export_dir) if export_dir else EXPORT_DIR

    def write(self, report: Report, generated_at: Optional[datetime] = None) -> Path:
        """Write the report as email-analysis-<epoch ms>.json and return its path."""
        generated_at = generated_at or datetime.now(timezone.utc)
        self.export_dir.mkdir(parents=True, exist_ok=True)

        stamp = int(generated_at.timestamp() * 1000)
        path = self.export_dir / f"email-analysis-{stamp}.json"
        path.write_bytes(serialize_report(report, generated_at))

        logger.info("Exported report to %s", path)
        return path

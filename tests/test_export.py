"""
Unit tests for the JSON report export.
"""
import json
from datetime import datetime, timezone

import pytest

from campaign_analyzer.report import Aggregator, ReportExporter, serialize_report

GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def report():
    """Small report with two templates."""
    rows = [
        {"subject": "Hi?", "body": "Hello there, just a quick note.", "opens": "3"},
        {"subject": "Hello", "body": ""},
    ]
    return Aggregator().aggregate(rows)


class TestSerializeReport:
    """Tests for the pure serialization step."""

    def test_document_shape(self, report):
        """Test the top-level keys of the export."""
        data = json.loads(serialize_report(report, GENERATED_AT))

        assert set(data) == {"generatedAt", "overall", "templates", "subjectAnalysis"}
        assert data["generatedAt"] == "2024-01-02T03:04:05+00:00"

    def test_template_entries(self, report):
        """Test that templates carry only summary fields."""
        data = json.loads(serialize_report(report, GENERATED_AT))

        assert data["templates"][0] == {
            "name": "Short & Direct",
            "count": 1,
            "openRate": "100.0",
            "clickRate": "0.0",
            "replyRate": "0.0",
            "avgLength": 31,
        }
        assert [t["name"] for t in data["templates"]] == ["Short & Direct", "Empty/No Body"]

    def test_overall_and_subjects(self, report):
        """Test the overall block and subject buckets."""
        data = json.loads(serialize_report(report, GENERATED_AT))

        assert data["overall"]["totalEmails"] == 2
        assert data["overall"]["openRate"] == "50.0"
        assert data["subjectAnalysis"]["withQuestion"] == {"opens": 1, "total": 1}

    def test_pretty_printed_bytes(self, report):
        """Test that the output is indented UTF-8 bytes."""
        payload = serialize_report(report, GENERATED_AT)

        assert isinstance(payload, bytes)
        assert b'\n  "overall"' in payload

    def test_default_timestamp(self, report):
        """Test that a timestamp is filled in when not given."""
        data = json.loads(serialize_report(report))

        assert datetime.fromisoformat(data["generatedAt"]).tzinfo is not None


class TestReportExporter:
    """Tests for writing exports to disk."""

    def test_write_creates_file(self, report, tmp_path):
        """Test the exported file name and content."""
        exporter = ReportExporter(tmp_path / "exports")

        path = exporter.write(report, GENERATED_AT)

        assert path.name == "email-analysis-1704164645000.json"
        assert path.parent == tmp_path / "exports"
        assert json.loads(path.read_text())["overall"]["totalEmails"] == 2

    def test_default_directory(self):
        """Test the default export directory."""
        assert str(ReportExporter().export_dir) == "reports"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Unit tests for the analysis pipeline boundary.
"""
import pytest

from campaign_analyzer import CampaignAnalyzer, AnalysisError
from campaign_analyzer.classifier import TemplateDefinition, IndicatorRule

CSV_TEXT = (
    "Subject,Body,Recipient,Opens\n"
    '"Quick question?","Hello there, just a quick note.",ann@example.com,2\n'
    '"Update","Following up on my last email about the pilot.",bob@example.com,0\n'
)


@pytest.fixture
def analyzer():
    """Analyzer with the built-in registry."""
    return CampaignAnalyzer()


class TestAnalyzeText:
    """Tests for analyzing CSV text."""

    def test_returns_and_stores_report(self, analyzer):
        """Test a successful analysis."""
        report = analyzer.analyze_text(CSV_TEXT)

        assert analyzer.report is report
        assert len(analyzer.rows) == 2
        assert report.overall.total_emails == 2
        assert report.overall.total_opens == 1
        assert {g.name for g in report.template_groups} == {"Short & Direct", "Follow-Up"}

    def test_malformed_text_gives_empty_report(self, analyzer):
        """Test that header-only input is not an error."""
        report = analyzer.analyze_text("just one line")

        assert report.overall.total_emails == 0
        assert report.overall.open_rate == "0"

    def test_failure_keeps_previous_report(self, analyzer, monkeypatch):
        """Test that an unexpected failure leaves prior state untouched."""
        previous = analyzer.analyze_text(CSV_TEXT)

        def _boom(rows):
            raise KeyError("unexpected")

        monkeypatch.setattr(analyzer.aggregator, "aggregate", _boom)

        with pytest.raises(AnalysisError, match="Error parsing CSV file"):
            analyzer.analyze_text(CSV_TEXT)

        assert analyzer.report is previous
        assert len(analyzer.rows) == 2

    def test_custom_templates(self):
        """Test injecting a template registry."""
        template = TemplateDefinition(
            name="Pilot Pitch",
            description="Mentions a pilot",
            indicators=(IndicatorRule(r"\bpilot\b", 2),),
            min_score=2,
        )
        analyzer = CampaignAnalyzer([template])

        report = analyzer.analyze_text(CSV_TEXT)

        assert report.group("Pilot Pitch").count == 1

    def test_reset(self, analyzer):
        """Test forgetting the current analysis."""
        analyzer.analyze_text(CSV_TEXT)

        analyzer.reset()

        assert analyzer.report is None
        assert analyzer.rows == []


class TestAnalyzeFile:
    """Tests for analyzing files."""

    def test_reads_file(self, analyzer, tmp_path):
        """Test analyzing a CSV file."""
        csv_file = tmp_path / "campaign.csv"
        csv_file.write_text(CSV_TEXT, encoding="utf-8")

        report = analyzer.analyze_file(str(csv_file))

        assert report.overall.total_emails == 2

    def test_byte_order_mark(self, analyzer, tmp_path):
        """Test a file saved with a UTF-8 BOM."""
        csv_file = tmp_path / "campaign.csv"
        csv_file.write_text("\ufeff" + CSV_TEXT, encoding="utf-8")

        analyzer.analyze_file(str(csv_file))

        assert "subject" in analyzer.rows[0]

    def test_missing_file(self, analyzer, tmp_path):
        """Test that a missing file raises AnalysisError."""
        with pytest.raises(AnalysisError):
            analyzer.analyze_file(str(tmp_path / "nope.csv"))

    def test_binary_file(self, analyzer, tmp_path):
        """Test that undecodable bytes raise AnalysisError."""
        csv_file = tmp_path / "campaign.csv"
        csv_file.write_bytes(b"\xff\xfe\x00\x81garbage")

        with pytest.raises(AnalysisError):
            analyzer.analyze_file(str(csv_file))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

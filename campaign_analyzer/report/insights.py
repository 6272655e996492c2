"""Human-readable insights derived from a finished report."""

from dataclasses import dataclass, field
from typing import Optional

from .models import Overall, Report, TemplateGroup

RESEARCH_TEMPLATE = "Research-Based Outreach"


def _delta(group_rate: str, overall_rate: str) -> float:
    return round(float(group_rate) - float(overall_rate), 1)


def rate_deltas(group: TemplateGroup, overall: Overall) -> dict[str, float]:
    """Percentage-point difference of a group's rates against the campaign."""
    return {
        "opens": _delta(group.open_rate, overall.open_rate),
        "clicks": _delta(group.click_rate, overall.click_rate),
        "replies": _delta(group.reply_rate, overall.reply_rate),
    }


def format_delta(value: float) -> str:
    """Signed delta such as "+4.2%" or "-1.0%"."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"


def volume_share(group: TemplateGroup, overall: Overall) -> float:
    """Share of all emails that used this template, in percent."""
    if overall.total_emails <= 0:
        return 0.0
    return round(group.count / overall.total_emails * 100, 1)


def question_impact(report: Report) -> str:
    """Whether question subjects open "higher", "lower" or "similar" to statements."""
    with_q = report.subject_analysis.with_question
    without_q = report.subject_analysis.without_question
    if not with_q.total or not without_q.total:
        return "similar"

    question_rate = with_q.opens / with_q.total
    statement_rate = without_q.opens / without_q.total
    return "higher" if question_rate > statement_rate else "lower"


@dataclass
class Insights:
    """Key takeaways shown under the report."""
    top_template: Optional[str] = None
    top_open_rate: str = "0"
    research_summary: list[str] = field(default_factory=list)
    subject_impact: str = "similar"
    shares: dict[str, float] = field(default_factory=dict)

    def lines(self) -> list[str]:
        out = []
        if self.top_template:
            out.append(
                f"Top Performing Template: {self.top_template} with {self.top_open_rate}% open rate"
            )
        out.extend(self.research_summary)
        out.append(
            f"Subject Line Impact: Questions in subject lines show {self.subject_impact} "
            f"engagement than statements"
        )
        return out


def _research_summary(group: TemplateGroup, overall: Overall) -> list[str]:
    deltas = rate_deltas(group, overall)

    def _compare(rate: str, delta: float) -> str:
        side = "above" if delta > 0 else "below"
        return f"{rate}% ({side} average by {abs(delta):.1f}%)"

    return [
        f"Sent {group.count} emails with this style",
        f"Open rate: {_compare(group.open_rate, deltas['opens'])}",
        f"Reply rate: {_compare(group.reply_rate, deltas['replies'])}",
    ]


def build_insights(report: Report) -> Insights:
    """Summarise the report the way the campaign dashboard does."""
    insights = Insights(subject_impact=question_impact(report))

    if report.template_groups:
        top = report.template_groups[0]
        insights.top_template = top.name
        insights.top_open_rate = top.open_rate

    research = report.group(RESEARCH_TEMPLATE)
    if research is not None:
        insights.research_summary = _research_summary(research, report.overall)

    insights.shares = {
        group.name: volume_share(group, report.overall) for group in report.template_groups
    }
    return insights

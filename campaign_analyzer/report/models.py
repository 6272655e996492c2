"""Report models - template groups, subject buckets and the final report."""

import math
from dataclasses import dataclass, field

from ..analyzer.models import Metrics


def format_rate(part: int, whole: int) -> str:
    """Percentage with one decimal place; "0" when there is nothing to divide by."""
    if whole <= 0:
        return "0"
    return f"{part / whole * 100:.1f}"


@dataclass
class EmailDetail:
    """One email as it appears in a template group."""
    subject: str
    body: str
    metrics: Metrics
    sent_date: str = ""
    recipient: str = ""

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "body": self.body,
            "metrics": self.metrics.to_dict(),
            "sentDate": self.sent_date,
            "recipient": self.recipient,
        }


@dataclass
class TemplateGroup:
    """Running totals for every email classified into one template."""
    name: str
    description: str = ""
    count: int = 0
    opens: int = 0
    clicks: int = 0
    replies: int = 0
    total_opens: int = 0
    total_clicks: int = 0
    total_replies: int = 0
    total_length: int = 0
    avg_length: int = 0
    emails: list[EmailDetail] = field(default_factory=list)
    open_rate: str = "0"
    click_rate: str = "0"
    reply_rate: str = "0"

    def add(self, detail: EmailDetail) -> None:
        """Fold one email into the group."""
        metrics = detail.metrics
        self.count += 1
        self.total_length += len(detail.body)
        self.avg_length = math.floor(self.total_length / self.count + 0.5)

        if metrics.opened:
            self.opens += 1
        if metrics.clicked:
            self.clicks += 1
        if metrics.replied:
            self.replies += 1

        self.total_opens += metrics.opens
        self.total_clicks += metrics.clicks
        self.total_replies += metrics.replies
        self.emails.append(detail)

    def finalize(self) -> None:
        """Compute rates once every email has been added."""
        self.open_rate = format_rate(self.opens, self.count)
        self.click_rate = format_rate(self.clicks, self.count)
        self.reply_rate = format_rate(self.replies, self.count)

    def to_dict(self, include_emails: bool = True) -> dict:
        data = {
            "name": self.name,
            "description": self.description,
            "count": self.count,
            "opens": self.opens,
            "clicks": self.clicks,
            "replies": self.replies,
            "totalOpens": self.total_opens,
            "totalClicks": self.total_clicks,
            "totalReplies": self.total_replies,
            "totalLength": self.total_length,
            "avgLength": self.avg_length,
            "openRate": self.open_rate,
            "clickRate": self.click_rate,
            "replyRate": self.reply_rate,
        }
        if include_emails:
            data["emails"] = [email.to_dict() for email in self.emails]
        return data


@dataclass
class SubjectBucket:
    """Open counts for subjects sharing one feature."""
    opens: int = 0
    total: int = 0

    def add(self, opened: bool) -> None:
        self.total += 1
        if opened:
            self.opens += 1

    @property
    def open_rate(self) -> str:
        return format_rate(self.opens, self.total)

    def to_dict(self) -> dict:
        return {"opens": self.opens, "total": self.total}


SHORT_SUBJECT_LIMIT = 40


@dataclass
class SubjectAnalysis:
    """The four fixed subject-line buckets."""
    with_question: SubjectBucket = field(default_factory=SubjectBucket)
    without_question: SubjectBucket = field(default_factory=SubjectBucket)
    short_subject: SubjectBucket = field(default_factory=SubjectBucket)
    long_subject: SubjectBucket = field(default_factory=SubjectBucket)

    def add(self, has_question: bool, length: int, opened: bool) -> None:
        if has_question:
            self.with_question.add(opened)
        else:
            self.without_question.add(opened)

        if length < SHORT_SUBJECT_LIMIT:
            self.short_subject.add(opened)
        else:
            self.long_subject.add(opened)

    def to_dict(self) -> dict:
        return {
            "withQuestion": self.with_question.to_dict(),
            "withoutQuestion": self.without_question.to_dict(),
            "shortSubject": self.short_subject.to_dict(),
            "longSubject": self.long_subject.to_dict(),
        }


@dataclass(frozen=True)
class Overall:
    """Campaign-wide totals and rates."""
    total_emails: int
    total_opens: int
    total_clicks: int
    total_replies: int

    @property
    def open_rate(self) -> str:
        return format_rate(self.total_opens, self.total_emails)

    @property
    def click_rate(self) -> str:
        return format_rate(self.total_clicks, self.total_emails)

    @property
    def reply_rate(self) -> str:
        return format_rate(self.total_replies, self.total_emails)

    def to_dict(self) -> dict:
        return {
            "totalEmails": self.total_emails,
            "totalOpens": self.total_opens,
            "totalClicks": self.total_clicks,
            "totalReplies": self.total_replies,
            "openRate": self.open_rate,
            "clickRate": self.click_rate,
            "replyRate": self.reply_rate,
        }


@dataclass(frozen=True)
class Report:
    """Result of one analysis run."""
    template_groups: tuple[TemplateGroup, ...]
    overall: Overall
    subject_analysis: SubjectAnalysis

    def group(self, name: str):
        """Look up a template group by name, or None."""
        return next((g for g in self.template_groups if g.name == name), None)

    def to_dict(self) -> dict:
        return {
            "templateGroups": [g.to_dict() for g in self.template_groups],
            "overall": self.overall.to_dict(),
            "subjectAnalysis": self.subject_analysis.to_dict(),
        }

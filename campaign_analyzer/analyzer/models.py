"""Per-email engagement and subject-line models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Metrics:
    """Engagement for one email: binary flags plus the raw event counts."""
    opened: bool
    clicked: bool
    replied: bool
    opens: int = 0
    clicks: int = 0
    replies: int = 0

    def to_dict(self) -> dict:
        return {
            "opened": self.opened,
            "clicked": self.clicked,
            "replied": self.replied,
            "opens": self.opens,
            "clicks": self.clicks,
            "replies": self.replies,
        }


@dataclass(frozen=True)
class SubjectFeatures:
    """Simple features derived from a subject line."""
    length: int = 0
    has_question: bool = False
    has_personalization: bool = False
    has_numbers: bool = False
    has_emoji: bool = False

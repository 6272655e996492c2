"""Built-in template registry.

Order matters: when two templates reach the same score, the one listed first
wins.
"""

from .models import IndicatorRule, TemplateDefinition

RESEARCH_BASED = TemplateDefinition(
    name="Research-Based Outreach",
    description="Opens with an observation about the prospect, asks about it, backs it with results",
    indicators=(
        IndicatorRule(r"noticed|saw|came across|found|read about", 2),
        IndicatorRule(r"wondering|curious|interested to know", 2),
        IndicatorRule(r"was able to|achieved|accomplished|saw results", 2),
        IndicatorRule(r"would you|are you|have you considered", 1),
    ),
    min_score=4,
)

PROBLEM_SOLUTION = TemplateDefinition(
    name="Problem+Solution",
    description="Names a pain point and presents a fix for it",
    indicators=(
        IndicatorRule(r"\b(challenges?|struggl\w*|pain points?|problems?|bottlenecks?|frustrat\w*)\b", 2),
        IndicatorRule(r"\b(solution|solves?|solving|fix(es|ed)?|eliminates?)\b", 2),
        IndicatorRule(r"\b(reduce|increase|improve|cut|streamline)\b", 1),
        IndicatorRule(r"\b(without|instead of|rather than|no more)\b", 1),
    ),
    min_score=4,
)

DIRECT_MEETING = TemplateDefinition(
    name="Direct Meeting Request",
    description="Asks straight away for a call or meeting slot",
    indicators=(
        IndicatorRule(r"\b(call|meeting|chat|demo)\b", 2),
        IndicatorRule(r"\b(10|15|20|30)[- ]?(min|mins|minutes?)\b", 2),
        IndicatorRule(r"\b(calendar|schedule|availability|book a time|time slot)\b", 2),
        IndicatorRule(r"\b(this week|next week|tomorrow|monday|tuesday|wednesday|thursday|friday)\b", 1),
    ),
    min_score=4,
)

FOLLOW_UP = TemplateDefinition(
    name="Follow-Up",
    description="Refers back to an earlier message that got no answer",
    indicators=(
        IndicatorRule(r"\b(follow(ing)?[- ]up|circling back|checking in|touching base)\b", 3),
        IndicatorRule(r"\b(my (last|previous|earlier) (email|note|message)|didn'?t hear back|bump(ing)? this)\b", 2),
        IndicatorRule(r"\b(in case (it|this) (got|slipped)|buried in your inbox)\b", 1),
    ),
    min_score=3,
)

VALUE_PROPOSITION = TemplateDefinition(
    name="Value Proposition",
    description="Leads with measurable benefits of the product",
    indicators=(
        IndicatorRule(r"\b(roi|return on investment|revenue|bottom line)\b", 2),
        IndicatorRule(r"\d+\s?(%|percent\b|x\b)", 2),
        IndicatorRule(r"\b(save|saving|boost|double|triple)\b", 1),
        IndicatorRule(r"\b(our (platform|product|tool|software)|we help)\b", 2),
    ),
    min_score=4,
)

EVENT_BASED = TemplateDefinition(
    name="Event-Based Outreach",
    description="Hooks on a conference, funding round, launch or other recent event",
    indicators=(
        IndicatorRule(r"\b(conference|summit|webinar|trade ?show|expo)\b", 3),
        IndicatorRule(r"\b(congrat\w*|funding|raised|series [a-d]|acquisition|launched|new role)\b", 3),
        IndicatorRule(r"\b(booth|attending|speaking at|meet in person)\b", 1),
    ),
    min_score=3,
)

SOCIAL_PROOF = TemplateDefinition(
    name="Social Proof Heavy",
    description="Relies on named customers, case studies and testimonials",
    indicators=(
        IndicatorRule(r"\b(clients?|customers?) (like|such as|including)\b", 3),
        IndicatorRule(r"\b(case study|testimonial|trusted by|worked with|partnered with)\b", 2),
        IndicatorRule(r"\b(fortune 500|industry leaders?|companies like)\b", 2),
        IndicatorRule(r"\bsimilar (companies|teams|clients|businesses)\b", 1),
    ),
    min_score=4,
)

QUESTION_OPENER = TemplateDefinition(
    name="Question Opener",
    description="Starts the email with a question to the reader",
    indicators=(
        IndicatorRule(r"^[^.!?]{0,120}\?", 3),
        IndicatorRule(r"\b(quick question|have you ever|what if|how do you)\b", 2),
        IndicatorRule(r"\?.*\?", 1),
    ),
    min_score=3,
)

DEFAULT_TEMPLATES: tuple[TemplateDefinition, ...] = (
    RESEARCH_BASED,
    PROBLEM_SOLUTION,
    DIRECT_MEETING,
    FOLLOW_UP,
    VALUE_PROPOSITION,
    EVENT_BASED,
    SOCIAL_PROOF,
    QUESTION_OPENER,
)

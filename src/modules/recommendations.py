"""
Recommendation Synthesizer
Rule-based generation of prioritized remediation steps from a breach set
"""

import uuid
from dataclasses import dataclass
from typing import Callable, Iterable, List, NamedTuple, Sequence, Tuple

from .breach_data import BreachRecord

PRIORITY_CRITICAL = "critical"
PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"

RECOMMENDATION_ICONS = ("lock", "file", "key", "mail", "user", "shield")

PASSWORD_CATEGORIES = frozenset({"Passwords", "Password"})
FINANCIAL_CATEGORIES = frozenset({"Credit Cards", "Bank Account", "Financial"})


@dataclass(frozen=True)
class Recommendation:
    """A single remediation recommendation with its setup guide"""
    id: str
    title: str
    description: str
    priority: str
    icon: str
    completed: bool = False
    setup_steps: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.setup_steps, tuple):
            object.__setattr__(self, "setup_steps", tuple(self.setup_steps or ()))


class RecommendationTemplate(NamedTuple):
    title: str
    description: str
    priority: str
    icon: str
    setup_steps: Tuple[str, ...]

    def build(self, rec_id: str) -> Recommendation:
        return Recommendation(
            id=rec_id,
            title=self.title,
            description=self.description,
            priority=self.priority,
            icon=self.icon,
            completed=False,
            setup_steps=self.setup_steps,
        )


class RecommendationRule(NamedTuple):
    """Ordered (predicate, template) pair.

    The predicate receives the breach list and the recommendations already
    produced in this call.
    """
    name: str
    applies: Callable[[Sequence[BreachRecord], Sequence[Recommendation]], bool]
    template: RecommendationTemplate


def _exposes(breaches: Sequence[BreachRecord], categories: frozenset) -> bool:
    return any(categories.intersection(breach.affected_data) for breach in breaches)


CHANGE_PASSWORDS = RecommendationTemplate(
    title="Change Compromised Passwords",
    description="Your passwords may have been exposed in a data breach.",
    priority=PRIORITY_HIGH,
    icon="key",
    setup_steps=(
        "Identify all accounts using the same password",
        "Change passwords on all affected accounts",
        "Use a unique, strong password for each account",
        "Consider using a password manager",
    ),
)

ENABLE_TWO_FACTOR = RecommendationTemplate(
    title="Enable Two-Factor Authentication",
    description="Add an extra layer of security to your accounts.",
    priority=PRIORITY_HIGH,
    icon="lock",
    setup_steps=(
        "Identify your most important accounts",
        "Look for 2FA/MFA options in security settings",
        "Set up 2FA using an authenticator app (preferred) or SMS",
        "Save backup codes in a secure location",
    ),
)

MONITOR_CREDIT = RecommendationTemplate(
    title="Monitor Your Credit",
    description="Set up credit monitoring to detect fraudulent activity.",
    priority=PRIORITY_MEDIUM,
    icon="shield",
    setup_steps=(
        "Request credit reports from major bureaus",
        "Review reports for unauthorized accounts",
        "Set up credit monitoring services",
        "Consider a credit freeze for maximum protection",
    ),
)

GOOD_PRACTICES = RecommendationTemplate(
    title="Maintain Good Security Practices",
    description="No specific exposures found. Keep your accounts protected.",
    priority=PRIORITY_MEDIUM,
    icon="shield",
    setup_steps=(
        "Review your account security settings regularly",
        "Keep software and devices up to date",
        "Be cautious of unsolicited emails and links",
        "Run periodic scans to catch new exposures early",
    ),
)

RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        "compromised_passwords",
        lambda breaches, produced: _exposes(breaches, PASSWORD_CATEGORIES),
        CHANGE_PASSWORDS,
    ),
    RecommendationRule(
        "two_factor",
        lambda breaches, produced: len(breaches) > 0,
        ENABLE_TWO_FACTOR,
    ),
    RecommendationRule(
        "credit_monitoring",
        lambda breaches, produced: _exposes(breaches, FINANCIAL_CATEGORIES),
        MONITOR_CREDIT,
    ),
    RecommendationRule(
        "fallback",
        lambda breaches, produced: not produced,
        GOOD_PRACTICES,
    ),
)


def generate_recommendations(
    breaches: Iterable[BreachRecord],
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> List[Recommendation]:
    """
    Build a fresh recommendation list for *breaches*.

    Rules are evaluated in order and each one that fires appends its
    recommendation; the output keeps rule order and is not sorted by
    priority. Ids share a per-call token so two calls never reuse an id.
    """
    breaches = list(breaches or ())
    batch = uuid.uuid4().hex[:8]
    produced: List[Recommendation] = []

    for rule in rules:
        if rule.applies(breaches, produced):
            produced.append(rule.template.build(f"rec-{batch}-{len(produced) + 1}"))

    return produced


def sample_recommendations() -> List[Recommendation]:
    """Build a fresh copy of the canonical sample recommendation set."""
    return [
        Recommendation(
            id="sample-rec-1",
            title="Enable Two-Factor Authentication (SAMPLE)",
            description="Protect your account with an extra layer of security.",
            priority=PRIORITY_HIGH,
            icon="lock",
            completed=False,
            setup_steps=(
                "Go to your account settings page",
                'Navigate to the "Security" section',
                "Enable Two-Factor Authentication",
                "Follow the on-screen instructions",
            ),
        ),
        Recommendation(
            id="sample-rec-2",
            title="Update Your Password (SAMPLE)",
            description="Your current password may be vulnerable.",
            priority=PRIORITY_MEDIUM,
            icon="key",
            completed=False,
            setup_steps=(
                "Go to your account settings",
                'Find the "Change Password" option',
                "Create a strong password with at least 12 characters",
            ),
        ),
    ]

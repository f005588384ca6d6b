"""Standard (non-AI) constituent email built from the user's selections."""

from collections.abc import Iterable
from dataclasses import dataclass, asdict

from .funding import VOTE_RECOMMENDATIONS, tone_bucket
from .suggestions.models import UserConcern
from .suggestions.reasons import clean_item_description

SUBJECTS = [
    "Regarding Federal Budget Priorities",
    "A Constituent's Perspective on the Federal Budget",
    "Urgent: My Input on Federal Spending",
    "Action Needed on Federal Budget Allocation",
]

# Order in which spending categories are raised in the email
CATEGORY_PRIORITY = {
    "War and Weapons": 1,
    "Health": 2,
    "Interest on Debt": 3,
    "Veterans": 4,
    "Education": 5,
    "Housing and Community": 6,
    "Food and Agriculture": 7,
    "Unemployment and Labor": 8,
    "Government": 9,
    "Energy and Environment": 10,
    "International Affairs": 11,
    "Law Enforcement": 12,
    "Transportation": 13,
    "Science": 14,
}

INTRO = (
    "Dear [Representative Name],\n\n"
    "I am a constituent from {location}, writing to you today to express my views on federal budget "
    "priorities. As a taxpayer, it is important to me that my contributions are allocated in a way that "
    "reflects the values and needs of our community and the nation."
)

BUDGET_STANCE = (
    "My primary concern is the national debt and the need for a balanced budget. Fiscal responsibility "
    "is paramount, and I urge you to prioritize measures that will lead to sustainable government spending."
)

PRIORITIES_HEADER = (
    "Regarding specific funding areas, I have outlined my preferences below. I have indicated where I "
    "believe funds should be increased, decreased, or where efficiencies could be found:"
)

CONCLUSION = (
    "I believe these adjustments will better serve the public interest. I trust that you will consider my "
    "perspective during upcoming budget discussions and legislative votes.\n\n"
    "Thank you for your time and dedication to serving our district.\n\n"
    "Sincerely,\n{name}\n{location}"
)


@dataclass
class Email:
    subject: str
    body: str

    def to_dict(self):
        return asdict(self)


def _item_order(item: UserConcern):
    return (CATEGORY_PRIORITY.get(item.category, 99), item.description.lower())


def recommendation_for(item: UserConcern) -> str:
    level = round(item.level)
    return VOTE_RECOMMENDATIONS.get(level, "Maintain Current Level")


def generate_standard_email(items: Iterable[UserConcern], aggressiveness: float,
                            user_name: str = "", user_location: str = "",
                            balance_budget: bool = False) -> Email:
    """Compose the templated email for the user's selections."""
    location = user_location or "[Your Location]"
    name = user_name or "[Your Name]"

    parts = [INTRO.format(location=location)]
    if balance_budget:
        parts.append(BUDGET_STANCE)

    ordered = sorted(items, key=_item_order)
    if ordered:
        lines = [PRIORITIES_HEADER]
        for item in ordered:
            lines.append(
                f'- For "{clean_item_description(item.description)}": '
                f"I recommend you vote to **{recommendation_for(item)}**."
            )
        parts.append("\n".join(lines))

    parts.append(CONCLUSION.format(name=name, location=location))
    return Email(subject=SUBJECTS[tone_bucket(aggressiveness)], body="\n\n".join(parts))

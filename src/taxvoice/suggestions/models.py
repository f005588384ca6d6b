"""Data models for the suggestions module."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional

from ..funding import FundingAction, action_for_level, normalize_funding_level, slider_to_funding_level


# Legacy suffixes still accepted when parsing tag strings
ACTION_ALIASES = {
    "slash": FundingAction.SLASH,
    "cut": FundingAction.SLASH,
    "fund": FundingAction.FUND,
    "review": FundingAction.REVIEW,
    "reform": FundingAction.REVIEW,
}


class Prominence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FocusType(str, Enum):
    BROAD = "broad"
    NICHE = "niche"


class OrgType(str, Enum):
    GRASSROOTS = "grassroots"
    RESEARCH = "research"
    LEGAL = "legal"
    ESTABLISHED = "established"
    ACTIVISM = "activism"
    THINK_TANK = "think-tank"
    DIRECT_SERVICE = "direct-service"


class BadgeProfile(str, Enum):
    SINGLE_PROMINENT = "single-prominent"
    DOUBLE_DIVERSE = "double-diverse"
    TRIPLE_FOCUSED = "triple-focused"
    COMMUNITY_FOCUSED = "community-focused"


class BadgeType(str, Enum):
    BEST_MATCH = "Best Match"
    TOP_MATCH = "Top Match"
    YOUR_MATCH = "Your Match"
    HIGH_IMPACT = "High Impact"
    DATA_DRIVEN = "Data-Driven"
    LEGAL_ADVOCACY = "Legal Advocacy"
    ESTABLISHED_VOICE = "Established Voice"
    GRASSROOTS_POWER = "Grassroots Power"
    COMMUNITY_PICK = "Community Pick"
    NICHE_FOCUS = "Niche Focus"
    BROAD_FOCUS = "Broad Focus"
    GENERAL_INTEREST = "General Interest"


class RankClass(str, Enum):
    """How strongly a matched organization lines up with the user's concerns."""
    BEST = "best"
    TOP = "top"
    YOUR = "your"


class ReasonType(str, Enum):
    SUPPORTS = "supports"
    OPPOSES = "opposes"
    REVIEWS = "reviews"
    GENERAL = "general"


@dataclass(frozen=True)
class Tag:
    """An advocacy tag: a subject plus the funding action taken on it.

    Bare topical tags (``fiscal_responsibility``) carry no action.
    """
    subject: str
    action: Optional[FundingAction] = None

    def __str__(self):
        if self.action is None:
            return self.subject
        return f"{self.subject}_{self.action.value}"

    @classmethod
    def parse(cls, text: str) -> "Tag":
        """Build a Tag from its string form.

        ``health_fund`` -> Tag("health", FUND). The legacy suffixes ``_cut``
        and ``_reform`` are read as slash and review.
        """
        subject, sep, suffix = text.rpartition("_")
        if sep and subject and suffix in ACTION_ALIASES:
            return cls(subject, ACTION_ALIASES[suffix])
        return cls(text)

    @property
    def is_canonical(self) -> bool:
        """False when str(tag) would not round-trip through parse()."""
        return Tag.parse(str(self)) == self


@dataclass(frozen=True)
class OrganizationEntry:
    """A catalog record for one advocacy organization."""
    name: str
    url: str
    description: str
    main_category: str
    prominence: Prominence = Prominence.MEDIUM
    focus_type: Optional[FocusType] = None
    org_types: frozenset = frozenset()
    advocacy_tags: frozenset = frozenset()
    badge_profile: BadgeProfile = BadgeProfile.DOUBLE_DIVERSE
    icon: str = "Info"

    @classmethod
    def from_dict(cls, data: dict) -> "OrganizationEntry":
        """Build an entry from a raw catalog record."""
        focus = data.get("focus_type")
        profile = data.get("badge_profile")
        return cls(
            name=data["name"],
            url=data["url"],
            description=data.get("description", ""),
            main_category=data.get("main_category", "General"),
            prominence=Prominence(data.get("prominence", "medium")),
            focus_type=FocusType(focus) if focus else None,
            org_types=frozenset(OrgType(t) for t in data.get("org_types", ())),
            advocacy_tags=frozenset(Tag.parse(t) for t in data.get("advocacy_tags", ())),
            badge_profile=BadgeProfile(profile) if profile else BadgeProfile.DOUBLE_DIVERSE,
            icon=data.get("icon", "Info"),
        )


@dataclass
class UserConcern:
    """One spending item the user selected, with their funding stance.

    When ``slider_value`` (0-100) is set it decides the stance and
    ``funding_level`` is ignored. Otherwise ``funding_level`` is read by
    ``normalize_funding_level``: -2..2 as a level, anything else as a
    slider position.
    """
    id: str
    description: str
    category: str = ""
    funding_level: float = 0
    slider_value: Optional[float] = None

    @property
    def level(self) -> float:
        if self.slider_value is not None:
            return slider_to_funding_level(self.slider_value)
        return normalize_funding_level(self.funding_level)

    @property
    def action(self) -> FundingAction:
        return action_for_level(self.level)


@dataclass
class MatchedReason:
    """Why an organization matched one of the user's concerns."""
    type: ReasonType
    description: str
    original_concern: str
    actionable_tag: str

    def to_dict(self):
        return {
            "type": self.type.value,
            "description": self.description,
            "originalConcern": self.original_concern,
            "actionableTag": self.actionable_tag,
        }


@dataclass
class SuggestedResource:
    """An organization suggested to the user, with match details and badges."""
    entry: OrganizationEntry
    match_count: int = 0
    matched_reasons: list[MatchedReason] = field(default_factory=list)
    badges: list[BadgeType] = field(default_factory=list)
    rank: Optional[RankClass] = None
    relevance: str = ""

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def url(self) -> str:
        return self.entry.url

    def to_dict(self):
        entry = self.entry
        return {
            "name": entry.name,
            "url": entry.url,
            "description": entry.description,
            "icon": entry.icon,
            "mainCategory": entry.main_category,
            "prominence": entry.prominence.value,
            "focusType": entry.focus_type.value if entry.focus_type else None,
            "orgTypeTags": sorted(t.value for t in entry.org_types),
            "matchCount": self.match_count,
            "matchedReasons": [r.to_dict() for r in self.matched_reasons],
            "badges": [b.value for b in self.badges],
            "rank": self.rank.value if self.rank else None,
            "relevance": self.relevance,
        }


@dataclass
class DerivedConcern:
    """A concern after tag derivation, ready for matching."""
    id: str
    description: str
    action: FundingAction
    tags: list[Tag]

    def matching_tags(self, entry: OrganizationEntry) -> list[Tag]:
        return [t for t in self.tags if t in entry.advocacy_tags]

    def to_dict(self):
        data = asdict(self)
        data["action"] = self.action.value
        data["tags"] = [str(t) for t in self.tags]
        return data

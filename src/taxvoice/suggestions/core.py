"""Core suggestion functionality - match user concerns to advocacy organizations."""

import logging
import random
from collections.abc import Iterable
from typing import Optional

from ..funding import FundingAction, tone_bucket
from .badges import BadgeAssigner
from .catalog import Catalog, default_catalog
from .models import (
    BadgeType,
    DerivedConcern,
    MatchedReason,
    OrganizationEntry,
    Prominence,
    RankClass,
    SuggestedResource,
    Tag,
    UserConcern,
)
from .reasons import PROPER_NOUNS, generate_matched_reason
from .tags import derive_tags

logger = logging.getLogger(__name__)

# =============================================================================
# CONFIGURATION
# =============================================================================

BUDGET_CONCERN_ID = "balance_budget"
BUDGET_CONCERN_DESCRIPTION = "Balancing the Budget & Reducing National Debt"
BUDGET_TAGS = (Tag("fiscal_responsibility"), Tag("debt_reduction"))

# Rank tiers only apply from this many matched concerns upward
MIN_TIER_MATCHES = 2

PROMINENCE_ORDER = {
    Prominence.HIGH: 0,
    Prominence.MEDIUM: 1,
    Prominence.LOW: 2,
}

RELEVANCE_PHRASES = {
    0: "may be a good fit for",
    1: "aligns well with",
    2: "strongly aligns with",
    3: "strongly aligns with",
}


# =============================================================================
# MATCHING HELPERS
# =============================================================================

def derive_concerns(concerns: Iterable[UserConcern], balance_budget: bool = False) -> list[DerivedConcern]:
    """Attach derived tags to each concern, adding the budget concern if asked.

    Concerns are keyed by id: a repeated id replaces the earlier selection
    but keeps its position.
    """
    by_id: dict[str, UserConcern] = {}
    for concern in concerns:
        by_id[concern.id] = concern

    derived = []
    for concern in by_id.values():
        action = concern.action
        derived.append(DerivedConcern(
            id=concern.id,
            description=concern.description,
            action=action,
            tags=derive_tags(concern.id, action),
        ))
    if balance_budget:
        derived.append(DerivedConcern(
            id=BUDGET_CONCERN_ID,
            description=BUDGET_CONCERN_DESCRIPTION,
            action=FundingAction.REVIEW,
            tags=list(BUDGET_TAGS),
        ))
    return derived


def match_entry(entry: OrganizationEntry, concerns: list[DerivedConcern]) -> tuple[int, list[MatchedReason]]:
    """Count the concerns an organization matches and explain each match.

    A concern counts once however many of its tags matched; its reason is
    built from the first matching tag in derivation order.
    """
    match_count = 0
    reasons = []
    for concern in concerns:
        matching = concern.matching_tags(entry)
        if not matching:
            continue
        match_count += 1
        reason = generate_matched_reason(matching[0], concern.description, concern.action)
        if reason not in reasons:
            reasons.append(reason)
    return match_count, reasons


def rank_thresholds(match_counts: Iterable[int]) -> tuple[Optional[int], Optional[int]]:
    """Match counts that earn Best and Top Match in this result set."""
    tiers = sorted({c for c in match_counts if c >= MIN_TIER_MATCHES}, reverse=True)
    best = tiers[0] if tiers else None
    top = tiers[1] if len(tiers) > 1 else None
    return best, top


def rank_class(match_count: int, best: Optional[int], top: Optional[int]) -> Optional[RankClass]:
    if match_count <= 0:
        return None
    if best is not None and match_count == best:
        return RankClass.BEST
    if top is not None and match_count == top:
        return RankClass.TOP
    return RankClass.YOUR


def sort_key(resource: SuggestedResource):
    """Result order: most matches, then most prominent, then by name."""
    return (
        -resource.match_count,
        PROMINENCE_ORDER[resource.entry.prominence],
        resource.entry.name.lower(),
    )


def _soften(label: str) -> str:
    keep = set(PROPER_NOUNS.values())
    return " ".join(w if (w.isupper() and len(w) > 1) or w in keep else w.lower() for w in label.split())


def describe_relevance(resource: SuggestedResource, aggressiveness: float = 50,
                       balance_budget: bool = False) -> str:
    """One-sentence explanation of why a resource was suggested."""
    entry = resource.entry
    if not resource.matched_reasons:
        return f"Works on issues related to {entry.main_category.lower()}."

    top = resource.matched_reasons[0]
    phrase = RELEVANCE_PHRASES[tone_bucket(aggressiveness)]
    text = (f"{entry.name} {phrase} your concern about {top.original_concern} "
            f"through its work on {_soften(top.actionable_tag)}.")

    others = resource.match_count - 1
    if others > 0:
        plural = "concern" if others == 1 else "concerns"
        text += f" It also addresses {others} other {plural} you highlighted."

    budget_first = top.original_concern.endswith(BUDGET_CONCERN_DESCRIPTION)
    if balance_budget and not budget_first and any(t in entry.advocacy_tags for t in BUDGET_TAGS):
        text += " It also advocates for fiscal responsibility."
    return text


# =============================================================================
# MAIN SUGGESTER CLASS
# =============================================================================

class ResourceSuggester:
    """Main orchestrator for matching concerns to organizations.

    The catalog and random source are injected; nothing here is shared
    between calls except the read-only catalog.
    """

    def __init__(self, catalog: Optional[Catalog] = None,
                 rng: Optional[random.Random] = None,
                 max_suggestions: Optional[int] = None):
        if max_suggestions is not None and max_suggestions < 1:
            raise ValueError(f"max_suggestions must be at least 1, got {max_suggestions}")
        self.catalog = catalog if catalog is not None else default_catalog()
        self.rng = rng or random.Random()
        self.max_suggestions = max_suggestions

    def suggest(self, concerns: Iterable[UserConcern], aggressiveness: float = 50,
                balance_budget: bool = False,
                include_unmatched: bool = False) -> list[SuggestedResource]:
        """Rank catalog organizations against the user's concerns.

        Args:
            concerns: Spending items the user selected
            aggressiveness: Tone slider (0-100); only changes relevance wording
            balance_budget: Whether the user asked for a balanced budget
            include_unmatched: Also return organizations that matched nothing

        Returns:
            SuggestedResource list ordered by match count, prominence, name
        """
        derived = derive_concerns(concerns, balance_budget)
        if not derived:
            logger.debug("No concerns given; returning all organizations")
            include_unmatched = True

        logger.debug(f"Matching {len(derived)} concern(s), "
                     f"{sum(len(c.tags) for c in derived)} derived tag(s), "
                     f"against {len(self.catalog)} organizations")

        candidates = []
        for entry in self.catalog:
            match_count, reasons = match_entry(entry, derived)
            if match_count == 0 and not include_unmatched:
                continue
            candidates.append(SuggestedResource(
                entry=entry,
                match_count=match_count,
                matched_reasons=reasons,
            ))

        best, top = rank_thresholds(c.match_count for c in candidates)
        logger.debug(f"{len(candidates)} candidate(s); best tier={best}, top tier={top}")

        candidates.sort(key=sort_key)

        assigner = BadgeAssigner(self.rng)
        assigned: dict[str, list[BadgeType]] = {}
        results = []
        for resource in candidates:
            if resource.entry.url in assigned:
                continue
            resource.rank = rank_class(resource.match_count, best, top)
            resource.badges = assigner.assign(
                resource.entry,
                match_count=resource.match_count,
                user_concerns_size=len(derived),
                other_badges=assigned,
                rank=resource.rank,
            )
            resource.relevance = describe_relevance(resource, aggressiveness, balance_budget)
            assigned[resource.entry.url] = resource.badges
            results.append(resource)

            if self.max_suggestions is not None and len(results) >= self.max_suggestions:
                break

        return results

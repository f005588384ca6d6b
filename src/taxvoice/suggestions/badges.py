"""Badge assignment for suggested organizations."""

import logging
import random
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Optional

from .models import (
    BadgeProfile,
    BadgeType,
    FocusType,
    OrganizationEntry,
    OrgType,
    Prominence,
    RankClass,
)

logger = logging.getLogger(__name__)

MAX_BADGES_PER_RESOURCE = 3

BADGE_PRIORITY = {
    BadgeType.BEST_MATCH: 1,
    BadgeType.TOP_MATCH: 2,
    BadgeType.YOUR_MATCH: 3,
    BadgeType.HIGH_IMPACT: 4,
    BadgeType.DATA_DRIVEN: 5,
    BadgeType.LEGAL_ADVOCACY: 6,
    BadgeType.ESTABLISHED_VOICE: 7,
    BadgeType.GRASSROOTS_POWER: 8,
    BadgeType.COMMUNITY_PICK: 9,
    BadgeType.NICHE_FOCUS: 10,
    BadgeType.BROAD_FOCUS: 11,
    BadgeType.GENERAL_INTEREST: 12,
}

RANK_BADGES = {
    RankClass.BEST: BadgeType.BEST_MATCH,
    RankClass.TOP: BadgeType.TOP_MATCH,
    RankClass.YOUR: BadgeType.YOUR_MATCH,
}

# (min, max) total badges an organization should end up with
PROFILE_BADGE_RANGES = {
    BadgeProfile.SINGLE_PROMINENT: (1, 1),
    BadgeProfile.DOUBLE_DIVERSE: (2, 2),
    BadgeProfile.TRIPLE_FOCUSED: (2, 3),
    BadgeProfile.COMMUNITY_FOCUSED: (1, 2),
}

ORG_TYPE_BADGES = {
    OrgType.LEGAL: BadgeType.LEGAL_ADVOCACY,
    OrgType.RESEARCH: BadgeType.DATA_DRIVEN,
    OrgType.GRASSROOTS: BadgeType.GRASSROOTS_POWER,
    OrgType.ESTABLISHED: BadgeType.ESTABLISHED_VOICE,
    OrgType.ACTIVISM: BadgeType.HIGH_IMPACT,
    OrgType.THINK_TANK: BadgeType.DATA_DRIVEN,
    OrgType.DIRECT_SERVICE: BadgeType.COMMUNITY_PICK,
}

FOCUS_BADGES = {
    FocusType.BROAD: BadgeType.BROAD_FOCUS,
    FocusType.NICHE: BadgeType.NICHE_FOCUS,
}

# Chance that a matched, lower-profile organization still under its target
# gets topped up with Community Pick
COMMUNITY_PICK_CHANCE = 0.33


def is_descriptive(badge: BadgeType) -> bool:
    return badge not in RANK_BADGES.values() and badge is not BadgeType.GENERAL_INTEREST


def sort_badges(badges: Iterable[BadgeType]) -> list[BadgeType]:
    return sorted(set(badges), key=BADGE_PRIORITY.__getitem__)


class BadgeAssigner:
    """Pick a small, varied set of badges for each suggested organization.

    Call ``assign`` once per organization, in result order, passing the
    badges already handed out in this request. Badges other organizations
    already carry are preferred less, which spreads the descriptive badges
    across the result list.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @staticmethod
    def eligible_badges(entry: OrganizationEntry) -> list[BadgeType]:
        """Descriptive badges an organization qualifies for, without duplicates."""
        pool = []
        if entry.prominence is Prominence.HIGH:
            pool.append(BadgeType.HIGH_IMPACT)
        if entry.focus_type in FOCUS_BADGES:
            pool.append(FOCUS_BADGES[entry.focus_type])
        for org_type in sorted(entry.org_types, key=lambda t: t.value):
            badge = ORG_TYPE_BADGES.get(org_type)
            if badge and badge not in pool:
                pool.append(badge)
        if entry.badge_profile is BadgeProfile.COMMUNITY_FOCUSED and BadgeType.COMMUNITY_PICK not in pool:
            pool.append(BadgeType.COMMUNITY_PICK)
        return pool

    def target_count(self, entry: OrganizationEntry) -> int:
        low, high = PROFILE_BADGE_RANGES[entry.badge_profile]
        return self.rng.randint(low, high)

    def assign(self, entry: OrganizationEntry, match_count: int, user_concerns_size: int,
               other_badges: Mapping[str, Iterable[BadgeType]],
               rank: Optional[RankClass] = None) -> list[BadgeType]:
        """Choose badges for one organization.

        Args:
            entry: The organization being labelled
            match_count: Number of user concerns the organization matched
            user_concerns_size: Number of concerns the user expressed
            other_badges: Badges already assigned to earlier organizations,
                keyed by organization url
            rank: Rank class of the organization, if matched

        Returns:
            Up to three badges, ordered by BADGE_PRIORITY
        """
        if user_concerns_size == 0 or match_count == 0:
            return [BadgeType.GENERAL_INTEREST]

        assigned = []
        if rank is not None:
            assigned.append(RANK_BADGES[rank])

        target = max(0, self.target_count(entry) - len(assigned))

        usage = Counter()
        for badges in other_badges.values():
            usage.update(b for b in set(badges) if is_descriptive(b))

        pool = [b for b in self.eligible_badges(entry) if b not in assigned]
        tiebreak = {b: self.rng.random() for b in pool}
        pool.sort(key=lambda b: (usage[b], BADGE_PRIORITY[b], tiebreak[b]))

        added = 0
        for badge in pool:
            if added >= target or len(assigned) >= MAX_BADGES_PER_RESOURCE:
                break
            assigned.append(badge)
            added += 1

        if (added < target and len(assigned) < MAX_BADGES_PER_RESOURCE
                and entry.prominence is not Prominence.HIGH
                and BadgeType.COMMUNITY_PICK not in assigned
                and self.rng.random() < COMMUNITY_PICK_CHANCE):
            assigned.append(BadgeType.COMMUNITY_PICK)

        if not assigned:
            if pool:
                assigned.append(pool[0])
            else:
                assigned.append(BadgeType.GENERAL_INTEREST)

        return sort_badges(assigned)[:MAX_BADGES_PER_RESOURCE]

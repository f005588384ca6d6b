"""Shared fixtures: a small fake catalog and seeded random sources."""

import random

import pytest

from taxvoice.suggestions.catalog import Catalog
from taxvoice.suggestions.models import (
    BadgeProfile,
    FocusType,
    OrganizationEntry,
    OrgType,
    Prominence,
    Tag,
    UserConcern,
)


def make_entry(name, tags, prominence=Prominence.MEDIUM, focus_type=None, org_types=(),
               badge_profile=BadgeProfile.DOUBLE_DIVERSE, main_category="Testing"):
    slug = name.lower().replace(" ", "-")
    return OrganizationEntry(
        name=name,
        url=f"https://{slug}.example.org/",
        description=f"{name} description",
        main_category=main_category,
        prominence=prominence,
        focus_type=focus_type,
        org_types=frozenset(org_types),
        advocacy_tags=frozenset(Tag.parse(t) for t in tags),
        badge_profile=badge_profile,
    )


@pytest.fixture
def entries():
    return [
        make_entry(
            "Alpha Health",
            ["health_slash", "medicaid_slash", "snap_slash"],
            prominence=Prominence.HIGH,
            focus_type=FocusType.BROAD,
            org_types=[OrgType.GRASSROOTS, OrgType.ACTIVISM],
            main_category="Healthcare",
        ),
        make_entry(
            "Beta Budget",
            ["fiscal_responsibility", "debt_reduction", "pentagon_slash"],
            org_types=[OrgType.THINK_TANK, OrgType.RESEARCH],
            badge_profile=BadgeProfile.SINGLE_PROMINENT,
            main_category="Fiscal Responsibility",
        ),
        make_entry(
            "Gamma Peace",
            ["military_spending_slash", "pentagon_slash"],
            prominence=Prominence.LOW,
            focus_type=FocusType.NICHE,
            org_types=[OrgType.ACTIVISM],
            badge_profile=BadgeProfile.TRIPLE_FOCUSED,
            main_category="Peace & Demilitarization",
        ),
        make_entry(
            "Delta Food",
            ["food_security_fund", "snap_fund"],
            focus_type=FocusType.NICHE,
            org_types=[OrgType.DIRECT_SERVICE],
            badge_profile=BadgeProfile.COMMUNITY_FOCUSED,
            main_category="Food & Agriculture",
        ),
        make_entry(
            "Epsilon Arts",
            ["arts_culture_fund"],
            prominence=Prominence.LOW,
            org_types=[OrgType.LEGAL],
            main_category="Arts & Culture",
        ),
    ]


@pytest.fixture
def catalog(entries):
    return Catalog(entries)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def medicaid_slash():
    return UserConcern(id="medicaid", description="Medicaid", category="Health", funding_level=-2)


@pytest.fixture
def snap_slash():
    return UserConcern(id="snap", description="Food stamps (SNAP)", category="Food and Agriculture", funding_level=-1)


@pytest.fixture
def pentagon_slash():
    return UserConcern(id="pentagon", description="Pentagon", category="War and Weapons", funding_level=5)

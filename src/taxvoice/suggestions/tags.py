"""Derive advocacy tags from a user's concern about a spending item."""

import logging
from typing import Union

from ..funding import FundingAction
from .models import Tag, UserConcern

logger = logging.getLogger(__name__)

# Broader causes each spending item rolls up to. A concern about an item
# matches organizations tracking the item itself and those tracking any of
# these causes with the same action.
ITEM_CATEGORIES: dict[str, tuple[str, ...]] = {
    # Health
    "medicaid": ("health", "social_safety_net", "poverty_reduction"),
    "medicare": ("health", "social_safety_net", "seniors"),
    "nih": ("health", "medical_research", "science"),
    "cdc": ("health", "public_health"),
    "substance_mental_health": ("health", "mental_health", "public_health"),
    # War and Weapons
    "pentagon": ("military_spending", "defense"),
    "pentagon_contractors": ("military_spending", "federal_contracting", "government_waste"),
    "pentagon_personnel": ("military_spending", "defense"),
    "pentagon_top5_contractors": ("military_spending", "federal_contracting", "government_waste"),
    "nuclear_weapons": ("military_spending", "nuclear_arms"),
    "foreign_military_aid": ("military_spending", "arms_transfers"),
    "israel_wars": ("military_spending", "arms_transfers", "middle_east_conflict"),
    "f35": ("military_spending", "federal_contracting", "weapons_programs"),
    "pentagon_spacex": ("military_spending", "federal_contracting", "space"),
    "pentagon_dei": ("military_spending", "civil_rights"),
    # Interest on Debt
    "interest_debt": ("national_debt",),
    # Veterans
    "va": ("veterans", "health"),
    "pact_act": ("veterans", "health", "toxic_exposure"),
    # Unemployment and Labor
    "tanf": ("social_safety_net", "poverty_reduction", "family_support"),
    "child_tax_credit": ("family_support", "poverty_reduction", "tax_policy"),
    "refugee_assistance": ("refugees", "immigration", "humanitarian_aid"),
    "liheap": ("social_safety_net", "poverty_reduction", "energy_assistance"),
    "nlrb": ("labor",),
    # Education
    "dept_education": ("education",),
    "college_aid": ("education", "higher_education"),
    "k12_schools": ("education", "public_schools"),
    "cpb": ("public_media", "arts_culture"),
    "imls": ("libraries", "arts_culture"),
    # Food and Agriculture
    "snap": ("food_security", "social_safety_net", "poverty_reduction"),
    "school_lunch": ("food_security", "nutrition", "public_schools"),
    "fsa": ("agriculture", "farm_subsidies"),
    "wic": ("food_security", "nutrition", "family_support"),
    # Government
    "fdic": ("financial_regulation",),
    "irs": ("tax_enforcement", "tax_policy"),
    "federal_courts": ("courts", "justice_system"),
    "public_defenders": ("courts", "criminal_justice", "civil_rights"),
    "usps": ("postal_service", "government_operations"),
    "cfpb": ("consumer_protection", "financial_regulation"),
    "mbda": ("minority_business", "economic_justice"),
    "usich": ("homelessness", "housing"),
    # Housing and Community
    "fema": ("disaster_relief",),
    "fema_drf": ("disaster_relief", "climate_resilience"),
    "hud": ("housing", "community_development"),
    "head_start": ("early_childhood", "education", "family_support"),
    "public_housing": ("housing", "poverty_reduction"),
    # Energy and Environment
    "epa": ("environment", "pollution"),
    "forest_service": ("environment", "public_lands", "conservation"),
    "noaa": ("climate", "environment", "science"),
    "renewable_energy": ("clean_energy", "climate", "environment"),
    "nps": ("public_lands", "conservation"),
    # International Affairs
    "diplomacy": ("diplomacy", "foreign_policy"),
    "usaid": ("foreign_aid", "humanitarian_aid", "diplomacy"),
    "usaid_climate": ("foreign_aid", "climate"),
    # Law Enforcement
    "deportations_border": ("immigration", "immigration_enforcement"),
    "federal_prisons": ("criminal_justice", "prisons"),
    # Transportation
    "highways": ("infrastructure", "transportation"),
    "public_transit": ("public_transit", "infrastructure", "transportation"),
    "tsa": ("transportation_security", "transportation", "surveillance"),
    "faa": ("aviation", "transportation"),
    "amtrak": ("rail", "infrastructure", "transportation"),
    # Science
    "nasa": ("space", "science"),
    "nsf": ("science", "basic_research"),
    "nasa_spacex": ("space", "federal_contracting"),
}


def derive_tags(item_id: str, action: Union[FundingAction, str]) -> list[Tag]:
    """Map a spending item and funding action to advocacy tags.

    The direct ``{item_id}_{action}`` tag comes first, followed by one
    ``{category}_{action}`` tag per broader category of the item. Unknown
    items get only the direct tag.

    Args:
        item_id: Spending item identifier (e.g., "medicaid")
        action: Funding action, as a FundingAction or its string value

    Returns:
        Deduplicated list of tags in a fixed order
    """
    action = FundingAction(action)
    tags = [Tag(item_id, action)]

    categories = ITEM_CATEGORIES.get(item_id)
    if categories is None:
        categories = ITEM_CATEGORIES.get(item_id.lower(), ())
        if not categories:
            logger.debug(f"No category mapping for item {item_id!r}; using direct tag only")

    for category in categories:
        tag = Tag(category, action)
        if tag not in tags:
            tags.append(tag)
    return tags


def tags_for_concern(concern: UserConcern) -> list[Tag]:
    return derive_tags(concern.id, concern.action)

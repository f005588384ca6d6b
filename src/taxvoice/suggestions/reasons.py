"""Turn a matched tag into a readable reason for a suggestion."""

import re
from typing import Union

from ..funding import FundingAction
from .models import MatchedReason, ReasonType, Tag

ACTION_PHRASES = {
    FundingAction.SLASH: "slashing funding for",
    FundingAction.FUND: "increasing funding for",
    FundingAction.REVIEW: "reviewing spending on",
}

REASON_TYPES = {
    FundingAction.SLASH: ReasonType.OPPOSES,
    FundingAction.FUND: ReasonType.SUPPORTS,
    FundingAction.REVIEW: ReasonType.REVIEWS,
}

TRAILING_GENERIC_WORDS = ("Policy", "Reform", "Spending")

# Acronyms that appear as tag subjects or in item descriptions
ACRONYMS = {
    "cdc": "Centers for Disease Control and Prevention",
    "cfpb": "Consumer Financial Protection Bureau",
    "cpb": "Corporation for Public Broadcasting",
    "dei": "Diversity, Equity, and Inclusion",
    "drf": "Disaster Relief Fund",
    "epa": "Environmental Protection Agency",
    "faa": "Federal Aviation Administration",
    "fdic": "Federal Deposit Insurance Corporation",
    "fema": "Federal Emergency Management Agency",
    "fsa": "Farm Service Agency",
    "hud": "Department of Housing and Urban Development",
    "imls": "Institute of Museum and Library Services",
    "irs": "Internal Revenue Service",
    "liheap": "Low Income Home Energy Assistance Program",
    "mbda": "Minority Business Development Agency",
    "nasa": "National Aeronautics and Space Administration",
    "nih": "National Institutes of Health",
    "nlrb": "National Labor Relations Board",
    "noaa": "National Oceanic and Atmospheric Administration",
    "nps": "National Park Service",
    "nsf": "National Science Foundation",
    "pact": "Honoring our PACT Act",
    "snap": "Supplemental Nutrition Assistance Program",
    "tanf": "Temporary Assistance for Needy Families",
    "tsa": "Transportation Security Administration",
    "usaid": "U.S. Agency for International Development",
    "usich": "U.S. Interagency Council on Homelessness",
    "usps": "U.S. Postal Service",
    "va": "Department of Veterans Affairs",
    "wic": "Women, Infants, and Children",
}

PROPER_NOUNS = {
    "amtrak": "Amtrak",
    "israel": "Israel",
    "medicaid": "Medicaid",
    "medicare": "Medicare",
    "pentagon": "Pentagon",
    "spacex": "SpaceX",
}

ABBREVIATIONS = (
    (re.compile(r"\bDept\.\s*"), "Department "),
    (re.compile(r"\bNat'l\b"), "National"),
)

_AGENCY_PREFIX = re.compile(
    r"^(Pentagon|Dept\. of Education|Federal Court System|FEMA|USAID|NASA)\s+-\s+"
)
_TRAILING_ACRONYM = re.compile(r"\s*\(([A-Z]{2,}[A-Za-z ]*)\)$")
_WORD = re.compile(r"[A-Za-z][A-Za-z']*")


def reason_type(tag: Tag) -> ReasonType:
    if tag.action is None:
        return ReasonType.GENERAL
    return REASON_TYPES[tag.action]


def format_tag_label(tag: Tag) -> str:
    """Readable label for a tag subject, e.g. "military_spending" -> "Military"."""
    words = []
    for word in tag.subject.split("_"):
        if not word:
            continue
        if word.lower() in ACRONYMS:
            words.append(word.upper())
        else:
            words.append(word[:1].upper() + word[1:])

    while len(words) > 1 and words[-1] in TRAILING_GENERIC_WORDS:
        words.pop()
    return " ".join(words)


def _fix_word(match: re.Match) -> str:
    word = match.group(0)
    lowered = word.lower()
    if lowered in PROPER_NOUNS:
        return PROPER_NOUNS[lowered]
    if lowered in ACRONYMS and word.islower():
        return word.upper()
    return word


def clean_item_description(description: str) -> str:
    """Turn a spending item label into a plain noun phrase.

    "Pentagon - Contractors" -> "Contractors"
    "Nat'l Oceanic & Atmospheric Administration (NOAA)"
        -> "National Oceanic & Atmospheric Administration"
    "CDC" -> "Centers for Disease Control and Prevention"
    """
    cleaned = " ".join(description.split())
    cleaned = _AGENCY_PREFIX.sub("", cleaned)

    stripped = _TRAILING_ACRONYM.sub("", cleaned)
    if stripped:
        cleaned = stripped

    for pattern, replacement in ABBREVIATIONS:
        cleaned = pattern.sub(replacement, cleaned)
    cleaned = cleaned.strip()

    if cleaned.lower() in ACRONYMS:
        return ACRONYMS[cleaned.lower()]

    if cleaned.isupper() and len(cleaned.split()) > 1:
        cleaned = cleaned.title()
    return _WORD.sub(_fix_word, cleaned)


def generate_matched_reason(tag: Union[Tag, str], description: str,
                            action: Union[FundingAction, str]) -> MatchedReason:
    """Explain a match between a user concern and an organization tag.

    Args:
        tag: The matched tag, or its string form ("health_fund")
        description: The user's spending item description
        action: The funding action the user chose for that item

    Returns:
        MatchedReason with type, label and the reconstructed concern phrase
    """
    if isinstance(tag, str):
        tag = Tag.parse(tag)
    action = FundingAction(action)
    label = format_tag_label(tag)
    concern = f"{ACTION_PHRASES[action]} {clean_item_description(description)}"
    return MatchedReason(
        type=reason_type(tag),
        description=label,
        original_concern=concern,
        actionable_tag=label,
    )

"""Funding-level and tone vocabulary shared by suggestions, prompts and emails."""

import math
from enum import Enum


class FundingAction(str, Enum):
    """Direction a user wants funding for a spending item to move."""
    SLASH = "slash"
    FUND = "fund"
    REVIEW = "review"


# Slider positions used when a discrete level has to be shown on the 0-100 scale
LEVEL_TO_SLIDER = {-2: 5, -1: 23, 0: 50, 1: 78, 2: 95}

TONE_LABELS = {0: "Kind", 1: "Concerned", 2: "Stern", 3: "Angry"}

FUNDING_DESCRIPTIONS = {
    -2: "Slash Heavily (e.g., eliminate or drastically reduce funding)",
    -1: "Cut Significantly (e.g., make notable reductions)",
    0: "Improve Efficiency/Review (e.g., maintain funding but demand better results or oversight)",
    1: "Fund (e.g., ensure adequate or modestly increased resources)",
    2: "Fund More (e.g., substantially increase investment)",
}

SHORT_FUNDING_DESCRIPTIONS = {
    -2: "Slash Heavily",
    -1: "Cut Significantly",
    0: "Improve Efficiency/Review",
    1: "Fund",
    2: "Fund More",
}

VOTE_RECOMMENDATIONS = {
    2: "Strongly Increase Funding",
    1: "Increase Funding",
    0: "Review for Efficiency",
    -1: "Decrease Funding",
    -2: "Strongly Decrease Funding",
}


def slider_to_funding_level(value: float) -> int:
    """Bucket a 0-100 slider position into a discrete level from -2 to 2."""
    if value <= 10:
        return -2
    if value <= 35:
        return -1
    if value <= 65:
        return 0
    if value <= 90:
        return 1
    return 2


def funding_level_to_slider(level: int) -> int:
    return LEVEL_TO_SLIDER.get(level, 50)


def normalize_funding_level(value: float) -> float:
    """Return a level on the -2..2 scale.

    Values already inside [-2, 2] are taken as levels; anything else is
    treated as a slider position and bucketed. Only use this where the
    scale is unknown: slider positions 0-2 read as levels here, so input
    known to be a slider goes through slider_to_funding_level instead.
    """
    if -2 <= value <= 2:
        return value
    return slider_to_funding_level(value)


def action_for_level(level: float) -> FundingAction:
    """Map a (possibly fractional) funding level to slash, fund or review."""
    if level < -0.5:
        return FundingAction.SLASH
    if level > 0.5:
        return FundingAction.FUND
    return FundingAction.REVIEW


def tone_bucket(aggressiveness: float) -> int:
    """Bucket aggressiveness (0-100) into 0 Kind, 1 Concerned, 2 Stern, 3 Angry."""
    clamped = min(100.0, max(0.0, float(aggressiveness)))
    return min(3, math.floor(clamped / 25))


def tone_label(aggressiveness: float) -> str:
    return TONE_LABELS[tone_bucket(aggressiveness)]


def describe_funding_level(level: int, short: bool = False) -> str:
    table = SHORT_FUNDING_DESCRIPTIONS if short else FUNDING_DESCRIPTIONS
    return table.get(level, table[0])

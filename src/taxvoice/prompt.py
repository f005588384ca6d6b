"""Build the instruction prompt an AI model uses to draft a constituent email."""

import logging
from collections.abc import Iterable, Mapping

from .funding import (
    TONE_LABELS,
    describe_funding_level,
    funding_level_to_slider,
    slider_to_funding_level,
    tone_bucket,
    tone_label,
)
from .suggestions.models import UserConcern

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Other Specific Programs"

SCALE_GUIDE = "0-10 is Slash Heavily, 11-35 is Cut Significantly, 36-65 is Improve Efficiency, 66-90 is Fund, 91-100 is Fund More"
TONE_GUIDE = ", ".join(
    f"{low}-{low + 24 if bucket < 3 else 100}: {TONE_LABELS[bucket]}"
    for bucket, low in ((0, 0), (1, 25), (2, 50), (3, 75))
)


def slider_value(item: UserConcern) -> float:
    """Slider position (0-100) for an item, whichever scale it was given on."""
    if item.slider_value is not None:
        return item.slider_value
    if -2 <= item.funding_level <= 2:
        return funding_level_to_slider(round(item.funding_level))
    return item.funding_level


def group_by_category(items: Iterable[UserConcern]) -> dict[str, list[UserConcern]]:
    grouped: dict[str, list[UserConcern]] = {}
    for item in items:
        grouped.setdefault(item.category or DEFAULT_CATEGORY, []).append(item)
    return dict(sorted(grouped.items()))


def prepare_items_for_prompt(selected: Mapping[str, UserConcern],
                             slider_values: Mapping[str, float]) -> list[UserConcern]:
    """Join the user's selections with the slider values they chose.

    Items without a slider value are left out; slider values for ids that
    were never selected are ignored.
    """
    items = []
    for item_id, value in slider_values.items():
        original = selected.get(item_id)
        if original is None:
            logger.debug(f"Ignoring slider value for unselected item {item_id!r}")
            continue
        items.append(UserConcern(
            id=original.id,
            description=original.description,
            category=original.category,
            slider_value=value,
        ))
    return items


def generate_prompt(items: Iterable[UserConcern], aggressiveness: float, user_name: str = "",
                    user_location: str = "", balance_budget: bool = False) -> str:
    """Render the email-drafting prompt.

    Args:
        items: Selected spending items with slider (or level) values
        aggressiveness: Tone slider, 0-100
        user_name: Sender name; a placeholder is used when blank
        user_location: Sender location; a placeholder is used when blank
        balance_budget: Whether to stress balancing the budget

    Returns:
        Prompt text
    """
    items = list(items)
    bucket = tone_bucket(aggressiveness)

    lines = [
        "You are an AI assistant helping a user draft an email to their elected representative "
        "regarding federal budget priorities. Please generate ONLY the body of the email.",
        "",
        "The user's details are:",
        f"Name: {user_name or '[Constituent Name]'}",
        f"Location: {user_location or '[Constituent Location]'}",
        "",
        f"The user desires the email to have a {tone_label(aggressiveness)} tone.",
        f"On a scale of 0 (most {TONE_LABELS[0]}) to 100 (most {TONE_LABELS[3]}), the user selected "
        f"an aggressiveness level of {aggressiveness:g}/100 (tone level {bucket} of 3).",
        f"(Scale guide: {TONE_GUIDE}).",
        "",
        "The user has expressed the following concerns about specific federal spending items, grouped by category:",
    ]

    by_category = group_by_category(items)
    for category, category_items in by_category.items():
        lines.append("")
        lines.append(f'For the category "{category}":')
        for item in category_items:
            value = slider_value(item)
            description = describe_funding_level(slider_to_funding_level(value))
            lines.append(
                f'- For "{item.description}": The user wants to {description}. '
                f"This corresponds to a funding preference of {value:g}/100 on our scale (where {SCALE_GUIDE})."
            )

    if not items and not balance_budget:
        lines.append("")
        lines.append("The user has not selected any specific items for funding changes "
                     "but may have general thoughts on the budget process.")

    if balance_budget:
        lines.append("")
        lines.append("IMPORTANT: The user also expressed a strong preference for balancing the budget "
                     "and reducing the national debt. Please ensure this is a prominent theme in the email.")

    lines.extend([
        "",
        "Please craft an email body reflecting these preferences.",
        "Start with a suitable opening for the specified tone.",
        "Clearly state the concerns regarding each item, grouped by category if multiple items exist in a category.",
        "Incorporate the budget/debt preference if selected.",
        "Conclude with a respectful call to action suitable for the tone, and a standard salutation.",
        "The email should sound like it's coming from a concerned constituent, not an AI.",
        "Generate only the email body. Do not include a subject line.",
    ])
    return "\n".join(lines) + "\n"


def generate_compact_prompt(items: Iterable[UserConcern], aggressiveness: float, user_name: str = "",
                            user_location: str = "", balance_budget: bool = False) -> str:
    """Shorter variant of generate_prompt using the short stance labels."""
    items = list(items)
    lines = [
        "Draft an email to an elected representative about federal budget priorities.",
        f"User: {user_name or '[Constituent Name]'}, {user_location or '[Constituent Location]'}.",
        f"Tone: {tone_label(aggressiveness)} (Aggressiveness: {aggressiveness:g}/100. Scale: {TONE_GUIDE}).",
        "",
        "User's concerns:",
    ]

    by_category = group_by_category(items)
    for category, category_items in by_category.items():
        lines.append("")
        lines.append(f'Category: "{category}":')
        for item in category_items:
            value = slider_value(item)
            stance = describe_funding_level(slider_to_funding_level(value), short=True)
            lines.append(
                f'- Item: "{item.description}", User Stance: {stance} '
                f"(Preference: {value:g}/100 on 0-100 scale where 0=Slash, 50=Review, 100=Fund More)."
            )

    if not items and not balance_budget:
        lines.append("")
        lines.append("No specific items selected. Email may focus on general budget process.")

    if balance_budget:
        lines.append("")
        lines.append("IMPORTANT: User wants to emphasize balancing the budget and reducing national debt.")

    lines.append("")
    lines.append("Generate ONLY the email body. Start appropriately for the tone. Group concerns by category. "
                 "Incorporate debt preference if noted. Conclude with a call to action and salutation fitting "
                 "the tone. Sound like a constituent. No subject line.")
    return "\n".join(lines)

"""Request handling for suggestion, prompt and email calls.

Payloads are the JSON bodies the web front end sends (camelCase keys).
Everything is validated here; the engine below assumes clean input.
"""

import logging
import random
from collections.abc import Mapping
from numbers import Real
from typing import Optional

from .config import Settings
from .letter import generate_standard_email
from .prompt import generate_compact_prompt, generate_prompt, prepare_items_for_prompt
from .suggestions.catalog import Catalog
from .suggestions.core import ResourceSuggester
from .suggestions.models import UserConcern

logger = logging.getLogger(__name__)

DEFAULT_AGGRESSIVENESS = 50
DEFAULT_SLIDER_VALUE = 50
SLIDER_KEY = "sliderValue"


class InvalidRequestError(ValueError):
    """A request payload failed validation (HTTP 400)."""
    status = 400

    def to_dict(self):
        return {"error": str(self)}


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _require_mapping(payload, name: str = "request body") -> Mapping:
    if not isinstance(payload, Mapping):
        raise InvalidRequestError(f"{name} must be an object")
    return payload


def _aggressiveness(payload: Mapping, required: bool = False) -> float:
    value = payload.get("aggressiveness")
    if value is None and not required:
        return DEFAULT_AGGRESSIVENESS
    if not _is_number(value) or value < 0 or value > 100:
        raise InvalidRequestError("Invalid aggressiveness value")
    return value


def _flag(payload: Mapping, key: str) -> bool:
    value = payload.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidRequestError(f"{key} must be a boolean")
    return value


def _text(payload: Mapping, key: str) -> str:
    value = payload.get(key) or ""
    if not isinstance(value, str):
        raise InvalidRequestError(f"{key} must be a string")
    return value


def parse_item(raw, value_key: str = "fundingLevel") -> UserConcern:
    """Validate one selected item and build a UserConcern from it."""
    item = _require_mapping(raw, "each selected item")
    item_id = item.get("id")
    if not isinstance(item_id, str) or not item_id.strip():
        raise InvalidRequestError("each selected item needs a non-empty string id")

    is_slider = value_key == SLIDER_KEY
    level = item.get(value_key, DEFAULT_SLIDER_VALUE if is_slider else 0)
    if not _is_number(level):
        raise InvalidRequestError(f"{value_key} for {item_id!r} must be a number")
    if is_slider and not 0 <= level <= 100:
        raise InvalidRequestError(f"{value_key} for {item_id!r} must be between 0 and 100")

    description = item.get("description") or item_id
    category = item.get("category") or ""
    if not isinstance(description, str) or not isinstance(category, str):
        raise InvalidRequestError(f"description and category for {item_id!r} must be strings")

    if is_slider:
        return UserConcern(id=item_id, description=description, category=category, slider_value=level)
    # fundingLevel may be a level or a slider position; UserConcern.level decides
    return UserConcern(id=item_id, description=description, category=category, funding_level=level)


def parse_items(payload: Mapping, key: str, value_key: str = "fundingLevel") -> list[UserConcern]:
    raw_items = payload.get(key)
    if not isinstance(raw_items, list):
        raise InvalidRequestError(f"{key} must be an array")
    return [parse_item(raw, value_key) for raw in raw_items]


def suggest_resources(payload, catalog: Optional[Catalog] = None,
                      rng: Optional[random.Random] = None,
                      settings: Optional[Settings] = None) -> list[dict]:
    """Handle a "further actions" request.

    Args:
        payload: {"selectedItems": [...], "aggressiveness": n,
            "balanceBudgetChecked": bool, "includeUnmatched": bool}
        catalog: Catalog to match against (bundled catalog by default)
        rng: Random source for badge selection
        settings: Runtime settings (seed and result cap)

    Returns:
        JSON-serialisable list of suggested resources
    """
    payload = _require_mapping(payload)
    concerns = parse_items(payload, "selectedItems")
    aggressiveness = _aggressiveness(payload)
    balance_budget = _flag(payload, "balanceBudgetChecked")
    include_unmatched = _flag(payload, "includeUnmatched")

    settings = settings or Settings()
    if rng is None and settings.seed is not None:
        rng = random.Random(settings.seed)

    suggester = ResourceSuggester(catalog=catalog, rng=rng, max_suggestions=settings.max_suggestions)
    results = suggester.suggest(
        concerns,
        aggressiveness=aggressiveness,
        balance_budget=balance_budget,
        include_unmatched=include_unmatched,
    )
    logger.info(f"Suggested {len(results)} resource(s) for {len(concerns)} concern(s)")
    return [r.to_dict() for r in results]


def generate_prompt_response(payload, compact: bool = False) -> dict:
    """Handle an AI prompt request; returns {"prompt": text}."""
    payload = _require_mapping(payload)
    items = parse_items(payload, "selectedItemsWithSliderValues", value_key=SLIDER_KEY)
    render = generate_compact_prompt if compact else generate_prompt
    prompt = render(
        items,
        _aggressiveness(payload, required=True),
        user_name=_text(payload, "userName"),
        user_location=_text(payload, "userLocation"),
        balance_budget=_flag(payload, "balanceBudgetPreference"),
    )
    return {"prompt": prompt}


def prepare_prompt_items_response(payload) -> list[dict]:
    """Join selections with slider values.

    Payload: {"initialSelectedItems": [[id, item], ...],
    "itemFundingLevels": [[id, sliderValue], ...]}
    """
    payload = _require_mapping(payload)
    selected = {}
    for pair in _pairs(payload, "initialSelectedItems"):
        selected[pair[0]] = parse_item(pair[1])

    slider_values = {}
    for item_id, value in _pairs(payload, "itemFundingLevels"):
        if not _is_number(value) or not 0 <= value <= 100:
            raise InvalidRequestError(f"slider value for {item_id!r} must be a number between 0 and 100")
        slider_values[item_id] = value

    items = prepare_items_for_prompt(selected, slider_values)
    return [
        {"id": i.id, "description": i.description, "category": i.category, "sliderValue": i.slider_value}
        for i in items
    ]


def _pairs(payload: Mapping, key: str) -> list:
    raw = payload.get(key)
    if not isinstance(raw, list) or not all(isinstance(p, list) and len(p) == 2 for p in raw):
        raise InvalidRequestError(f"{key} must be an array of [id, value] pairs")
    return raw


def generate_email_response(payload) -> dict:
    """Handle a standard email request; returns {"subject", "body"}."""
    payload = _require_mapping(payload)
    items = parse_items(payload, "selectedItems")
    email = generate_standard_email(
        items,
        _aggressiveness(payload),
        user_name=_text(payload, "userName"),
        user_location=_text(payload, "userLocation"),
        balance_budget=_flag(payload, "balanceBudgetChecked"),
    )
    return email.to_dict()

"""Suggestions module - match spending concerns to advocacy organizations."""

from .models import (
    BadgeType,
    MatchedReason,
    OrganizationEntry,
    RankClass,
    SuggestedResource,
    Tag,
    UserConcern,
)
from .catalog import Catalog, CatalogError, default_catalog, validate_catalog
from .tags import ITEM_CATEGORIES, derive_tags
from .reasons import clean_item_description, generate_matched_reason
from .badges import BadgeAssigner
from .core import ResourceSuggester
from .filters import ResourceFilter, facets, paginate

__all__ = [
    "BadgeType",
    "MatchedReason",
    "OrganizationEntry",
    "RankClass",
    "SuggestedResource",
    "Tag",
    "UserConcern",
    "Catalog",
    "CatalogError",
    "default_catalog",
    "validate_catalog",
    "ITEM_CATEGORIES",
    "derive_tags",
    "clean_item_description",
    "generate_matched_reason",
    "BadgeAssigner",
    "ResourceSuggester",
    "ResourceFilter",
    "facets",
    "paginate",
]

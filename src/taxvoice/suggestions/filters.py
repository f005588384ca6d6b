"""Multi-select filtering and paging over a suggestion list."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .models import BadgeType, OrgType, RankClass, SuggestedResource

DEFAULT_PAGE_SIZE = 10


@dataclass
class ResourceFilter:
    """Selected filter values per dimension.

    A resource passes when, for every non-empty dimension, it has at least
    one of the selected values. Empty dimensions do not constrain.
    """
    categories: set[str] = field(default_factory=set)
    org_types: set[OrgType] = field(default_factory=set)
    badges: set[BadgeType] = field(default_factory=set)
    ranks: set[RankClass] = field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        return not (self.categories or self.org_types or self.badges or self.ranks)

    def matches(self, resource: SuggestedResource) -> bool:
        entry = resource.entry
        if self.categories and entry.main_category not in self.categories:
            return False
        if self.org_types and not (self.org_types & entry.org_types):
            return False
        if self.badges and not (self.badges & set(resource.badges)):
            return False
        if self.ranks and resource.rank not in self.ranks:
            return False
        return True

    def apply(self, resources: Iterable[SuggestedResource]) -> list[SuggestedResource]:
        return [r for r in resources if self.matches(r)]


def facets(resources: Iterable[SuggestedResource]) -> dict[str, list]:
    """Values available for each filter dimension, in first-seen order."""
    found = {"categories": [], "org_types": [], "badges": [], "ranks": []}
    for resource in resources:
        values = {
            "categories": [resource.entry.main_category],
            "org_types": sorted(resource.entry.org_types, key=lambda t: t.value),
            "badges": resource.badges,
            "ranks": [resource.rank] if resource.rank else [],
        }
        for key, items in values.items():
            for item in items:
                if item not in found[key]:
                    found[key].append(item)
    return found


@dataclass
class Page:
    items: list[SuggestedResource]
    total: int
    has_more: bool


def paginate(resources: Sequence[SuggestedResource], page: int = 1,
             page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """Reveal the first ``page`` pages of results ("show more" paging)."""
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be positive")
    shown = list(resources[:page * page_size])
    return Page(items=shown, total=len(resources), has_more=len(resources) > len(shown))

"""Organization catalog: a validated, read-only sequence of entries."""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from .models import OrganizationEntry, Tag
from .organizations import ORGANIZATIONS

logger = logging.getLogger(__name__)

LEGACY_SUFFIXES = ("_cut", "_reform")


class CatalogError(ValueError):
    """Raised when catalog data has defects that would corrupt matching."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(f"{len(problems)} catalog problem(s): " + "; ".join(problems))


def check_records(records: Iterable[dict]) -> list[str]:
    """Find raw records that still use legacy tag suffixes."""
    problems = []
    for record in records:
        for tag in record.get("advocacy_tags", ()):
            if tag.endswith(LEGACY_SUFFIXES):
                problems.append(f"{record.get('name', '?')}: legacy tag suffix in {tag!r}")
    return problems


def validate_catalog(entries: Iterable[OrganizationEntry]) -> list[str]:
    """Return a list of problems found in the entries (empty when clean).

    Checks for duplicate URLs, entries without advocacy tags, and tags
    whose string form would parse back differently.
    """
    problems = []
    seen_urls = {}
    for entry in entries:
        if entry.url in seen_urls:
            problems.append(f"{entry.name}: duplicate url {entry.url} (also used by {seen_urls[entry.url]})")
        else:
            seen_urls[entry.url] = entry.name

        if not entry.advocacy_tags:
            problems.append(f"{entry.name}: no advocacy tags")

        for tag in entry.advocacy_tags:
            if not isinstance(tag, Tag) or not tag.is_canonical:
                problems.append(f"{entry.name}: non-canonical tag {tag!r}")
    return problems


class Catalog(Sequence):
    """Immutable, ordered collection of OrganizationEntry.

    Construct one per process (or per test) and pass it to the suggester.
    Lookups are full scans; ``by_tag`` is an index over the same entries.
    """

    def __init__(self, entries: Iterable[OrganizationEntry]):
        self._entries = tuple(entries)
        problems = validate_catalog(self._entries)
        if problems:
            for problem in problems:
                logger.warning(f"Catalog: {problem}")
            raise CatalogError(problems)

        index: dict[Tag, list[OrganizationEntry]] = {}
        for entry in self._entries:
            for tag in entry.advocacy_tags:
                index.setdefault(tag, []).append(entry)
        self._by_tag = {tag: tuple(found) for tag, found in index.items()}

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "Catalog":
        records = list(records)
        problems = check_records(records)
        if problems:
            for problem in problems:
                logger.warning(f"Catalog: {problem}")
            raise CatalogError(problems)
        return cls(OrganizationEntry.from_dict(r) for r in records)

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self):
        return len(self._entries)

    def by_tag(self, tag: Tag) -> tuple[OrganizationEntry, ...]:
        return self._by_tag.get(tag, ())

    def find(self, url: str) -> Optional[OrganizationEntry]:
        for entry in self._entries:
            if entry.url == url:
                return entry
        return None

    @property
    def tags(self) -> set[Tag]:
        return set(self._by_tag)


_default_catalog: Optional[Catalog] = None


def default_catalog() -> Catalog:
    """Build (once) and return the catalog of bundled organizations."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = Catalog.from_records(ORGANIZATIONS)
        logger.debug(f"Loaded {len(_default_catalog)} organizations")
    return _default_catalog

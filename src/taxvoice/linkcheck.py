"""Check that catalog organization websites are still reachable."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, asdict
from typing import Optional

import requests

from .config import DEFAULT_HTTP_TIMEOUT, DEFAULT_USER_AGENT
from .suggestions.models import OrganizationEntry

logger = logging.getLogger(__name__)

# Some sites reject HEAD outright; retry those with GET
RETRY_WITH_GET = {403, 405}


@dataclass
class LinkStatus:
    """Result of checking one organization's URL."""
    name: str
    url: str
    status_code: Optional[int] = None
    ok: bool = False
    error: Optional[str] = None

    def to_dict(self):
        return asdict(self)


class LinkChecker:
    """HTTP reachability checker for catalog URLs."""

    def __init__(self, timeout: int = DEFAULT_HTTP_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent
        })

    def check_url(self, name: str, url: str) -> LinkStatus:
        """Check a single URL.

        Args:
            name: Organization name, for reporting
            url: Website to check

        Returns:
            LinkStatus with the final status code or the transport error
        """
        try:
            resp = self.session.head(url, timeout=self.timeout, allow_redirects=True)
            if resp.status_code in RETRY_WITH_GET:
                resp = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.error(f"Error checking {name} ({url}): {e}")
            return LinkStatus(name=name, url=url, error=str(e))

        ok = resp.status_code < 400
        if not ok:
            logger.warning(f"{name} returned status {resp.status_code} for {url}")
        return LinkStatus(name=name, url=url, status_code=resp.status_code, ok=ok)

    def check(self, entries: Iterable[OrganizationEntry]) -> list[LinkStatus]:
        return [self.check_url(entry.name, entry.url) for entry in entries]

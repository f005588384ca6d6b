"""Runtime settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from . import __version__

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HTTP_TIMEOUT = 10
DEFAULT_USER_AGENT = f"taxvoice/{__version__}"


def _int_env(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    """Settings for the service and CLI layers.

    ``seed`` makes badge selection reproducible; ``max_suggestions`` of
    None returns every match (TAXVOICE_MAX_SUGGESTIONS=0 is read as None).
    """
    seed: Optional[int] = None
    max_suggestions: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL
    http_timeout: int = DEFAULT_HTTP_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        max_suggestions = _int_env("TAXVOICE_MAX_SUGGESTIONS")
        if max_suggestions is not None and max_suggestions < 0:
            raise ValueError(f"TAXVOICE_MAX_SUGGESTIONS must not be negative, got {max_suggestions}")
        if max_suggestions == 0:
            max_suggestions = None
        return cls(
            seed=_int_env("TAXVOICE_SEED"),
            max_suggestions=max_suggestions,
            log_level=os.getenv("TAXVOICE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            http_timeout=_int_env("TAXVOICE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            user_agent=os.getenv("TAXVOICE_USER_AGENT", DEFAULT_USER_AGENT),
        )

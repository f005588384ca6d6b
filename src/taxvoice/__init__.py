"""
taxvoice - See where federal tax dollars go and act on it.

This package matches a taxpayer's spending preferences to advocacy
organizations worth contacting, and drafts the email they can send to
their representatives about the same preferences.
"""

__version__ = "0.1.0"

from .funding import FundingAction
from .spending import get_tax_spending
from .suggestions import ResourceSuggester, UserConcern
from .letter import generate_standard_email
from .prompt import generate_prompt

__all__ = [
    "FundingAction",
    "get_tax_spending",
    "ResourceSuggester",
    "UserConcern",
    "generate_standard_email",
    "generate_prompt",
]

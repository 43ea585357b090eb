"""
Prompts for the email routing classifier.
"""

from .routing import (
    CLASSIFY_PROMPT,
    DRAFT_RESPONSE_PROMPT,
    ACTION_ITEMS_PROMPT,
    CATEGORY_ROLES,
)

__all__ = [
    "CLASSIFY_PROMPT",
    "DRAFT_RESPONSE_PROMPT",
    "ACTION_ITEMS_PROMPT",
    "CATEGORY_ROLES",
]

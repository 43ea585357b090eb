"""
Recipient autocomplete and mailto links over the configured recipient set.
"""

from collections.abc import Iterable
from urllib.parse import quote


def filter_recipients(query: str, recipients: Iterable[str]) -> list[str]:
    """
    Autocomplete: case-insensitive substring match, original order kept.
    An empty query returns every recipient.
    """
    if not query:
        return list(recipients)
    needle = query.lower()
    return [r for r in recipients if needle in r.lower()]


def mailto_url(recipient: str) -> str:
    return f"mailto:{quote(recipient.strip(), safe='@')}"

"""
Header parser for pasted email text.
"""

import re

from email_router.core.models import ParsedEmail

# A value runs up to the first line break; "\r" counts as one
FROM_PATTERN = re.compile(r"^From: ([^\r\n]+)(?:\r|$)")
SUBJECT_PATTERN = re.compile(r"^Subject: ([^\r\n]+)(?:\r|$)")


def parse_email_content(raw_email: str) -> ParsedEmail:
    """
    Extract From, Subject and body from pasted email text.

    Only lines starting with the exact labels count as headers; the first
    occurrence of each wins. The body starts after whichever header line
    comes later. Input without headers is returned as a trimmed body.
    """
    lines = raw_email.split("\n")
    body_start = 0

    sender, from_index = _find_header(lines, FROM_PATTERN)
    if from_index is not None:
        body_start = from_index + 1

    subject, subject_index = _find_header(lines, SUBJECT_PATTERN)
    if subject_index is not None:
        body_start = max(body_start, subject_index + 1)

    body = "\n".join(lines[body_start:]).strip()
    return ParsedEmail(sender=sender, subject=subject, body=body)


def _find_header(lines: list[str], pattern: re.Pattern) -> tuple[str, int | None]:
    for index, line in enumerate(lines):
        match = pattern.match(line)
        if match:
            return match.group(1).strip(), index
    return "", None

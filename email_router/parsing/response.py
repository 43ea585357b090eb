"""
Helpers for decoding JSON returned by Gemini.
"""

import json
from typing import Any

from email_router.core.exceptions import ResponseShapeError
from email_router.core.logging import get_logger

log = get_logger(__name__)

FENCE_OPEN = "```json"
FENCE_CLOSE = "```"


def strip_json_fence(response_text: str) -> str:
    """
    Remove a ```json ... ``` wrapper if the whole response is fenced.

    Only that exact form is recognised; anything else is returned trimmed.
    """
    text = response_text.strip()
    if text.startswith(FENCE_OPEN) and text.endswith(FENCE_CLOSE):
        return text[len(FENCE_OPEN):-len(FENCE_CLOSE)].strip()
    return text


def parse_json_response(response_text: str | None) -> Any:
    """
    Parse JSON from Gemini response text.

    Raises:
        ResponseShapeError: If there is no text or it is not valid JSON
    """
    if response_text is None:
        raise ResponseShapeError("Backend returned an empty response")

    text = strip_json_fence(response_text)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        log.error("gemini_parse_error", error=str(e), response_preview=text[:200])
        raise ResponseShapeError(str(e), cause=e) from e

"""Raw email and backend response parsing."""

from .parser import parse_email_content
from .response import strip_json_fence, parse_json_response

__all__ = [
    "parse_email_content",
    "strip_json_fence",
    "parse_json_response",
]

"""
Email classifiers module.
"""

from email_router.classifiers.base import BaseClassifier
from email_router.classifiers.gemini import GeminiClassifier

_classifier: GeminiClassifier | None = None


def get_classifier() -> GeminiClassifier:
    """
    Get or create the shared Gemini classifier.

    Raises:
        ValueError: If GEMINI_API_KEY is not configured
    """
    global _classifier
    if _classifier is None:
        _classifier = GeminiClassifier()
    return _classifier


__all__ = [
    "BaseClassifier",
    "GeminiClassifier",
    "get_classifier",
]

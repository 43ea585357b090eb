"""Core modules for email classification."""

from .exceptions import (
    EmailRouterError,
    BackendInvocationError,
    ResponseShapeError,
    ClassificationError,
    DraftGenerationError,
    ActionExtractionError,
)
from .logging import configure_logging, get_logger
from .models import (
    Category,
    Priority,
    ParsedEmail,
    EmailClassification,
    HistoryEntry,
    ExampleEmail,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "EmailRouterError",
    "BackendInvocationError",
    "ResponseShapeError",
    "ClassificationError",
    "DraftGenerationError",
    "ActionExtractionError",
    "Category",
    "Priority",
    "ParsedEmail",
    "EmailClassification",
    "HistoryEntry",
    "ExampleEmail",
]

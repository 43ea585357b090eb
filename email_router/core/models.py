"""
Data models for email classification.

Wire names follow the JSON the backend produces and the history file stores
(camelCase); Python attribute names are snake_case.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Category(str, Enum):
    """Email categories."""

    SUPPORT = "Support"
    SALES = "Sales"
    MARKETING = "Marketing"
    BILLING = "Billing"
    GENERAL_INQUIRY = "General Inquiry"


class Priority(str, Enum):
    """Email priorities."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class ParsedEmail:
    """Header fields and body extracted from raw email text."""

    sender: str = ""
    subject: str = ""
    body: str = ""


class EmailClassification(BaseModel):
    """Result from email classification."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: Category
    priority: Priority
    suggested_recipient: str = Field(alias="suggestedRecipient")
    summary: str

    @field_validator("suggested_recipient")
    @classmethod
    def _recipient_in_set(cls, value: str, info: ValidationInfo) -> str:
        # Only enforced when a recipient set is supplied as validation context
        recipients = (info.context or {}).get("recipients")
        if recipients is not None and value not in recipients:
            raise ValueError(f"suggestedRecipient {value!r} is not a known recipient")
        return value

    def to_dict(self) -> dict:
        """Convert to the camelCase wire format."""
        return self.model_dump(mode="json", by_alias=True)


class HistoryEntry(BaseModel):
    """A stored classification, newest first in the history list."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    timestamp: str
    email_content: str = Field(alias="emailContent")
    classification: EmailClassification


@dataclass(frozen=True)
class ExampleEmail:
    """Labelled sample email for quick testing."""

    label: str
    content: str

"""
Request and response models for the email router API.
"""

from pydantic import BaseModel, Field

from email_router.core.models import EmailClassification


# Request Models


class EmailContentRequest(BaseModel):
    """Raw email text to parse, classify or mine for action items."""

    email_content: str = ""


class DraftRequest(BaseModel):
    """Request to draft a reply to a classified email."""

    email_content: str = ""
    classification: EmailClassification


# Response Models


class ParsedEmailResult(BaseModel):
    """Header fields and body extracted from raw text."""

    sender: str = Field("", serialization_alias="from")
    subject: str = ""
    body: str = ""


class DraftResult(BaseModel):
    """Generated reply draft."""

    draft: str


class ActionItemsResult(BaseModel):
    """Extracted action items, possibly empty."""

    action_items: list[str] = []


class RecipientSuggestion(BaseModel):
    """Autocomplete suggestion."""

    address: str
    mailto: str


class RecipientsResult(BaseModel):
    """Recipients matching the typed text."""

    recipients: list[RecipientSuggestion] = []


class ExampleEmailResult(BaseModel):
    """A labelled sample email."""

    label: str
    content: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = "1.0.0"
    model: str = ""

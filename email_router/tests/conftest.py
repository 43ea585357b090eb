"""
Shared pytest fixtures for email_router tests.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from email_router.classifiers.gemini import GeminiClassifier
from email_router.core.models import Category, EmailClassification, Priority

RECIPIENTS = [
    "support@example.com",
    "sales@example.com",
    "marketing@example.com",
    "billing@example.com",
    "info@example.com",
]


@pytest.fixture
def recipients() -> list[str]:
    """Configured recipient set."""
    return list(RECIPIENTS)


@pytest.fixture
def sample_email_text() -> str:
    """Raw pasted email for testing."""
    return """From: customer@example.com
Subject: Urgent Support Request - Order #54321

Dear Support Team,

The item I received from order #54321 does not turn on.
Please send a replacement as soon as possible.

Thank you,
Alex"""


@pytest.fixture
def sample_classification() -> EmailClassification:
    """Sample classification result."""
    return EmailClassification(
        category=Category.SUPPORT,
        priority=Priority.HIGH,
        suggested_recipient="support@example.com",
        summary="Customer reports a defective item from order #54321 and wants a replacement.",
    )


@pytest.fixture
def classification_json(sample_classification) -> str:
    """Backend JSON for the sample classification."""
    return json.dumps(sample_classification.to_dict())


@pytest.fixture
def mock_genai_client():
    """Gemini client double exposing client.aio.models.generate_content."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def respond(mock_genai_client):
    """Set the text the mocked Gemini client returns."""

    def _respond(text):
        mock_genai_client.aio.models.generate_content.return_value = SimpleNamespace(text=text)

    return _respond


@pytest.fixture
def classifier(mock_genai_client, recipients) -> GeminiClassifier:
    """Classifier wired to the mocked Gemini client."""
    return GeminiClassifier(
        client=mock_genai_client,
        model="gemini-test",
        recipients=recipients,
    )

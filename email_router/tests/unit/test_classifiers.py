"""Unit tests for the Gemini classifier."""

import asyncio
import json

import pytest
from google.genai import types

from email_router.classifiers.gemini import (
    CLASSIFICATION_FIELDS,
    GeminiClassifier,
    _backend_error_kind,
)
from email_router.core.exceptions import (
    ActionExtractionError,
    BackendInvocationError,
    ClassificationError,
    DraftGenerationError,
    ResponseShapeError,
)
from email_router.core.models import Category, EmailClassification, Priority


def _call_kwargs(client) -> dict:
    return client.aio.models.generate_content.call_args.kwargs


class TestGeminiClassifierInit:
    """Tests for GeminiClassifier construction."""

    def test_requires_api_key_without_client(self, monkeypatch):
        """Test a missing key is rejected when no client is injected."""
        monkeypatch.setattr("email_router.classifiers.gemini.settings.gemini_api_key", "")

        with pytest.raises(ValueError, match="GEMINI_API_KEY"):
            GeminiClassifier()

    def test_injected_client_needs_no_key(self, mock_genai_client, monkeypatch):
        """Test an injected client bypasses key checks."""
        monkeypatch.setattr("email_router.classifiers.gemini.settings.gemini_api_key", "")

        classifier = GeminiClassifier(client=mock_genai_client)

        assert classifier.client is mock_genai_client


class TestClassify:
    """Tests for GeminiClassifier.classify."""

    def test_returns_validated_classification(
        self, classifier, respond, classification_json, sample_classification, sample_email_text
    ):
        """Test a valid response maps to EmailClassification."""
        respond(classification_json)

        result = asyncio.run(classifier.classify(sample_email_text))

        assert result == sample_classification
        assert result.category in set(Category)
        assert result.priority in set(Priority)
        assert result.suggested_recipient in classifier.recipients

    def test_fenced_response_is_unwrapped(
        self, classifier, respond, classification_json, sample_classification, sample_email_text
    ):
        """Test ```json fenced output parses like bare JSON."""
        respond(f"```json\n{classification_json}\n```")

        result = asyncio.run(classifier.classify(sample_email_text))

        assert result == sample_classification

    def test_prompt_embeds_enums_recipients_and_email(
        self, classifier, respond, classification_json, mock_genai_client, sample_email_text
    ):
        """Test prompt carries categories, priorities, recipients and raw email."""
        respond(classification_json)

        asyncio.run(classifier.classify(sample_email_text))

        kwargs = _call_kwargs(mock_genai_client)
        prompt = kwargs["contents"]
        assert kwargs["model"] == "gemini-test"
        assert "Support, Sales, Marketing, Billing, General Inquiry" in prompt
        assert "High, Medium, Low" in prompt
        assert ", ".join(classifier.recipients) in prompt
        assert sample_email_text in prompt

    def test_request_uses_constrained_schema(
        self, classifier, respond, classification_json, mock_genai_client, sample_email_text
    ):
        """Test JSON mime type and enum-constrained, ordered schema."""
        respond(classification_json)

        asyncio.run(classifier.classify(sample_email_text))

        config = _call_kwargs(mock_genai_client)["config"]
        schema = config.response_schema
        assert config.response_mime_type == "application/json"
        assert schema.type == types.Type.OBJECT
        assert schema.required == list(CLASSIFICATION_FIELDS)
        assert schema.property_ordering == list(CLASSIFICATION_FIELDS)
        assert schema.properties["category"].enum == [c.value for c in Category]
        assert schema.properties["priority"].enum == ["High", "Medium", "Low"]
        assert schema.properties["suggestedRecipient"].enum == classifier.recipients

    def test_backend_failure_raises_classification_error(
        self, classifier, mock_genai_client, sample_email_text
    ):
        """Test backend exceptions surface as ClassificationError."""
        mock_genai_client.aio.models.generate_content.side_effect = RuntimeError("429 quota exceeded")

        with pytest.raises(ClassificationError) as exc_info:
            asyncio.run(classifier.classify(sample_email_text))

        error = exc_info.value
        assert "Failed to classify email" in error.message
        assert "429 quota exceeded" in error.message
        assert isinstance(error.cause, BackendInvocationError)

    def test_invalid_json_raises_classification_error(self, classifier, respond, sample_email_text):
        """Test non-JSON text fails the whole operation."""
        respond("Sorry, I cannot help with that.")

        with pytest.raises(ClassificationError) as exc_info:
            asyncio.run(classifier.classify(sample_email_text))

        assert isinstance(exc_info.value.cause, ResponseShapeError)

    def test_unknown_category_rejected(self, classifier, respond, sample_email_text):
        """Test values outside the category enum are rejected."""
        respond(json.dumps({
            "category": "Spam",
            "priority": "Low",
            "suggestedRecipient": "info@example.com",
            "summary": "Promo",
        }))

        with pytest.raises(ClassificationError):
            asyncio.run(classifier.classify(sample_email_text))

    def test_unknown_recipient_rejected(self, classifier, respond, sample_email_text):
        """Test recipients outside the configured set are rejected."""
        respond(json.dumps({
            "category": "Sales",
            "priority": "Medium",
            "suggestedRecipient": "ceo@example.com",
            "summary": "Demo request",
        }))

        with pytest.raises(ClassificationError) as exc_info:
            asyncio.run(classifier.classify(sample_email_text))

        assert "ceo@example.com" in exc_info.value.message

    def test_missing_field_rejected(self, classifier, respond, sample_email_text):
        """Test responses lacking a required field are rejected."""
        respond(json.dumps({"category": "Sales", "priority": "Medium", "summary": "x"}))

        with pytest.raises(ClassificationError):
            asyncio.run(classifier.classify(sample_email_text))

    def test_backend_error_without_message_uses_generic_text(
        self, classifier, mock_genai_client, sample_email_text
    ):
        """Test a message-less backend error gets a generic description."""
        mock_genai_client.aio.models.generate_content.side_effect = RuntimeError()

        with pytest.raises(ClassificationError) as exc_info:
            asyncio.run(classifier.classify(sample_email_text))

        assert exc_info.value.message == "Failed to classify email: An unknown error occurred."


class TestGenerateResponseDraft:
    """Tests for GeminiClassifier.generate_response_draft."""

    def test_returns_text_unmodified(
        self, classifier, respond, sample_classification, sample_email_text
    ):
        """Test the draft text is returned as-is."""
        draft = "  Dear Alex,\n\nWe are sorry to hear about your order.\n"
        respond(draft)

        result = asyncio.run(
            classifier.generate_response_draft(sample_email_text, sample_classification)
        )

        assert result == draft

    def test_prompt_includes_classification_and_role(
        self, classifier, respond, mock_genai_client, sample_classification, sample_email_text
    ):
        """Test prompt embeds the email, classification and category role."""
        respond("Draft")

        asyncio.run(classifier.generate_response_draft(sample_email_text, sample_classification))

        kwargs = _call_kwargs(mock_genai_client)
        prompt = kwargs["contents"]
        assert sample_email_text in prompt
        assert "Category: Support" in prompt
        assert "Priority: High" in prompt
        assert "Suggested Recipient: support@example.com" in prompt
        assert sample_classification.summary in prompt
        assert "customer support agent" in prompt
        assert kwargs["config"] is None

    def test_backend_failure_raises_draft_error(
        self, classifier, mock_genai_client, sample_classification, sample_email_text
    ):
        """Test backend exceptions surface as DraftGenerationError."""
        mock_genai_client.aio.models.generate_content.side_effect = ConnectionError("network down")

        with pytest.raises(DraftGenerationError, match="network down"):
            asyncio.run(
                classifier.generate_response_draft(sample_email_text, sample_classification)
            )

    def test_missing_text_raises_draft_error(
        self, classifier, respond, sample_classification, sample_email_text
    ):
        """Test a response without text is a failure."""
        respond(None)

        with pytest.raises(DraftGenerationError):
            asyncio.run(
                classifier.generate_response_draft(sample_email_text, sample_classification)
            )

    def test_backend_error_without_message_uses_generic_text(
        self, classifier, mock_genai_client, sample_classification, sample_email_text
    ):
        """Test a message-less backend error gets a generic description."""
        mock_genai_client.aio.models.generate_content.side_effect = RuntimeError()

        with pytest.raises(DraftGenerationError) as exc_info:
            asyncio.run(
                classifier.generate_response_draft(sample_email_text, sample_classification)
            )

        assert (
            exc_info.value.message
            == "Failed to generate response draft: An unknown error occurred."
        )


class TestExtractActionItems:
    """Tests for GeminiClassifier.extract_action_items."""

    def test_returns_items_in_order(self, classifier, respond, sample_email_text):
        """Test a JSON array of strings is returned in order."""
        respond('["Send a replacement", "Call the customer"]')

        result = asyncio.run(classifier.extract_action_items(sample_email_text))

        assert result == ["Send a replacement", "Call the customer"]

    def test_fenced_array(self, classifier, respond, sample_email_text):
        """Test fenced arrays are unwrapped."""
        respond('```json\n["Pay invoice"]\n```')

        result = asyncio.run(classifier.extract_action_items(sample_email_text))

        assert result == ["Pay invoice"]

    def test_empty_array_is_valid(self, classifier, respond):
        """Test no actionable content yields an empty list."""
        respond("[]")

        result = asyncio.run(classifier.extract_action_items("Thanks, have a nice weekend!"))

        assert result == []

    def test_request_uses_array_schema(self, classifier, respond, mock_genai_client):
        """Test the response schema is an array of strings."""
        respond("[]")

        asyncio.run(classifier.extract_action_items("Please call me."))

        config = _call_kwargs(mock_genai_client)["config"]
        assert config.response_mime_type == "application/json"
        assert config.response_schema.type == types.Type.ARRAY
        assert config.response_schema.items.type == types.Type.STRING

    def test_non_array_raises(self, classifier, respond):
        """Test a JSON object instead of an array is rejected."""
        respond('{"items": ["a"]}')

        with pytest.raises(ActionExtractionError) as exc_info:
            asyncio.run(classifier.extract_action_items("Please call me."))

        assert isinstance(exc_info.value.cause, ResponseShapeError)

    def test_invalid_json_raises(self, classifier, respond):
        """Test unparseable text is rejected."""
        respond("1. Call back")

        with pytest.raises(ActionExtractionError):
            asyncio.run(classifier.extract_action_items("Please call me."))

    def test_backend_failure_raises(self, classifier, mock_genai_client):
        """Test backend exceptions surface as ActionExtractionError."""
        mock_genai_client.aio.models.generate_content.side_effect = RuntimeError("401 invalid api key")

        with pytest.raises(ActionExtractionError, match="Failed to extract action items"):
            asyncio.run(classifier.extract_action_items("Please call me."))

    def test_backend_error_without_message_uses_generic_text(self, classifier, mock_genai_client):
        """Test a message-less backend error gets a generic description."""
        mock_genai_client.aio.models.generate_content.side_effect = RuntimeError()

        with pytest.raises(ActionExtractionError) as exc_info:
            asyncio.run(classifier.extract_action_items("Please call me."))

        assert exc_info.value.message == "Failed to extract action items: An unknown error occurred."


class TestBackendErrorKind:
    """Tests for naming failed Gemini calls in logs."""

    def test_rate_limit(self):
        """Test quota and 429 errors are rate limits."""
        assert _backend_error_kind(RuntimeError("429 RESOURCE_EXHAUSTED")) == "gemini_rate_limit"
        assert _backend_error_kind(RuntimeError("Rate limit reached")) == "gemini_rate_limit"

    def test_words_containing_rate_are_not_rate_limits(self):
        """Test 'generate' and similar words do not count as rate limits."""
        assert _backend_error_kind(RuntimeError("failed to generate content")) == "gemini_error"
        assert _backend_error_kind(RuntimeError("moderate load, separate retry")) == "gemini_error"

    def test_auth(self):
        """Test key and permission errors are auth errors."""
        assert _backend_error_kind(RuntimeError("403 PERMISSION_DENIED")) == "gemini_auth_error"
        assert _backend_error_kind(RuntimeError("API key not valid")) == "gemini_auth_error"

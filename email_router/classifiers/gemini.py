"""
Gemini AI classifier implementation.
"""

from google import genai
from google.genai import types
from pydantic import TypeAdapter, ValidationError

from email_router.classifiers.base import BaseClassifier
from email_router.classifiers.prompts import (
    ACTION_ITEMS_PROMPT,
    CATEGORY_ROLES,
    CLASSIFY_PROMPT,
    DRAFT_RESPONSE_PROMPT,
)
from email_router.config import settings
from email_router.core.exceptions import (
    ActionExtractionError,
    BackendInvocationError,
    ClassificationError,
    DraftGenerationError,
    EmailRouterError,
    ResponseShapeError,
    describe_error,
)
from email_router.core.logging import get_logger
from email_router.core.models import Category, EmailClassification, Priority
from email_router.parsing.response import parse_json_response

log = get_logger(__name__)

# Property order sent to Gemini; keeps generation deterministic
CLASSIFICATION_FIELDS = ("category", "priority", "suggestedRecipient", "summary")

# Substrings of backend error messages, used to name the log event
RATE_LIMIT_MARKERS = ("rate limit", "rate_limit", "resource_exhausted", "429", "quota")
AUTH_MARKERS = ("api key", "auth", "401", "403")

_action_items_adapter = TypeAdapter(list[str])


class GeminiClassifier(BaseClassifier):
    """Gemini AI-based email classifier."""

    def __init__(
        self,
        client: genai.Client | None = None,
        api_key: str | None = None,
        model: str | None = None,
        recipients: list[str] | None = None,
    ):
        self.api_key = api_key or settings.gemini_api_key
        self.model_name = model or settings.gemini_model
        self.recipients = list(settings.recipients if recipients is None else recipients)

        if client is None:
            if not self.api_key:
                raise ValueError("GEMINI_API_KEY is required")
            client = genai.Client(api_key=self.api_key)
        self.client = client

    async def classify(self, email_content: str) -> EmailClassification:
        """
        Classify an email using Gemini AI.

        The response is constrained by a JSON schema whose enums carry the
        categories, priorities and configured recipients.

        Args:
            email_content: Raw email text

        Returns:
            Validated EmailClassification
        """
        prompt = CLASSIFY_PROMPT.format(
            categories=", ".join(c.value for c in Category),
            priorities=", ".join(p.value for p in Priority),
            recipients=", ".join(self.recipients),
            email_content=email_content,
        )

        log.debug("classify_request", content_length=len(email_content))

        try:
            text = await self._generate(prompt, self._json_config(self.classification_schema()))
            data = parse_json_response(text)
            classification = self._validate_classification(data)
        except EmailRouterError as e:
            raise ClassificationError(
                f"Failed to classify email: {describe_error(e)}", cause=e
            ) from e

        log.info(
            "email_classified",
            category=classification.category.value,
            priority=classification.priority.value,
            suggested_recipient=classification.suggested_recipient,
        )
        return classification

    async def generate_response_draft(
        self,
        email_content: str,
        classification: EmailClassification,
    ) -> str:
        """
        Draft a reply from the perspective of the team the category implies.

        Args:
            email_content: Raw text of the original email
            classification: A prior classification of that email

        Returns:
            Generated draft text, unmodified
        """
        prompt = DRAFT_RESPONSE_PROMPT.format(
            email_content=email_content,
            category=classification.category.value,
            priority=classification.priority.value,
            suggested_recipient=classification.suggested_recipient,
            summary=classification.summary,
            role=CATEGORY_ROLES[classification.category],
        )

        try:
            draft = await self._generate(prompt)
            if draft is None:
                raise ResponseShapeError("Backend returned an empty response")
        except EmailRouterError as e:
            raise DraftGenerationError(
                f"Failed to generate response draft: {describe_error(e)}", cause=e
            ) from e

        log.info(
            "response_draft_generated",
            category=classification.category.value,
            draft_length=len(draft),
        )
        return draft

    async def extract_action_items(self, email_content: str) -> list[str]:
        """
        Extract actionable items from an email.

        Returns:
            Action items in the order Gemini listed them, possibly empty
        """
        prompt = ACTION_ITEMS_PROMPT.format(email_content=email_content)
        schema = types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
        )

        try:
            text = await self._generate(prompt, self._json_config(schema))
            data = parse_json_response(text)
            try:
                items = _action_items_adapter.validate_python(data)
            except ValidationError as e:
                raise ResponseShapeError(f"Expected a JSON array of strings: {e}", cause=e) from e
        except EmailRouterError as e:
            raise ActionExtractionError(
                f"Failed to extract action items: {describe_error(e)}", cause=e
            ) from e

        log.info("action_items_extracted", count=len(items))
        return items

    def classification_schema(self) -> types.Schema:
        """Response schema for classify()."""
        return types.Schema(
            type=types.Type.OBJECT,
            properties={
                "category": types.Schema(
                    type=types.Type.STRING,
                    enum=[c.value for c in Category],
                    description="The classified category of the email.",
                ),
                "priority": types.Schema(
                    type=types.Type.STRING,
                    enum=[p.value for p in Priority],
                    description="The priority of the email.",
                ),
                "suggestedRecipient": types.Schema(
                    type=types.Type.STRING,
                    enum=list(self.recipients),
                    description="The suggested recipient email address.",
                ),
                "summary": types.Schema(
                    type=types.Type.STRING,
                    description="A brief summary of the email content.",
                ),
            },
            required=list(CLASSIFICATION_FIELDS),
            property_ordering=list(CLASSIFICATION_FIELDS),
        )

    async def _generate(
        self,
        prompt: str,
        config: types.GenerateContentConfig | None = None,
    ) -> str | None:
        """Single Gemini round trip; no retry."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            _log_backend_error(e)
            raise BackendInvocationError(describe_error(e), cause=e) from e
        return response.text

    @staticmethod
    def _json_config(schema: types.Schema) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )

    def _validate_classification(self, data) -> EmailClassification:
        try:
            return EmailClassification.model_validate(
                data, context={"recipients": self.recipients}
            )
        except ValidationError as e:
            log.error("classification_shape_error", error=str(e))
            raise ResponseShapeError(str(e), cause=e) from e


def _backend_error_kind(error: Exception) -> str:
    """Log event name for a failed Gemini call."""
    error_str = str(error).lower()

    if any(x in error_str for x in RATE_LIMIT_MARKERS):
        return "gemini_rate_limit"
    if any(x in error_str for x in AUTH_MARKERS):
        return "gemini_auth_error"
    return "gemini_error"


def _log_backend_error(error: Exception) -> None:
    log.error(_backend_error_kind(error), error=str(error))


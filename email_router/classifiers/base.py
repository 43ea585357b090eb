"""
Abstract base class for email classifiers.
"""

from abc import ABC, abstractmethod

from email_router.core.models import EmailClassification


class BaseClassifier(ABC):
    """Abstract classifier interface."""

    @abstractmethod
    async def classify(self, email_content: str) -> EmailClassification:
        """
        Classify raw email text.

        Args:
            email_content: Raw email text, headers included

        Returns:
            EmailClassification with category, priority, recipient and summary

        Raises:
            ClassificationError: If the backend fails or returns a bad shape
        """
        pass

    @abstractmethod
    async def generate_response_draft(
        self,
        email_content: str,
        classification: EmailClassification,
    ) -> str:
        """
        Draft a reply to a classified email.

        Raises:
            DraftGenerationError: If the backend fails
        """
        pass

    @abstractmethod
    async def extract_action_items(self, email_content: str) -> list[str]:
        """
        Extract actionable items; an empty list is a valid result.

        Raises:
            ActionExtractionError: If the backend fails or returns a bad shape
        """
        pass

"""
Error types raised by the classification client.

Backend and response-shape failures are raised internally, then re-signalled
by each operation as its own error kind with the cause attached.
"""


class EmailRouterError(Exception):
    """Base error with a human-readable message and the underlying cause."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class BackendInvocationError(EmailRouterError):
    """The Gemini call itself failed (network, auth, quota)."""


class ResponseShapeError(EmailRouterError):
    """Backend text was not valid JSON or did not match the expected shape."""


class ClassificationError(EmailRouterError):
    """classify() failed."""


class DraftGenerationError(EmailRouterError):
    """generate_response_draft() failed."""


class ActionExtractionError(EmailRouterError):
    """extract_action_items() failed."""


def describe_error(error: BaseException) -> str:
    """Return the error's message, or a generic description when it has none."""
    if isinstance(error, EmailRouterError):
        return error.message
    return str(error) or "An unknown error occurred."

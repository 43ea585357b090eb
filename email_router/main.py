"""
Email Router - FastAPI application with Gemini AI classification.

Parses pasted email text, classifies it into a category, priority and
suggested recipient, drafts replies, extracts action items, and keeps a
history of classifications.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from email_router import __version__
from email_router.classifiers import BaseClassifier, get_classifier
from email_router.config import settings
from email_router.core.exceptions import (
    ActionExtractionError,
    ClassificationError,
    DraftGenerationError,
)
from email_router.core.logging import configure_logging, get_logger
from email_router.core.models import HistoryEntry
from email_router.models import (
    ActionItemsResult,
    DraftRequest,
    DraftResult,
    EmailContentRequest,
    ExampleEmailResult,
    HealthResponse,
    ParsedEmailResult,
    RecipientSuggestion,
    RecipientsResult,
)
from email_router.parsing.parser import parse_email_content
from email_router.services.examples import EXAMPLE_EMAILS
from email_router.services.history import HistoryStore
from email_router.services.recipients import filter_recipients, mailto_url

# Configure structured logging
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)
log = get_logger(__name__)

# Global history store
_history: HistoryStore | None = None


def get_history_store() -> HistoryStore:
    """Get or create the history store, loading it from disk once."""
    global _history
    if _history is None:
        _history = HistoryStore(settings.history_path)
        _history.load()
    return _history


def get_email_classifier() -> BaseClassifier:
    """Classifier dependency; a missing API key becomes a 500."""
    try:
        return get_classifier()
    except ValueError as e:
        log.error("gemini_client_error", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


def get_recipients() -> list[str]:
    return list(settings.recipients)


def _require_content(email_content: str, action: str) -> None:
    if not email_content.strip():
        raise HTTPException(
            status_code=400,
            detail=f"Please enter email content to {action}.",
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - initialize and cleanup."""
    log.info(
        "email_router_starting",
        version=__version__,
        model=settings.gemini_model,
        recipients=len(settings.recipients),
    )

    if not settings.gemini_api_key:
        log.warning("gemini_api_key_not_set")

    yield

    log.info("email_router_shutdown")


app = FastAPI(
    title="Email Router",
    description="AI-powered email classification and routing",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        model=settings.gemini_model,
    )


@app.post("/parse", response_model=ParsedEmailResult)
async def parse_email(request: EmailContentRequest):
    """Extract From, Subject and body from raw email text."""
    _require_content(request.email_content, "parse")
    parsed = parse_email_content(request.email_content)
    return ParsedEmailResult(sender=parsed.sender, subject=parsed.subject, body=parsed.body)


@app.post("/classify", response_model=HistoryEntry)
async def classify_email(
    request: EmailContentRequest,
    classifier: BaseClassifier = Depends(get_email_classifier),
    history: HistoryStore = Depends(get_history_store),
):
    """
    Classify an email and record the result in history.

    Returns the new history entry, which carries the classification.
    """
    _require_content(request.email_content, "classify")

    try:
        classification = await classifier.classify(request.email_content)
    except ClassificationError as e:
        log.error("classify_email_error", error=e.message)
        raise HTTPException(status_code=502, detail=e.message)

    return history.record(request.email_content, classification)


@app.post("/draft", response_model=DraftResult)
async def generate_draft(
    request: DraftRequest,
    classifier: BaseClassifier = Depends(get_email_classifier),
):
    """Draft a reply for a previously classified email."""
    _require_content(request.email_content, "draft a response")

    try:
        draft = await classifier.generate_response_draft(
            request.email_content, request.classification
        )
    except DraftGenerationError as e:
        log.error("generate_draft_error", error=e.message)
        raise HTTPException(status_code=502, detail=e.message)

    return DraftResult(draft=draft)


@app.post("/action-items", response_model=ActionItemsResult)
async def extract_action_items(
    request: EmailContentRequest,
    classifier: BaseClassifier = Depends(get_email_classifier),
):
    """Extract action items from an email."""
    _require_content(request.email_content, "extract action items")

    try:
        items = await classifier.extract_action_items(request.email_content)
    except ActionExtractionError as e:
        log.error("extract_action_items_error", error=e.message)
        raise HTTPException(status_code=502, detail=e.message)

    return ActionItemsResult(action_items=items)


@app.get("/history", response_model=list[HistoryEntry])
async def list_history(history: HistoryStore = Depends(get_history_store)):
    """Classification history, newest first."""
    return history.entries


@app.get("/history/{entry_id}", response_model=HistoryEntry)
async def get_history_entry(entry_id: str, history: HistoryStore = Depends(get_history_store)):
    """Load a single history entry."""
    entry = history.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"History entry {entry_id} not found")
    return entry


@app.delete("/history", status_code=204)
async def clear_history(history: HistoryStore = Depends(get_history_store)):
    """Clear all history."""
    history.clear()
    return Response(status_code=204)


@app.get("/recipients", response_model=RecipientsResult)
async def suggest_recipients(q: str = "", recipients: list[str] = Depends(get_recipients)):
    """Recipient autocomplete."""
    matches = filter_recipients(q, recipients)
    return RecipientsResult(
        recipients=[RecipientSuggestion(address=r, mailto=mailto_url(r)) for r in matches]
    )


@app.get("/examples", response_model=list[ExampleEmailResult])
async def list_examples():
    """Sample emails for trying the classifier."""
    return [ExampleEmailResult(label=e.label, content=e.content) for e in EXAMPLE_EMAILS]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8004)

"""
Classification history persisted as a JSON file.
"""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from email_router.core.logging import get_logger
from email_router.core.models import EmailClassification, HistoryEntry

log = get_logger(__name__)

_entries_adapter = TypeAdapter(list[HistoryEntry])


class HistoryStore:
    """
    Classification history kept newest first and persisted as one JSON array.

    The whole list is rewritten on every change. Unreadable files are
    discarded and the history starts over empty.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._entries: list[HistoryEntry] = []

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def load(self) -> list[HistoryEntry]:
        """Read history from disk, resetting it if the file is corrupted."""
        if not self.path.exists():
            self._entries = []
            return self.entries

        try:
            self._entries = _entries_adapter.validate_json(self.path.read_bytes())
        except ValidationError as e:
            log.warning("history_corrupted", path=str(self.path), error=str(e))
            self.path.unlink(missing_ok=True)
            self._entries = []

        log.debug("history_loaded", entries=len(self._entries))
        return self.entries

    def save(self) -> None:
        """Write the whole history to disk."""
        self._write(self._entries)

    def append(self, entry: HistoryEntry) -> HistoryEntry:
        """
        Add an entry at the front and persist.

        Memory is only updated once the write succeeds.
        """
        entries = [entry, *self._entries]
        self._write(entries)
        self._entries = entries
        log.info("history_entry_added", entry_id=entry.id, entries=len(entries))
        return entry

    def record(self, email_content: str, classification: EmailClassification) -> HistoryEntry:
        """Create an entry for a fresh classification and append it."""
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            email_content=email_content,
            classification=classification,
        )
        return self.append(entry)

    def get(self, entry_id: str) -> HistoryEntry | None:
        """Look up an entry by id."""
        return next((e for e in self._entries if e.id == entry_id), None)

    def clear(self) -> None:
        """Remove every entry and the persisted file."""
        self._entries = []
        self.path.unlink(missing_ok=True)
        log.info("history_cleared")

    def _write(self, entries: list[HistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [entry.model_dump(mode="json", by_alias=True) for entry in entries]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

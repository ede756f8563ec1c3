"""History of recently created links, kept in the settings store."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from obsidian_symlinker.constants import RECENT_LINKS_KEY, RECENT_LINKS_LIMIT
from obsidian_symlinker.data_models import LinkResult, RecentLinkRecord
from obsidian_symlinker.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class RecentLinksLedger:
    """Most-recent-first list of created links, capped at ``limit`` entries."""

    def __init__(self, store: SettingsStore, limit: int = RECENT_LINKS_LIMIT) -> None:
        self.store = store
        self.limit = limit

    def list(self) -> list[RecentLinkRecord]:
        """Return the stored history, newest first."""
        stored = self.store.get(RECENT_LINKS_KEY) or []
        return [RecentLinkRecord.from_payload(item) for item in stored if isinstance(item, dict)]

    def record(self, entry: RecentLinkRecord) -> list[RecentLinkRecord]:
        """Prepend ``entry``, drop anything past the cap, persist and return the list."""
        updated = [entry, *self.list()][: self.limit]
        self.store.set(RECENT_LINKS_KEY, [record.as_payload() for record in updated])
        return updated

    def clear(self) -> list[RecentLinkRecord]:
        self.store.set(RECENT_LINKS_KEY, [])
        return []


def record_successes(
    ledger: RecentLinksLedger,
    results: Iterable[LinkResult],
    now: Optional[datetime] = None,
) -> list[RecentLinkRecord]:
    """Add every successful link in ``results`` to the ledger.

    Returns:
        The ledger contents after recording.
    """
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    recent = ledger.list()
    for result in results:
        if not result.success:
            continue
        recent = ledger.record(
            RecentLinkRecord(
                file_name=result.file,
                target_path=result.target_path or "",
                symlink_path=result.symlink_path or "",
                date=timestamp,
            )
        )
    logger.debug("Recent links now hold %d entries", len(recent))
    return recent

"""Data models for vault candidates, link requests and link results."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class PathValidation:
    """Outcome of probing a path on disk."""

    is_valid: bool
    is_accessible: bool


@dataclass(frozen=True)
class VaultCandidate:
    """A directory that may be an Obsidian vault.

    Candidates read from Obsidian's config keep the config's vault id. Candidates
    found by scanning common folders get ids of the form ``manual-<n>``.
    """

    id: str
    name: str
    path: str
    is_valid: bool
    is_accessible: bool

    @property
    def is_manual(self) -> bool:
        """Whether the candidate came from a directory scan."""
        return self.id.startswith("manual-")

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "id": self.id,
            "name": self.name,
            "path": self.path,
            "is_valid": self.is_valid,
            "is_accessible": self.is_accessible,
        }


@dataclass(frozen=True)
class LinkRequest:
    """A source file to link into a vault, optionally under another name."""

    source_path: str
    custom_name: Optional[str] = None


@dataclass(frozen=True)
class LinkResult:
    """Per-request outcome of a link batch."""

    success: bool
    file: str
    target_path: Optional[str] = None
    symlink_path: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def created(cls, file: str, target_path: str, symlink_path: str) -> LinkResult:
        return cls(success=True, file=file, target_path=target_path, symlink_path=symlink_path)

    @classmethod
    def failed(cls, file: str, error: str) -> LinkResult:
        return cls(success=False, file=file, error=error)

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload; only the fields for the outcome are included."""
        if self.success:
            return {
                "success": True,
                "file": self.file,
                "target_path": self.target_path,
                "symlink_path": self.symlink_path,
            }
        return {"success": False, "file": self.file, "error": self.error}


@dataclass(frozen=True)
class RecentLinkRecord:
    """A successfully created link, as kept in the recent-links history."""

    file_name: str
    target_path: str
    symlink_path: str
    date: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RecentLinkRecord:
        return cls(
            file_name=str(payload.get("file_name", "")),
            target_path=str(payload.get("target_path", "")),
            symlink_path=str(payload.get("symlink_path", "")),
            date=str(payload.get("date", "")),
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "target_path": self.target_path,
            "symlink_path": self.symlink_path,
            "date": self.date,
        }

"""Persistent key/value settings backed by a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol

import yaml

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Minimal key/value store the symlinker persists its state in."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class InMemorySettingsStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, Any]] = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value


class YamlSettingsStore:
    """Store that keeps every setting in one YAML mapping on disk.

    The file is read lazily on first access and rewritten in full on every
    ``set``. A missing file behaves like an empty store; a corrupt one is
    treated as empty and replaced on the next write.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._values: Optional[dict[str, Any]] = None

    def _load(self) -> dict[str, Any]:
        if self._values is not None:
            return self._values

        values: dict[str, Any] = {}
        if self.path.exists():
            try:
                raw = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as exc:
                logger.warning("Could not read settings from %s: %s", self.path, exc)
                raw = {}
            if isinstance(raw, dict):
                values = raw
            else:
                logger.warning("Settings file %s does not contain a mapping; ignoring it", self.path)

        self._values = values
        return values

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        values = self._load()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            yaml.safe_dump(values, default_flow_style=False, sort_keys=True, allow_unicode=True),
            encoding="utf-8",
        )

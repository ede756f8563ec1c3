"""Runtime configuration and Obsidian config-file handling."""

from __future__ import annotations

import enum
import json
import logging
import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from obsidian_symlinker.constants import (
    LOG_LEVEL,
    OBSIDIAN_CONFIG_FILENAME,
    SETTINGS_DIRNAME,
    SETTINGS_FILENAME,
    VAULT_CONFIG_KEYS,
)

logger = logging.getLogger(__name__)

SETTINGS_ENV = "OBSIDIAN_SYMLINKER_SETTINGS"
OBSIDIAN_CONFIG_ENV = "OBSIDIAN_CONFIG_PATH"
LOG_LEVEL_ENV = "OBSIDIAN_SYMLINKER_LOG_LEVEL"


# ==============================================================================
# APPLICATION CONFIGURATION
# ==============================================================================


@dataclass(frozen=True)
class AppConfig:
    """Settings the symlinker reads from its environment."""

    settings_path: Path
    obsidian_config_path: Optional[Path] = None
    log_level: str = LOG_LEVEL


def default_settings_path(
    system: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return the per-user location of the settings file for ``system``."""
    system = system or platform.system()
    environ = os.environ if environ is None else environ
    home = home or Path.home()

    if system == "Windows" and environ.get("APPDATA"):
        base = Path(environ["APPDATA"])
    elif system == "Darwin":
        base = home / "Library" / "Application Support"
    elif environ.get("XDG_CONFIG_HOME"):
        base = Path(environ["XDG_CONFIG_HOME"])
    else:
        base = home / ".config"
    return base / SETTINGS_DIRNAME / SETTINGS_FILENAME


def load_app_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an :class:`AppConfig` from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        The resolved configuration.

    Raises:
        ValueError: If the configured log level is not a known logging level.
    """
    environ = os.environ if environ is None else environ

    raw_settings = environ.get(SETTINGS_ENV, "").strip()
    settings_path = (
        Path(raw_settings).expanduser() if raw_settings else default_settings_path(environ=environ)
    )

    raw_obsidian = environ.get(OBSIDIAN_CONFIG_ENV, "").strip()
    obsidian_config_path = Path(raw_obsidian).expanduser() if raw_obsidian else None

    log_level = environ.get(LOG_LEVEL_ENV, LOG_LEVEL).strip().upper() or LOG_LEVEL
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level '{log_level}' in {LOG_LEVEL_ENV}")

    return AppConfig(
        settings_path=settings_path,
        obsidian_config_path=obsidian_config_path,
        log_level=log_level,
    )


# ==============================================================================
# OBSIDIAN CONFIG FILE LOCATION
# ==============================================================================


def _portable_candidates(cwd: Path) -> list[Path]:
    # Portable Obsidian keeps its data in Data/ beside the executable it is launched from
    return [cwd / "Data" / "obsidian" / OBSIDIAN_CONFIG_FILENAME]


def obsidian_config_candidates(
    system: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
    cwd: Optional[Path] = None,
) -> list[Path]:
    """List the places Obsidian may keep ``obsidian.json``, most likely first.

    Covers standard installs plus portable, Flatpak and Snap installs. Every
    argument defaults to the current process's environment.

    Returns:
        Candidate paths in priority order; empty for unsupported platforms.
    """
    system = system or platform.system()
    environ = os.environ if environ is None else environ
    home = home or Path.home()
    cwd = cwd or Path.cwd()

    candidates: list[Path] = []
    if system == "Windows":
        if environ.get("APPDATA"):
            candidates.append(Path(environ["APPDATA"]) / "obsidian" / OBSIDIAN_CONFIG_FILENAME)
        if environ.get("PORTABLE_EXECUTABLE_DIR"):
            candidates.append(
                Path(environ["PORTABLE_EXECUTABLE_DIR"]) / "Data" / "obsidian" / OBSIDIAN_CONFIG_FILENAME
            )
    elif system == "Darwin":
        candidates.append(
            home / "Library" / "Application Support" / "obsidian" / OBSIDIAN_CONFIG_FILENAME
        )
    elif system == "Linux":
        if environ.get("XDG_CONFIG_HOME"):
            candidates.append(Path(environ["XDG_CONFIG_HOME"]) / "obsidian" / OBSIDIAN_CONFIG_FILENAME)
        candidates.append(home / ".config" / "obsidian" / OBSIDIAN_CONFIG_FILENAME)
        # Flatpak
        candidates.append(
            home / ".var" / "app" / "md.obsidian.Obsidian" / "config" / "obsidian" / OBSIDIAN_CONFIG_FILENAME
        )
        # Snap
        candidates.append(
            home / "snap" / "obsidian" / "current" / ".config" / "obsidian" / OBSIDIAN_CONFIG_FILENAME
        )
    else:
        return []

    candidates.extend(_portable_candidates(cwd))

    # XDG_CONFIG_HOME may point at ~/.config
    unique: list[Path] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


def resolve_obsidian_config_path(candidates: Optional[list[Path]] = None) -> Optional[Path]:
    """Pick the Obsidian config file to read.

    Returns the first candidate that exists. When none exists the first
    candidate is returned anyway, and ``None`` only when there are no
    candidates at all.
    """
    if candidates is None:
        candidates = obsidian_config_candidates()

    for candidate in candidates:
        try:
            if candidate.exists():
                logger.info("Found Obsidian config at: %s", candidate)
                return candidate
        except OSError as exc:
            logger.debug("Error checking path %s: %s", candidate, exc)

    if not candidates:
        return None

    logger.info("No Obsidian config found, using default path %s", candidates[0])
    return candidates[0]


# ==============================================================================
# OBSIDIAN CONFIG FILE PARSING
# ==============================================================================


class ConfigStatus(enum.Enum):
    OK = "ok"
    EMPTY = "empty"


@dataclass(frozen=True)
class VaultConfigParse:
    """Tagged result of parsing ``obsidian.json``.

    ``entries`` maps Obsidian's vault ids to ``{"path": str, "name": str | None}``
    and is only populated when ``status`` is :attr:`ConfigStatus.OK`.
    """

    status: ConfigStatus
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_key: Optional[str] = None

    @classmethod
    def empty(cls) -> VaultConfigParse:
        return cls(status=ConfigStatus.EMPTY)


def parse_vault_config(text: str) -> VaultConfigParse:
    """Parse the content of Obsidian's config into vault entries.

    The vault mapping lives under ``vaults`` in current Obsidian versions and
    under ``vaultList`` in older ones; the keys are tried in that order. Any
    structural problem produces an EMPTY result rather than an error.

    Args:
        text: Raw JSON content of ``obsidian.json``.

    Returns:
        A :class:`VaultConfigParse`.
    """
    try:
        raw_config = json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.warning("Obsidian config is not valid JSON: %s", exc)
        return VaultConfigParse.empty()

    if not isinstance(raw_config, dict):
        logger.warning("Obsidian config must be a JSON object, got %s", type(raw_config).__name__)
        return VaultConfigParse.empty()

    source_key = next((key for key in VAULT_CONFIG_KEYS if raw_config.get(key)), None)
    if source_key is None:
        return VaultConfigParse.empty()

    vaults_section = raw_config[source_key]
    if not isinstance(vaults_section, dict):
        logger.warning("Obsidian config '%s' must map vault ids to settings", source_key)
        return VaultConfigParse.empty()

    entries: dict[str, dict[str, Any]] = {}
    for vault_id, entry in vaults_section.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping vault '%s': entry is not an object", vault_id)
            continue

        raw_path = entry.get("path")
        if not isinstance(raw_path, str) or not raw_path.strip():
            logger.warning("Skipping vault '%s': missing a valid 'path' string", vault_id)
            continue

        name = entry.get("name")
        entries[str(vault_id)] = {
            "path": raw_path,
            "name": name if isinstance(name, str) and name.strip() else None,
        }

    if not entries:
        return VaultConfigParse.empty()
    return VaultConfigParse(status=ConfigStatus.OK, entries=entries, source_key=source_key)


def load_vault_config(config_path: Optional[Path]) -> VaultConfigParse:
    """Read and parse Obsidian's config file; a missing or unreadable file is EMPTY."""
    if config_path is None or not config_path.is_file():
        logger.info("Obsidian config file not found at: %s", config_path)
        return VaultConfigParse.empty()

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read Obsidian config at %s: %s", config_path, exc)
        return VaultConfigParse.empty()

    return parse_vault_config(text)

"""Vault discovery from Obsidian's config file and common folders."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional

from obsidian_symlinker.config import (
    ConfigStatus,
    VaultConfigParse,
    load_vault_config,
    resolve_obsidian_config_path,
)
from obsidian_symlinker.constants import COMMON_VAULT_LOCATIONS
from obsidian_symlinker.core.paths import is_vault_directory, normalize_path, validate_path
from obsidian_symlinker.data_models import VaultCandidate

logger = logging.getLogger(__name__)


# ==============================================================================
# CONFIG-FILE DISCOVERY
# ==============================================================================


def vaults_from_config(parsed: VaultConfigParse) -> list[VaultCandidate]:
    """Turn parsed config entries into validated candidates.

    Paths are normalized and probed on disk. Only entries whose path exists are
    returned; inaccessible ones are kept and flagged.
    """
    if parsed.status is not ConfigStatus.OK:
        return []

    candidates: list[VaultCandidate] = []
    for vault_id, entry in parsed.entries.items():
        vault_path = normalize_path(entry["path"])
        validation = validate_path(vault_path)
        if not validation.is_valid:
            logger.debug("Ignoring vault '%s': %s does not exist", vault_id, vault_path)
            continue

        candidates.append(
            VaultCandidate(
                id=vault_id,
                name=entry.get("name") or os.path.basename(vault_path.rstrip("/\\")),
                path=vault_path,
                is_valid=validation.is_valid,
                is_accessible=validation.is_accessible,
            )
        )

    inaccessible = [candidate for candidate in candidates if not candidate.is_accessible]
    if inaccessible:
        logger.warning(
            "%d vault(s) may require elevated privileges to access", len(inaccessible)
        )

    logger.info("Found %d Obsidian vaults from config", len(candidates))
    return candidates


def find_vaults_in_config(config_path: Optional[Path]) -> list[VaultCandidate]:
    """Read vaults listed in Obsidian's config; any failure yields an empty list."""
    try:
        return vaults_from_config(load_vault_config(config_path))
    except Exception:
        logger.exception("Error finding Obsidian vaults from config %s", config_path)
        return []


# ==============================================================================
# DIRECTORY-SCAN DISCOVERY
# ==============================================================================


def default_scan_locations(home: Optional[Path] = None) -> list[Path]:
    """Return the home-relative folders where vaults are commonly kept."""
    home = home or Path.home()
    return [home / name for name in COMMON_VAULT_LOCATIONS]


def _list_child_directories(location: Path) -> tuple[list[Path], Optional[OSError]]:
    """List immediate subdirectories of ``location``; the error is returned, not raised."""
    children: list[Path] = []
    try:
        with os.scandir(location) as entries:
            for entry in entries:
                try:
                    if entry.is_dir():
                        children.append(Path(entry.path))
                except OSError as exc:
                    logger.debug("Skipping %s: %s", entry.path, exc)
    except OSError as exc:
        return [], exc
    return sorted(children), None


def scan_for_vaults(locations: Iterable[Path]) -> list[VaultCandidate]:
    """Look for vaults in ``locations`` and one level below them.

    A location that is itself a vault is reported without looking at its
    children. Unreadable locations and entries are skipped.

    Args:
        locations: Folders to inspect.

    Returns:
        Candidates with ids ``manual-0``, ``manual-1``, ... in discovery order.
    """
    found: list[Path] = []

    for location in locations:
        try:
            if not location.is_dir():
                continue

            if is_vault_directory(str(location)):
                found.append(location)
                continue

            children, error = _list_child_directories(location)
            if error is not None:
                logger.debug("Skipping inaccessible directory %s: %s", location, error)
                continue

            found.extend(child for child in children if is_vault_directory(str(child)))
        except OSError as exc:
            logger.debug("Skipping inaccessible directory %s: %s", location, exc)

    candidates = [
        VaultCandidate(
            id=f"manual-{index}",
            name=path.name,
            path=str(path),
            is_valid=True,
            is_accessible=True,
        )
        for index, path in enumerate(found)
    ]
    logger.info("Found %d potential Obsidian vaults by directory scanning", len(candidates))
    return candidates


# ==============================================================================
# PUBLIC ENTRY POINT
# ==============================================================================


def discover_vaults(
    config_path: Optional[Path] = None,
    scan_locations: Optional[Sequence[Path]] = None,
) -> list[VaultCandidate]:
    """Find candidate vaults, preferring Obsidian's own list.

    Vaults registered in Obsidian's config win: the folder scan only runs when
    the config is missing, malformed, or lists no vault that exists on disk.
    Nothing here raises; a failing step contributes no candidates.

    Args:
        config_path: Obsidian config file to read. Defaults to the platform's
            resolved location.
        scan_locations: Folders for the fallback scan. Defaults to
            :func:`default_scan_locations`.

    Returns:
        A fresh list of valid :class:`VaultCandidate` objects.
    """
    try:
        if config_path is None:
            config_path = resolve_obsidian_config_path()
    except Exception:
        logger.exception("Could not resolve the Obsidian config path")
        config_path = None

    vaults = find_vaults_in_config(config_path)
    if vaults:
        return vaults

    try:
        if scan_locations is None:
            scan_locations = default_scan_locations()
        return scan_for_vaults(scan_locations)
    except Exception:
        logger.exception("Error scanning for Obsidian vaults")
        return []

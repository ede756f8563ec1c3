"""Path normalization and validation helpers."""

from __future__ import annotations

import logging
import os
import re
from typing import Optional
from urllib.parse import unquote

from obsidian_symlinker.constants import MARKER_FOLDER
from obsidian_symlinker.data_models import PathValidation

logger = logging.getLogger(__name__)

FILE_URI_PREFIX = "file://"

# "/C:/Users/..." left over from "file:///C:/Users/..."; only a path on Windows
_DRIVE_AFTER_SLASH = re.compile(r"^/[A-Za-z]:(?:[/\\]|$)")
_WINDOWS = os.name == "nt"


def normalize_path(path: str) -> str:
    """Convert a ``file://`` URI as written by Obsidian into a plain filesystem path.

    Some Obsidian versions store vault paths as percent-encoded URIs. Anything
    without the ``file://`` prefix is returned unchanged, so the function is
    safe to apply to already-normalized paths. On Windows the slash left in
    front of a drive letter (``file:///C:/x``) is dropped.

    Args:
        path: Raw path or URI.

    Returns:
        The decoded filesystem path.

    Examples:
        >>> normalize_path("file:///a/b%20c")
        '/a/b c'
        >>> normalize_path("/already/plain")
        '/already/plain'
    """
    if not path.startswith(FILE_URI_PREFIX):
        return path

    while path.startswith(FILE_URI_PREFIX):
        path = unquote(path[len(FILE_URI_PREFIX):])

    if _WINDOWS and _DRIVE_AFTER_SLASH.match(path):
        path = path[1:]
    return path


def _probe_access(path: str) -> Optional[OSError]:
    """Try to read ``path``; return the error instead of raising it."""
    try:
        if os.path.isdir(path):
            os.listdir(path)
        elif not os.access(path, os.R_OK):
            return PermissionError(f"Read access denied: {path}")
    except OSError as exc:
        return exc
    return None


def validate_path(path: str) -> PathValidation:
    """Check whether a path exists and whether its contents can be read.

    A missing path is reported as invalid. An existing path whose directory
    listing or read-access check fails is valid but not accessible, so callers
    can show "found but locked" vaults distinctly from missing ones.

    Args:
        path: Plain filesystem path (see :func:`normalize_path`).

    Returns:
        A :class:`PathValidation` with ``is_valid`` and ``is_accessible`` flags.
    """
    if not path or not os.path.exists(path):
        return PathValidation(is_valid=False, is_accessible=False)

    error = _probe_access(path)
    if error is not None:
        logger.info("Path %s exists but may require elevated privileges: %s", path, error)
        return PathValidation(is_valid=True, is_accessible=False)

    return PathValidation(is_valid=True, is_accessible=True)


def is_vault_directory(path: str) -> bool:
    """Return True if ``path`` directly contains the Obsidian marker folder."""
    try:
        return os.path.isdir(os.path.join(path, MARKER_FOLDER))
    except (OSError, ValueError):
        return False

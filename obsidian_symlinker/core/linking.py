"""Link creation: naming, replacing existing entries, and platform link types."""

from __future__ import annotations

import logging
import os
import platform
import subprocess
from collections.abc import Callable, Sequence
from typing import Optional, Protocol

from obsidian_symlinker.data_models import LinkRequest, LinkResult

logger = logging.getLogger(__name__)


# ==============================================================================
# LINK CREATORS
# ==============================================================================


class LinkCreator(Protocol):
    """Creates a single filesystem link at ``destination`` pointing to ``source``."""

    def create(self, source: str, destination: str) -> None:
        ...


class SymlinkCreator:
    """Plain symbolic links, used everywhere except Windows."""

    def create(self, source: str, destination: str) -> None:
        os.symlink(source, destination)


Runner = Callable[..., subprocess.CompletedProcess]


class JunctionCreator:
    """Windows links that do not need elevated privileges.

    Directories are linked with an NTFS junction (``mklink /J``). Junctions
    cannot point at files, so files still get a symbolic link.
    """

    def __init__(self, runner: Optional[Runner] = None) -> None:
        self._run = runner or subprocess.run

    def create(self, source: str, destination: str) -> None:
        if not os.path.isdir(source):
            os.symlink(source, destination)
            return

        result = self._run(
            ["cmd", "/c", "mklink", "/J", destination, source],
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            message = (result.stderr or result.stdout or "").strip()
            raise OSError(message or f"mklink /J failed with exit code {result.returncode}")


def select_link_creator(system: Optional[str] = None) -> LinkCreator:
    """Return the link creator for ``system`` (defaults to the running platform)."""
    system = system or platform.system()
    if system == "Windows":
        return JunctionCreator()
    return SymlinkCreator()


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def link_name(request: LinkRequest) -> str:
    """Return the filename the link gets inside the vault."""
    if request.custom_name:
        return request.custom_name
    return os.path.basename(request.source_path)


def describe_error(exc: BaseException) -> str:
    """Human-readable message for a failed filesystem call."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


_is_junction = getattr(os.path, "isjunction", lambda path: False)


def is_source_itself(source: str, destination: str) -> bool:
    """True when ``destination`` is the source file, not a link to it."""
    if os.path.islink(destination) or _is_junction(destination):
        return False
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


def remove_existing(path: str) -> None:
    """Remove whatever occupies ``path``: a link, a junction, a file or an empty folder."""
    if os.path.isdir(path) and not os.path.islink(path):
        # junctions and empty directories
        os.rmdir(path)
    else:
        os.unlink(path)


# ==============================================================================
# LINK PLANNER / EXECUTOR
# ==============================================================================


def create_link(request: LinkRequest, vault_path: str, creator: LinkCreator) -> LinkResult:
    """Link a single file into ``vault_path``; failures are returned, not raised."""
    final_name = link_name(request)

    try:
        destination = os.path.join(vault_path, final_name)

        if os.path.lexists(destination):
            if is_source_itself(request.source_path, destination):
                logger.error("Refusing to replace %s with a link to itself", destination)
                return LinkResult.failed(final_name, "Source and link path are the same file")

            logger.info("File already exists, attempting to remove: %s", destination)
            try:
                remove_existing(destination)
            except OSError as exc:
                logger.error("Error removing existing file %s: %s", destination, exc)
                return LinkResult.failed(
                    final_name, f"Could not remove existing file: {describe_error(exc)}"
                )

        creator.create(request.source_path, destination)
    except Exception as exc:
        logger.warning("Error creating symlink for %s: %s", request.source_path, exc)
        return LinkResult.failed(final_name, describe_error(exc))

    logger.info("Created symlink from %s to %s", request.source_path, destination)
    return LinkResult.created(final_name, request.source_path, destination)


def create_links(
    requests: Sequence[LinkRequest],
    vault_path: str,
    creator: Optional[LinkCreator] = None,
) -> list[LinkResult]:
    """Link each requested file into a vault.

    Requests are processed in order and independently: one failure never stops
    the rest of the batch. An existing entry with the same name is replaced.
    The check-remove-create sequence is not atomic, so callers must not run two
    batches against the same vault at once.

    Args:
        requests: Files to link, each with an optional replacement filename.
        vault_path: Directory the links are created in.
        creator: Link strategy; defaults to :func:`select_link_creator`.

    Returns:
        One :class:`LinkResult` per request, in request order.
    """
    creator = creator or select_link_creator()
    logger.debug("Creating %d link(s) in %s", len(requests), vault_path)
    return [create_link(request, vault_path, creator) for request in requests]

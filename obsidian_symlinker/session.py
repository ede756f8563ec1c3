"""Session state: selected vault, discovered vaults, and link history."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

from obsidian_symlinker.config import AppConfig, load_app_config
from obsidian_symlinker.constants import MARKDOWN_EXTENSIONS, VAULT_PATH_KEY
from obsidian_symlinker.core.discovery import discover_vaults
from obsidian_symlinker.core.linking import LinkCreator, create_links, select_link_creator
from obsidian_symlinker.core.paths import is_vault_directory
from obsidian_symlinker.core.recent_links import RecentLinksLedger, record_successes
from obsidian_symlinker.data_models import LinkRequest, LinkResult, VaultCandidate
from obsidian_symlinker.dialogs import DialogProvider
from obsidian_symlinker.settings_store import SettingsStore, YamlSettingsStore

logger = logging.getLogger(__name__)

NOT_A_VAULT_OPTIONS = ("Use Anyway", "Cancel")
CANCEL_INDEX = 1


class SymlinkerSession:
    """Everything a front end needs to keep between calls.

    Holds the settings store, the link strategy chosen for this platform, the
    recent-links ledger and the vaults found by the last discovery run.
    """

    def __init__(
        self,
        store: SettingsStore,
        link_creator: Optional[LinkCreator] = None,
        ledger: Optional[RecentLinksLedger] = None,
        obsidian_config_path: Optional[Path] = None,
    ) -> None:
        self.store = store
        self.link_creator = link_creator or select_link_creator()
        self.ledger = ledger or RecentLinksLedger(store)
        self.obsidian_config_path = obsidian_config_path
        self.vaults: list[VaultCandidate] = []

    @classmethod
    def from_config(cls, config: AppConfig) -> SymlinkerSession:
        """Create a session persisting to the configured settings file."""
        return cls(
            YamlSettingsStore(config.settings_path),
            obsidian_config_path=config.obsidian_config_path,
        )

    # ------------------------------------------------------------------
    # Vault selection
    # ------------------------------------------------------------------

    def refresh_vaults(self, **discovery_kwargs: Any) -> list[VaultCandidate]:
        """Re-run discovery and remember the result."""
        discovery_kwargs.setdefault("config_path", self.obsidian_config_path)
        self.vaults = discover_vaults(**discovery_kwargs)
        return self.vaults

    @property
    def vault_path(self) -> Optional[str]:
        """The last selected vault, as persisted in the settings store."""
        value = self.store.get(VAULT_PATH_KEY)
        return value if isinstance(value, str) and value else None

    def select_vault_path(self, path: Optional[str]) -> bool:
        """Persist ``path`` as the selected vault. Empty paths are ignored."""
        if not path:
            return False
        self.store.set(VAULT_PATH_KEY, path)
        logger.info("Selected vault %s", path)
        return True

    def choose_vault(self, dialogs: DialogProvider) -> Optional[str]:
        """Let the user pick a vault folder.

        Folders without an ``.obsidian`` directory need an explicit
        confirmation. Returns the selected path, or ``None`` on cancel.
        """
        vault_path = dialogs.choose_directory("Select Obsidian Vault Folder")
        if not vault_path:
            return None

        if not is_vault_directory(vault_path):
            response = dialogs.confirm(
                "The selected folder does not appear to be an Obsidian vault.",
                NOT_A_VAULT_OPTIONS,
                detail=(
                    "No .obsidian folder was found. You can still use this folder, "
                    "but symlinks may not work as expected in Obsidian."
                ),
            )
            if response == CANCEL_INDEX:
                return None

        self.select_vault_path(vault_path)
        return vault_path

    def choose_markdown_files(self, dialogs: DialogProvider) -> list[str]:
        """Let the user pick markdown files to link; cancel yields an empty list."""
        files = dialogs.choose_files("Select Markdown Files to Symlink", sorted(MARKDOWN_EXTENSIONS))
        return list(files or [])

    # ------------------------------------------------------------------
    # Linking
    # ------------------------------------------------------------------

    def resolve_vault_path(self, vault_path: Optional[str] = None) -> str:
        """Return ``vault_path``, or the selected vault when it is not given.

        Raises:
            ValueError: If no vault path is given and none has been selected.
        """
        target = vault_path or self.vault_path
        if not target:
            raise ValueError("No vault selected. Use select_vault() or pass vault_path.")
        return target

    def create_links(
        self,
        requests: Sequence[LinkRequest],
        vault_path: Optional[str] = None,
    ) -> list[LinkResult]:
        """Link ``requests`` into ``vault_path`` (or the selected vault) and log successes.

        The links on disk are what counts: failing to save the history is
        logged and the per-file results are still returned.

        Raises:
            ValueError: If no vault path is given and none has been selected.
        """
        target = self.resolve_vault_path(vault_path)
        results = create_links(requests, target, self.link_creator)
        try:
            record_successes(self.ledger, results)
        except OSError:
            logger.exception("Could not save recent links to the settings store")
        return results


_DEFAULT_SESSION: Optional[SymlinkerSession] = None


def get_session() -> SymlinkerSession:
    """Return the session used by the MCP tools, creating it on first use."""
    global _DEFAULT_SESSION
    if _DEFAULT_SESSION is None:
        _DEFAULT_SESSION = SymlinkerSession.from_config(load_app_config())
    return _DEFAULT_SESSION


def set_session(session: Optional[SymlinkerSession]) -> None:
    """Replace the session used by the MCP tools (``None`` resets it)."""
    global _DEFAULT_SESSION
    _DEFAULT_SESSION = session

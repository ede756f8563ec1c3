"""Module-level constants for the Obsidian symlinker."""

# Vault detection
MARKER_FOLDER = ".obsidian"

# Obsidian's own configuration file
OBSIDIAN_CONFIG_FILENAME = "obsidian.json"
VAULT_CONFIG_KEYS = ("vaults", "vaultList")  # newest first

# Folders under the home directory scanned when the config yields nothing
COMMON_VAULT_LOCATIONS = (
    "Documents",
    "Dropbox",
    "Google Drive",
    "OneDrive",
    "iCloud Drive",
    "Obsidian Vaults",
)

# Link selection
MARKDOWN_EXTENSIONS = frozenset({"md", "markdown"})

# Settings
SETTINGS_DIRNAME = "obsidian-symlinker"
SETTINGS_FILENAME = "settings.yaml"
VAULT_PATH_KEY = "vault_path"
RECENT_LINKS_KEY = "recent_links"
RECENT_LINKS_LIMIT = 10

# Logging
LOG_LEVEL = "INFO"

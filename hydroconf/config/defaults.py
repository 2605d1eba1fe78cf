"""Default file names and layout searched by the location resolver.

Candidates are tried in the order listed; the first existing one wins.
"""

# -------------------------------------------------------------------------
# File candidates
# -------------------------------------------------------------------------
SETTINGS_FILE_NAMES = (
    "settings.toml",
    "settings.yaml",
    "settings.yml",
    "settings.json",
)
SECRETS_FILE_NAMES = (
    ".secrets.toml",
    ".secrets.yaml",
    ".secrets.yml",
    ".secrets.json",
)

# Files may also live one level down, e.g. <root>/config/settings.toml
CONFIG_SUBDIR = "config"

# -------------------------------------------------------------------------
# Environment layer
# -------------------------------------------------------------------------
ENVVAR_SEPARATOR = "__"
ENCODING = "utf-8"

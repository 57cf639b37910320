"""Shared constants for the linkscheme home directory and artefacts."""

LINKSCHEME_HOME_EXT = ".linkscheme"  # user-level state/config directory suffix

LINKSCHEME_HOME_ENV = "LINKSCHEME_HOME"

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "linkscheme.log"

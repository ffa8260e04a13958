"""Persistence configuration constants.

These values decide where the session's single save file lives and what a
load falls back to when older data did not record something.
"""

from pathlib import Path

# =============================================================================
# SAVE FILE LOCATION
# =============================================================================
# One file per session. Saving overwrites it as a whole; there are no slots.
DEFAULT_SAVE_DIR = Path("data/saves")
SAVE_FILE_NAME = "saveFile"
SAVE_DIR_ENV_VAR = "SHAPEWORLD_SAVE_DIR"

# =============================================================================
# LOAD DEFAULTS
# =============================================================================
# Files older than version 2 never stored a level; they were all made in the
# first level.
DEFAULT_LEVEL_INDEX = 1

# Files older than version 2 never stored a color.
DEFAULT_SHAPE_RGBA = (1.0, 1.0, 1.0, 1.0)

# Suffix for the temp file a save is staged in before replacing the target.
STAGING_SUFFIX = ".tmp"

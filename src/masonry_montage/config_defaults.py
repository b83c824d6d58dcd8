"""Shared default values for user-facing configuration settings."""

# Input
DEFAULT_INPUT_DIR = "."
DEFAULT_PATTERNS: tuple[str, ...] = ("*.jpg", "*.jpeg")

# Thumbnails
DEFAULT_THUMBNAIL_HEIGHT = 200
DEFAULT_SAVE_THUMBNAILS = True
DEFAULT_THUMBNAILS_DIR = "thumbnails"
DEFAULT_ASSUME_YES = False

# Layout
DEFAULT_MAX_WIDTH = 820
DEFAULT_SORT_BY_WIDTH = True

# Output
DEFAULT_OUTPUT_FILE = "output.png"

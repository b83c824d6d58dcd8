"""
Constants used internally by the masonry montage tool.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Color modes
COLOR_MODE_RGB = "RGB"
COLOR_MODE_RGBA = "RGBA"

# Internal colors
COLOR_WHITE = (255, 255, 255)
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Encoding
OUTPUT_FORMAT = "PNG"
THUMBNAIL_FORMAT = "JPEG"
THUMBNAIL_JPEG_QUALITY = 75

# Thumbnail directory confirmation prompt
CONFIRM_PROMPT = (
    "The directory {path} already exists. "
    "Do you want to remove it and proceed? (y/n): "
)
CONFIRM_YES = "y"

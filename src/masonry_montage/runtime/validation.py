"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path

from masonry_montage.errors import ConfigError


def validate_input_dir(input_dir: str) -> Path:
    """Ensure the input directory exists and return it as a Path."""
    path = Path(input_dir)
    if not path.is_dir():
        msg = f"Input directory not found: {input_dir}"
        raise ConfigError(msg)
    return path


def validate_parameters(max_width: int, thumbnail_height: int) -> None:
    """Validate that runtime parameters fall within supported ranges."""
    if max_width <= 0:
        msg = f"Maximum width must be positive, got {max_width}"
        raise ConfigError(msg)
    if thumbnail_height <= 0:
        msg = f"Thumbnail height must be positive, got {thumbnail_height}"
        raise ConfigError(msg)

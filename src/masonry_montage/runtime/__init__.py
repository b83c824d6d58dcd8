"""Runtime utilities for output, validation, and version helpers."""

from .output import prepare_thumbnails_directory, save_canvas
from .validation import validate_input_dir, validate_parameters
from .version import resolve_project_version

__all__ = [
    "prepare_thumbnails_directory",
    "resolve_project_version",
    "save_canvas",
    "validate_input_dir",
    "validate_parameters",
]

"""Helpers for managing output locations and persisted artifacts."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from masonry_montage.constants import (
    CONFIRM_PROMPT,
    CONFIRM_YES,
    OUTPUT_FORMAT,
)
from masonry_montage.errors import OperationCancelledError
from masonry_montage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from PIL import Image


def _confirmed(answer: str) -> bool:
    return answer.strip().lower() == CONFIRM_YES


def prepare_thumbnails_directory(
    path: Path | str,
    *,
    assume_yes: bool = False,
    confirm: Callable[[str], str] = input,
) -> Path:
    """
    Create a fresh, empty thumbnails directory.

    An existing directory is only removed after the user answers ``y``
    to the prompt (or ``assume_yes`` is set). Any other answer raises
    :class:`OperationCancelledError` and leaves the directory untouched.
    """
    directory = Path(path)
    if directory.exists():
        if not assume_yes and not _confirmed(
            confirm(CONFIRM_PROMPT.format(path=directory)),
        ):
            msg = f"Refused to remove existing directory: {directory}"
            raise OperationCancelledError(msg)
        logger.info("Removing existing thumbnails directory: %s", directory)
        if directory.is_dir():
            shutil.rmtree(directory)
        else:
            directory.unlink()

    directory.mkdir(parents=True)
    return directory


def save_canvas(canvas: Image.Image, path: Path | str) -> Path:
    """
    Encode the composed canvas as PNG.

    Parent directories are created on demand. Write failures surface as
    ``OSError`` naming the destination.
    """
    out_path = Path(path)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        canvas.save(out_path, format=OUTPUT_FORMAT)
    except OSError as e:
        msg = f"Failed to write output image '{out_path}': {e!s}"
        raise OSError(msg) from e
    return out_path

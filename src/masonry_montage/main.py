"""Top-level orchestration for building a masonry montage."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import masonry_montage.masonry as mm_masonry
import masonry_montage.runtime as mm_runtime
import masonry_montage.thumbnails as mm_thumbnails
from masonry_montage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from PIL import Image

    from masonry_montage.config import MontageConfig


def build_layout(
    thumbnails: Sequence[Image.Image],
    max_width: int,
    *,
    sort_by_width: bool = True,
) -> mm_masonry.Layout[Image.Image]:
    """Order thumbnails (widest first unless disabled) and pack them."""
    ordered = (
        mm_masonry.sort_by_width_desc(thumbnails)
        if sort_by_width
        else list(thumbnails)
    )
    return mm_masonry.pack_rows(ordered, max_width)


def create_montage(
    config: MontageConfig,
    *,
    confirm: Callable[[str], str] = input,
    show_progress: bool = True,
) -> Path | None:
    """
    Run the full pipeline described by ``config``.

    Discovers source images, writes thumbnails (when enabled), packs them
    into rows, composites the canvas, and saves it as PNG.

    Returns:
        Path of the written montage, or None when no image could be
        loaded. An empty input is not an error; nothing is written.

    Raises:
        ConfigError: If the input directory or parameters are invalid.
        OperationCancelledError: If the user declines replacing an
            existing thumbnails directory.
        OSError: If the montage cannot be written.

    """
    # Validate inputs
    input_dir = mm_runtime.validate_input_dir(config.input.input_dir)
    mm_runtime.validate_parameters(
        config.layout.max_width,
        config.thumbnails.height,
    )

    output_path = Path(config.output.output)

    # Thumbnail directory is replaced before any decoding work starts
    thumbnails_dir: Path | None = None
    if config.thumbnails.save:
        thumbnails_dir = mm_runtime.prepare_thumbnails_directory(
            config.thumbnails.directory,
            assume_yes=config.thumbnails.assume_yes,
            confirm=confirm,
        )

    paths = mm_thumbnails.discover_images(
        input_dir,
        config.input.patterns,
        exclude_names=(output_path.name,),
    )
    logger.info("Found %d candidate images in %s", len(paths), input_dir)

    thumbnails = mm_thumbnails.produce_thumbnails(
        paths,
        config.thumbnails.height,
        thumbnails_dir=thumbnails_dir,
        show_progress=show_progress,
    )

    layout = build_layout(
        thumbnails,
        config.layout.max_width,
        sort_by_width=config.layout.sort_by_width,
    )
    if layout.is_empty:
        logger.warning("No images could be loaded; no montage written.")
        return None

    logger.info(
        "Layout: %d images in %d rows, canvas %dx%d",
        layout.image_count,
        len(layout.rows),
        layout.canvas_width,
        layout.canvas_height,
    )

    canvas = mm_masonry.compose_canvas(layout)
    saved = mm_runtime.save_canvas(canvas, output_path)
    logger.info("Masonry layout created and saved to %s", saved)
    return saved

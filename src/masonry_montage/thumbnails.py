"""Image discovery, decoding, and fixed-height thumbnail production."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, UnidentifiedImageError
from tqdm import tqdm

from masonry_montage.constants import (
    COLOR_MODE_RGB,
    COLOR_MODE_RGBA,
    COLOR_WHITE,
    THUMBNAIL_FORMAT,
    THUMBNAIL_JPEG_QUALITY,
)
from masonry_montage.errors import ConfigError, DecodeError
from masonry_montage.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

_RGB = tuple[int, int, int]


def discover_images(
    input_dir: Path | str,
    patterns: Iterable[str],
    *,
    exclude_names: Iterable[str] = (),
) -> list[Path]:
    """
    Return files in input_dir matching any of the glob patterns.

    Matches are deduplicated and sorted. Files whose base name appears in
    ``exclude_names`` are skipped so a montage written into the input
    directory is never fed back in as a source.
    """
    root = Path(input_dir)
    excluded = set(exclude_names)
    found: set[Path] = set()
    for pattern in patterns:
        for candidate in root.glob(pattern):
            if candidate.name in excluded:
                logger.debug("Skipping excluded file: %s", candidate)
                continue
            if candidate.is_file():
                found.add(candidate)
    return sorted(found)


def load_image(path: Path | str) -> Image.Image:
    """
    Load and fully decode an image from disk.

    Args:
        path: Path to the image file

    Returns:
        Decoded PIL image, detached from the underlying file handle

    Raises:
        DecodeError: If the file is missing, unreadable, or not an image

    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise DecodeError(msg) from e
    except (UnidentifiedImageError, OSError) as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise DecodeError(msg) from e


def resize_to_height(img: Image.Image, height: int) -> Image.Image:
    """Resize keeping aspect so that resulting height matches."""
    if height <= 0:
        msg = f"Thumbnail height must be positive, got {height}"
        raise ConfigError(msg)
    w, h = img.size
    if h <= 0:
        msg = "Input image has zero height"
        raise DecodeError(msg)
    scale = height / h
    new_w = max(1, round(w * scale))
    return img.resize((new_w, height), Image.Resampling.LANCZOS)


def to_rgb(img: Image.Image, *, bg_color: _RGB = COLOR_WHITE) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info:
        bg = Image.new(COLOR_MODE_RGBA, img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert(COLOR_MODE_RGBA))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def save_thumbnail(img: Image.Image, path: Path) -> bool:
    """
    Write a thumbnail as JPEG.

    Failures are logged and reported through the return value rather
    than raised; a missing thumbnail file never aborts the montage.
    """
    try:
        to_rgb(img).save(
            path,
            format=THUMBNAIL_FORMAT,
            quality=THUMBNAIL_JPEG_QUALITY,
        )
    except OSError as e:
        logger.warning("Failed to save thumbnail %s: %s", path, e)
        return False
    return True


def produce_thumbnails(
    paths: Sequence[Path],
    height: int,
    *,
    thumbnails_dir: Path | None = None,
    show_progress: bool = True,
) -> list[Image.Image]:
    """
    Decode each path and scale it to the target height.

    Files that cannot be decoded are logged and skipped. When
    ``thumbnails_dir`` is given, each thumbnail is also written there
    under its source file name.

    Returns:
        Thumbnails in the same order as ``paths``, minus skipped files.

    """
    if height <= 0:
        msg = f"Thumbnail height must be positive, got {height}"
        raise ConfigError(msg)

    thumbnails: list[Image.Image] = []
    for path in tqdm(
        paths,
        desc="Thumbnails",
        unit="img",
        disable=not show_progress,
    ):
        try:
            source = load_image(path)
            thumbnail = resize_to_height(source, height)
        except DecodeError as e:
            logger.warning("Failed to load image %s: %s", path, e)
            continue
        if thumbnails_dir is not None:
            save_thumbnail(thumbnail, thumbnails_dir / path.name)
        thumbnails.append(thumbnail)

    logger.info(
        "Produced %d thumbnails from %d files.", len(thumbnails), len(paths),
    )
    return thumbnails

"""
Greedy row packing for masonry montages.

Images are placed left to right into horizontal rows. A row closes as
soon as the next image would push it past the width budget. The first
row to close fixes the budget for every later row, and that budget is
also the final canvas width. When everything fits into one row the
canvas is exactly as wide as that row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic

from masonry_montage.errors import ConfigError
from masonry_montage.logging_utils import logger
from masonry_montage.type_defs import ImageT

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence


def row_width(row: Sequence[ImageT]) -> int:
    """Return the summed width of a row."""
    return sum(im.width for im in row)


def row_height(row: Sequence[ImageT]) -> int:
    """Return the height of a row, i.e. its tallest member."""
    return max((im.height for im in row), default=0)


@dataclass(frozen=True)
class Layout(Generic[ImageT]):
    """Rows of images plus the canvas size they are rendered onto."""

    rows: tuple[tuple[ImageT, ...], ...] = ()
    canvas_width: int = 0
    canvas_height: int = 0

    @property
    def size(self) -> tuple[int, int]:
        """Return (canvas_width, canvas_height)."""
        return self.canvas_width, self.canvas_height

    @property
    def is_empty(self) -> bool:
        """True when no image was packed."""
        return not self.rows

    @property
    def image_count(self) -> int:
        """Total number of images across all rows."""
        return sum(len(row) for row in self.rows)


def sort_by_width_desc(images: Iterable[ImageT]) -> list[ImageT]:
    """
    Return images ordered widest first.

    The sort is stable, so images of equal width keep their input order
    and sorting an already sorted list is a no-op.
    """
    return sorted(images, key=lambda im: im.width, reverse=True)


def pack_rows(images: Iterable[ImageT], max_width: int) -> Layout[ImageT]:
    """
    Assign images to rows under a width budget and size the canvas.

    Args:
        images: Images in placement order, usually widest first.
        max_width: Initial width budget in pixels. Must be positive.

    Returns:
        The packed layout. Empty input gives an empty 0x0 layout.

    Raises:
        ConfigError: If ``max_width`` is not positive.

    """
    if max_width <= 0:
        msg = f"Maximum width must be positive, got {max_width}"
        raise ConfigError(msg)

    rows: list[tuple[ImageT, ...]] = []
    current_row: list[ImageT] = []
    current_row_width = 0
    effective_width = max_width

    for im in images:
        # A row never closes before it holds at least one image.
        if current_row and current_row_width + im.width > effective_width:
            if not rows:
                effective_width = current_row_width
            rows.append(tuple(current_row))
            current_row = []
            current_row_width = 0
        current_row.append(im)
        current_row_width += im.width

    if current_row:
        rows.append(tuple(current_row))
        if len(rows) == 1:
            effective_width = current_row_width

    if not rows:
        logger.debug("No images to pack; returning an empty layout.")
        return Layout()

    canvas_height = sum(row_height(row) for row in rows)
    logger.debug(
        "Packed %d images into %d rows (canvas %dx%d, max width %d).",
        sum(len(row) for row in rows),
        len(rows),
        effective_width,
        canvas_height,
        max_width,
    )
    return Layout(
        rows=tuple(rows),
        canvas_width=effective_width,
        canvas_height=canvas_height,
    )

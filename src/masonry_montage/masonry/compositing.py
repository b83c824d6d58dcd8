"""Render a packed layout onto a single RGBA canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from PIL import Image

from masonry_montage.constants import COLOR_MODE_RGBA, COLOR_TRANSPARENT
from masonry_montage.masonry.packing import row_height

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

    from masonry_montage.masonry.packing import Layout

_RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class Placement:
    """Top left corner at which an image is drawn on the canvas."""

    image: Image.Image
    x: int
    y: int
    row_index: int


def iter_placements(layout: Layout[Image.Image]) -> Iterator[Placement]:
    """
    Walk the layout row by row and yield each image's offset.

    Within a row x advances by each image's width. Each row starts at
    the summed heights of the rows above it.
    """
    y = 0
    for row_index, row in enumerate(layout.rows):
        x = 0
        for im in row:
            yield Placement(image=im, x=x, y=y, row_index=row_index)
            x += im.width
        y += row_height(row)


def _as_rgba(img: Image.Image) -> Image.Image:
    """Return an RGBA view of img, converting only when needed."""
    if img.mode == COLOR_MODE_RGBA:
        return img
    return img.convert(COLOR_MODE_RGBA)


def compose_canvas(
    layout: Layout[Image.Image],
    *,
    background: _RGBA = COLOR_TRANSPARENT,
) -> Image.Image:
    """
    Draw every image of the layout onto a fresh canvas.

    Images are composited source-over, so opaque pixels replace the
    background. Anything falling outside the canvas is clipped.
    """
    canvas = Image.new(COLOR_MODE_RGBA, layout.size, background)
    for placement in iter_placements(layout):
        canvas.alpha_composite(
            _as_rgba(placement.image),
            dest=(placement.x, placement.y),
        )
    return canvas

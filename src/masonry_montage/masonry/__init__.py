"""
Masonry layout split into row packing and canvas compositing.

The package exposes the most commonly used entry points directly so
callers rarely need to reach into the submodules.
"""

from __future__ import annotations

from . import compositing, packing
from .compositing import Placement, compose_canvas, iter_placements
from .packing import (
    Layout,
    pack_rows,
    row_height,
    row_width,
    sort_by_width_desc,
)

__all__ = [
    "Layout",
    "Placement",
    "compose_canvas",
    "compositing",
    "iter_placements",
    "pack_rows",
    "packing",
    "row_height",
    "row_width",
    "sort_by_width_desc",
]

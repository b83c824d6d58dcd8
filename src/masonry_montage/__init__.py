"""Public package exports for the masonry montage tool."""

from __future__ import annotations

from .main import build_layout, create_montage
from .masonry import Layout, compose_canvas, pack_rows, sort_by_width_desc

__all__ = [
    "Layout",
    "build_layout",
    "compose_canvas",
    "create_montage",
    "pack_rows",
    "sort_by_width_desc",
]

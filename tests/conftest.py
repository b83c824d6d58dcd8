"""
Test configuration and shared fixtures for masonry_montage.

This module defines reusable pytest fixtures for building image
directories, lightweight sized stand-ins, and configuration objects.
These fixtures support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from masonry_montage.config import MontageConfig
from masonry_montage.constants import COLOR_MODE_RGB
from masonry_montage.logging_utils import logger


@dataclass(frozen=True)
class Box:
    """Minimal sized item satisfying the SizedImage protocol."""

    width: int
    height: int
    name: str = ""


@pytest.fixture
def make_boxes() -> Callable[..., list[Box]]:
    """Build Box lists from parallel width and height sequences."""

    def _make(widths: Iterable[int], heights: Iterable[int]) -> list[Box]:
        return [
            Box(width=w, height=h, name=f"box{i}")
            for i, (w, h) in enumerate(zip(widths, heights, strict=True))
        ]

    return _make


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (100, 100), color="red")


@pytest.fixture
def make_image_dir(tmp_path: Path) -> Callable[..., Path]:
    """
    Write solid-color JPEGs of the given sizes into a fresh directory.

    Sizes are (width, height) tuples; files are named img0.jpg, img1.jpg,
    and so on unless explicit names are provided.
    """
    counter = {"n": 0}

    def _make(
        sizes: Iterable[tuple[int, int]],
        *,
        names: Iterable[str] | None = None,
        color: str = "blue",
    ) -> Path:
        counter["n"] += 1
        directory = tmp_path / f"images{counter['n']}"
        directory.mkdir()
        size_list = list(sizes)
        name_list = (
            list(names)
            if names is not None
            else [f"img{i}.jpg" for i in range(len(size_list))]
        )
        for size, name in zip(size_list, name_list, strict=True):
            Image.new(COLOR_MODE_RGB, size, color=color).save(
                directory / name, format="JPEG",
            )
        return directory

    return _make


@pytest.fixture
def make_montage_config(tmp_path: Path) -> Callable[..., MontageConfig]:
    """
    Build MontageConfig instances with optional section overrides.

    Outputs and thumbnails default to isolated locations under tmp_path.
    """

    def _build(
        *,
        input_dir: Path | str,
        thumbnails: dict[str, Any] | None = None,
        layout: dict[str, Any] | None = None,
        output: Path | str | None = None,
        patterns: list[str] | None = None,
    ) -> MontageConfig:
        input_section: dict[str, Any] = {"input_dir": str(input_dir)}
        if patterns is not None:
            input_section["patterns"] = patterns
        thumb_section = {
            "directory": str(tmp_path / "thumbnails"),
            **(thumbnails or {}),
        }
        data = {
            "input": input_section,
            "thumbnails": thumb_section,
            "layout": dict(layout or {}),
            "output": {
                "output": str(output or tmp_path / "out" / "output.png"),
            },
        }
        return MontageConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the montage logger so caplog sees records."""
    monkeypatch.setattr(logger, "propagate", True)

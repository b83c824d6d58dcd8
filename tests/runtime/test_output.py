"""Tests for runtime.output helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from masonry_montage.errors import OperationCancelledError
from masonry_montage.runtime import output as runtime_output


def test_prepare_creates_missing_directory(tmp_path: Path) -> None:
    target = tmp_path / "thumbs"

    def never(_prompt: str) -> str:
        raise AssertionError

    result = runtime_output.prepare_thumbnails_directory(
        target, confirm=never,
    )
    assert result == target
    assert target.is_dir()


@pytest.mark.parametrize("answer", ["y", "Y", "  y  \n"])
def test_prepare_replaces_on_yes(tmp_path: Path, answer: str) -> None:
    target = tmp_path / "thumbs"
    target.mkdir()
    (target / "old.jpg").write_bytes(b"x")

    runtime_output.prepare_thumbnails_directory(
        target, confirm=lambda _p: answer,
    )
    assert target.is_dir()
    assert list(target.iterdir()) == []


@pytest.mark.parametrize("answer", ["n", "", "yes", "no"])
def test_prepare_cancels_otherwise(tmp_path: Path, answer: str) -> None:
    target = tmp_path / "thumbs"
    target.mkdir()
    (target / "old.jpg").write_bytes(b"x")

    with pytest.raises(OperationCancelledError):
        runtime_output.prepare_thumbnails_directory(
            target, confirm=lambda _p: answer,
        )
    assert (target / "old.jpg").exists()


def test_prepare_prompt_text(tmp_path: Path) -> None:
    target = tmp_path / "thumbs"
    target.mkdir()
    seen: list[str] = []

    def record(prompt: str) -> str:
        seen.append(prompt)
        return "y"

    runtime_output.prepare_thumbnails_directory(target, confirm=record)
    assert seen == [
        f"The directory {target} already exists. "
        "Do you want to remove it and proceed? (y/n): ",
    ]


def test_prepare_assume_yes_replaces_file(tmp_path: Path) -> None:
    """A plain file in the way is removed without asking."""
    target = tmp_path / "thumbs"
    target.write_bytes(b"not a directory")

    def never(_prompt: str) -> str:
        raise AssertionError

    runtime_output.prepare_thumbnails_directory(
        target, assume_yes=True, confirm=never,
    )
    assert target.is_dir()


def test_save_canvas_writes_png(tmp_path: Path) -> None:
    canvas = Image.new("RGBA", (12, 7), (0, 0, 0, 0))
    target = tmp_path / "nested" / "montage.png"

    saved = runtime_output.save_canvas(canvas, target)

    assert saved == target
    with Image.open(target) as written:
        assert written.format == "PNG"
        assert written.size == (12, 7)
        assert written.mode == "RGBA"


def test_save_canvas_wraps_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    canvas = Image.new("RGBA", (2, 2))

    def boom(*_a: object, **_k: object) -> None:
        msg = "disk full"
        raise OSError(msg)

    monkeypatch.setattr(canvas, "save", boom)
    with pytest.raises(OSError, match="Failed to write output image"):
        runtime_output.save_canvas(canvas, tmp_path / "out.png")

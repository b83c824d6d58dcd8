"""
Defines shared type aliases for the masonry montage tool.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SizedImage(Protocol):
    """
    Anything with integer pixel dimensions.

    ``PIL.Image.Image`` satisfies this protocol, which is all the packer
    needs; decoding and pixel access stay with the caller.
    """

    @property
    def width(self) -> int:
        """Width in pixels."""
        ...

    @property
    def height(self) -> int:
        """Height in pixels."""
        ...


ImageT = TypeVar("ImageT", bound=SizedImage)

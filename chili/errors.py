"""Exceptions raised by Chili."""

from __future__ import annotations
from typing import Optional


class ImageLoadError(Exception):
    """An image could not be turned into a renderable texture."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class DecodeError(ImageLoadError):
    """An image file could not be read or decoded."""


class TextureUploadError(ImageLoadError):
    """Decoded pixels were rejected by the GPU (e.g. larger than the max texture size)."""

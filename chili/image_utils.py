"""Image utilities - probing and decoding PNG files."""

from __future__ import annotations
import os
import struct
from typing import Optional, Tuple

from PIL import Image

from .errors import DecodeError
from .types import DecodedImage, PlaceholderImage

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


def is_png_signature(header: bytes) -> bool:
    return header[:8] == PNG_SIGNATURE


def probe_png_dimensions(header: bytes) -> Optional[Tuple[int, int]]:
    """Extract (width, height) from the IHDR chunk of a PNG header."""
    if len(header) < 24 or not is_png_signature(header):
        return None
    width, height = struct.unpack('>II', header[16:24])
    return (width, height)


def decode_png(path: str) -> DecodedImage:
    """Decode a PNG file into RGBA8 pixels.

    Args:
        path: Filesystem path of the PNG file.

    Returns:
        DecodedImage with rows packed top to bottom.

    Raises:
        DecodeError: The path is unreadable, the data is not a PNG,
            or Pillow cannot decode it.
    """
    path = os.fspath(path)
    try:
        with open(path, 'rb') as f:
            header = f.read(24)
    except OSError as e:
        raise DecodeError(f"cannot read file ({e.strerror or e})", path) from e

    dims = probe_png_dimensions(header)
    if dims is None:
        raise DecodeError("not a PNG file", path)
    if 0 in dims:
        raise DecodeError("empty image", path)

    try:
        with Image.open(path, formats=["PNG"]) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"invalid PNG data ({e})", path) from e

    width, height = rgba.size
    return DecodedImage(width=width, height=height, rgba=rgba.tobytes(), path=path)


def placeholder() -> PlaceholderImage:
    """The 2x2 magenta/black checkerboard shown without an image."""
    return PlaceholderImage()

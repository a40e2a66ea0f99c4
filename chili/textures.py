"""Texture binding - uploads decoded pixels to the GPU and frees them."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple

from .config import (
    PIXELFORMAT_UNCOMPRESSED_R8G8B8A8,
    GL_TEXTURE_MIN_FILTER, GL_TEXTURE_MAG_FILTER,
    TEXTURE_MIN_FILTER, TEXTURE_MAG_FILTER,
)
from .errors import TextureUploadError
from .image_utils import decode_png
from .types import ImageBinding, ImageSource
from .logging import log


def _default_backend() -> Any:
    from .rl_compat import rl
    return rl


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


@dataclass
class TextureLoader:
    """Creates and releases the textures the viewer draws.

    Requires an open window (a live GL context). The raylib module is
    injected so uploads can be exercised against a stand-in.
    """
    backend: Any = field(default_factory=_default_backend)
    min_filter: int = TEXTURE_MIN_FILTER
    mag_filter: int = TEXTURE_MAG_FILTER

    def make_image(self, source: ImageSource) -> Tuple[Any, Any]:
        """Wrap ``source`` pixels in a raylib Image.

        Returns the Image and the cffi buffer backing it; the buffer must stay
        referenced until the image has been uploaded.
        """
        ffi = self.backend.ffi
        buf = ffi.new("unsigned char[]", source.rgba)
        img = ffi.new("Image *")
        img[0].data = buf
        img[0].width = int(source.width)
        img[0].height = int(source.height)
        img[0].mipmaps = 1
        img[0].format = PIXELFORMAT_UNCOMPRESSED_R8G8B8A8
        return img[0], buf

    def bind(self, source: ImageSource) -> ImageBinding:
        """Upload ``source`` and wrap it as a renderable binding.

        Raises TextureUploadError if the GPU rejects the pixels.
        """
        img, _pixels = self.make_image(source)
        tex = self.backend.LoadTextureFromImage(img)
        if not is_texture_valid(tex):
            raise TextureUploadError(
                f"texture upload failed ({source.width}x{source.height})", source.path)

        self._apply_filters(tex)
        log(f"[TEX] Loaded id={get_texture_id(tex)} "
            f"{source.width}x{source.height} from {source.path or '<placeholder>'}")
        return ImageBinding(texture=tex, size=source.size, source=source)

    def load(self, path: str) -> ImageBinding:
        """Decode the PNG at ``path`` and bind it. Raises ImageLoadError."""
        return self.bind(decode_png(path))

    def release(self, binding: ImageBinding) -> None:
        tex = binding.texture
        if is_texture_valid(tex):
            log(f"[TEX] Unloading id={get_texture_id(tex)} ({binding.label})")
            self.backend.UnloadTexture(tex)

    def _apply_filters(self, tex) -> None:
        tex_id = get_texture_id(tex)
        self.backend.rlTextureParameters(tex_id, GL_TEXTURE_MIN_FILTER, self.min_filter)
        self.backend.rlTextureParameters(tex_id, GL_TEXTURE_MAG_FILTER, self.mag_filter)

"""Core data types for Chili."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .config import (
    MIN_ZOOM_FRACTION,
    MAX_ZOOM_FRACTION,
    PLACEHOLDER_PIXELS,
    PLACEHOLDER_RGBA,
    PLACEHOLDER_SIZE,
)
from .math_utils import Vec2, clamp


@dataclass(frozen=True)
class CenteredView:
    """A world-space rectangle of ``size`` centered on ``center``."""
    center: Vec2
    size: Vec2

    def ndc_to_world(self, ndc: Vec2) -> Vec2:
        """Map normalized device coordinates (y up) to world coordinates (y down)."""
        cx, cy = self.center
        w, h = self.size
        return (cx + ndc[0] * w / 2.0, cy - ndc[1] * h / 2.0)

    def world_to_ndc(self, world: Vec2) -> Vec2:
        cx, cy = self.center
        w, h = self.size
        return ((world[0] - cx) * 2.0 / w, (cy - world[1]) * 2.0 / h)


@dataclass(frozen=True)
class ZoomBounds:
    """Allowed zoom range, derived from the fit zoom."""
    min_zoom: float
    max_zoom: float

    @classmethod
    def from_initial(cls, zoom: float) -> ZoomBounds:
        return cls(MIN_ZOOM_FRACTION * zoom, MAX_ZOOM_FRACTION * zoom)

    def clamp(self, zoom: float) -> float:
        return clamp(zoom, self.min_zoom, self.max_zoom)


@dataclass(frozen=True)
class DecodedImage:
    """A decoded image as tightly packed RGBA8 rows."""
    width: int
    height: int
    rgba: bytes
    path: Optional[str] = None

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def size(self) -> Vec2:
        """Size of the drawn quad in world units."""
        return (float(self.width), float(self.height))


@dataclass(frozen=True)
class PlaceholderImage:
    """Built-in checkerboard shown when no image was given."""
    width: int = PLACEHOLDER_PIXELS[0]
    height: int = PLACEHOLDER_PIXELS[1]
    rgba: bytes = PLACEHOLDER_RGBA
    path: Optional[str] = None

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def size(self) -> Vec2:
        return PLACEHOLDER_SIZE


ImageSource = Union[DecodedImage, PlaceholderImage]


@dataclass(frozen=True)
class ImageBinding:
    """A renderable texture and the world size it is drawn at."""
    texture: Any  # rl.Texture2D - using Any to avoid raylib import
    size: Vec2
    source: ImageSource

    @property
    def is_placeholder(self) -> bool:
        return isinstance(self.source, PlaceholderImage)

    @property
    def label(self) -> str:
        return self.source.path or "<placeholder>"

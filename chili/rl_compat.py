"""Raylib binding helpers - struct construction through python-raylib's cffi layer."""

from __future__ import annotations
from typing import Any, Sequence, Tuple

import raylib as rl

RL_VERSION = "python-raylib"
ffi = rl.ffi


def to_bytes(text: str) -> bytes:
    """Encode a str for ``const char *`` parameters."""
    return text.encode('utf-8')


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle."""
    r = ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2."""
    v = ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(rgba: Sequence[float]) -> Any:
    """Create a raylib Color from normalized (r, g, b, a) floats."""
    c = ffi.new("Color *")
    r, g, b, a = (max(0, min(255, int(round(ch * 255.0)))) for ch in rgba)
    c[0].r, c[0].g, c[0].b, c[0].a = r, g, b, a
    return c[0]


def make_camera(offset: Tuple[float, float], target: Tuple[float, float],
                zoom: float) -> Any:
    """Create a Camera2D mapping ``target`` (world) to ``offset`` (window)."""
    cam = ffi.new("Camera2D *")
    cam[0].offset = make_vec2(*offset)
    cam[0].target = make_vec2(*target)
    cam[0].rotation = 0.0
    cam[0].zoom = float(zoom)
    return cam[0]


__all__ = [
    'rl',
    'ffi',
    'RL_VERSION',
    'to_bytes',
    'make_rect',
    'make_vec2',
    'make_color',
    'make_camera',
]

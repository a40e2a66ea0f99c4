"""Pure view calculation functions - no side effects, no state mutation.

Coordinate spaces:
    window  pixels, origin top-left, y down
    NDC     [-1, 1] on both axes, y up
    world   image space, the image quad is centered on the origin, y down

The world/window relation is the same one raylib's ``Camera2D`` uses with
``offset`` at the window center, ``target`` at the focus and ``zoom`` as
scale, so :func:`screen_to_world` is the exact inverse of what gets drawn.
"""

from __future__ import annotations
from typing import Tuple

from .config import ZOOM_STEP
from .math_utils import Vec2, vec2_add, vec2_sub
from .types import CenteredView, ZoomBounds

Size = Tuple[float, float]


def compute_view(window_size: Size, zoom: float, focus: Vec2) -> CenteredView:
    """Visible world rectangle for a window at ``zoom`` centered on ``focus``."""
    return CenteredView(
        center=(float(focus[0]), float(focus[1])),
        size=(window_size[0] / zoom, window_size[1] / zoom),
    )


def initial_zoom(window_size: Size, image_size: Size) -> float:
    """Largest zoom that fits the whole image in the window (letterboxed).

    Args:
        window_size: Window (width, height) in pixels.
        image_size: Image (width, height) in world units, both positive.

    Returns:
        min of the per-axis ratios.
    """
    zoom_x = window_size[0] / image_size[0]
    zoom_y = window_size[1] / image_size[1]
    return zoom_x if zoom_x < zoom_y else zoom_y


def zoom_bounds(window_size: Size, image_size: Size) -> ZoomBounds:
    return ZoomBounds.from_initial(initial_zoom(window_size, image_size))


def apply_zoom_delta(current_zoom: float, direction: float, bounds: ZoomBounds,
                     step: float = ZOOM_STEP) -> float:
    """Step zoom in (direction > 0) or out (direction < 0) and clamp.

    A zero direction leaves the zoom untouched.
    """
    if direction > 0:
        zoom = current_zoom * step
    elif direction < 0:
        zoom = current_zoom / step
    else:
        return current_zoom
    return bounds.clamp(zoom)


def window_to_ndc(window_size: Size, pixel: Vec2) -> Vec2:
    w, h = window_size
    return (2.0 * pixel[0] / w - 1.0, 1.0 - 2.0 * pixel[1] / h)


def ndc_to_window(window_size: Size, ndc: Vec2) -> Vec2:
    w, h = window_size
    return ((ndc[0] + 1.0) * w / 2.0, (1.0 - ndc[1]) * h / 2.0)


def screen_to_world(view: CenteredView, window_size: Size, pixel: Vec2) -> Vec2:
    """Map a window pixel through NDC into ``view``'s world rectangle."""
    return view.ndc_to_world(window_to_ndc(window_size, pixel))


def world_to_screen(view: CenteredView, window_size: Size, world: Vec2) -> Vec2:
    """Forward projection used when drawing; inverse of screen_to_world."""
    return ndc_to_window(window_size, view.world_to_ndc(world))


def pan_focus(focus: Vec2, view: CenteredView, window_size: Size,
              previous: Vec2, current: Vec2) -> Vec2:
    """Move focus so the world point under ``previous`` ends up under ``current``.

    ``view`` must be the view in effect before this event.
    """
    last_world = screen_to_world(view, window_size, previous)
    current_world = screen_to_world(view, window_size, current)
    return vec2_add(focus, vec2_sub(last_world, current_world))

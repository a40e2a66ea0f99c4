"""Event handler - applies window events to AppState.

``handle(event, state, loader)`` is the only place state changes. ``loader``
is the image/texture capability:

    loader.load(path) -> ImageBinding   # raises ImageLoadError
    loader.release(binding) -> None     # frees the texture
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .config import KEY_ESCAPE
from .errors import ImageLoadError
from .events import (
    Event,
    WindowResized, CloseRequested, FileDropped,
    KeyPressed, MouseScrolled, MouseMoved,
    LineDelta, PixelDelta,
)
from .view_math import pan_focus
from .logging import log, log_error

if TYPE_CHECKING:
    from .state import AppState


def handle(event: Event, state: "AppState", loader) -> bool:
    """Apply one event to ``state``. Returns True if a redraw was requested."""
    if isinstance(event, WindowResized):
        return _on_resize(event, state)

    if isinstance(event, KeyPressed):
        if event.key == KEY_ESCAPE:
            log("[KEY] Escape pressed, stopping")
            state.running = False
        return False

    if isinstance(event, CloseRequested):
        log("[WINDOW] Close requested, stopping")
        state.running = False
        return False

    if isinstance(event, MouseScrolled):
        return _on_scroll(event, state)

    if isinstance(event, MouseMoved):
        if event.dragging:
            view = state.view.view_for(state.window.size)
            state.view.focus = pan_focus(
                state.view.focus, view, state.window.size,
                event.previous, event.current,
            )
        return state.request_redraw()

    if isinstance(event, FileDropped):
        return _on_file_dropped(event, state, loader)

    raise TypeError(f"unhandled event: {event!r}")


def _on_resize(event: WindowResized, state: "AppState") -> bool:
    if event.width <= 0 or event.height <= 0:
        # Minimized; keep the last usable size and zoom range
        log(f"[WINDOW] Ignoring resize to {event.width}x{event.height}")
        return False
    state.window.resize(event.width, event.height)
    # Zoom itself is not re-clamped here; the next scroll brings it in range.
    state.view.rebound(state.window.size, state.image_size)
    log(f"[WINDOW] Resized to {event.width}x{event.height} "
        f"zoom range=({state.view.min_zoom:.4g}, {state.view.max_zoom:.4g})")
    return state.request_redraw()


def _on_scroll(event: MouseScrolled, state: "AppState") -> bool:
    delta = event.delta
    if isinstance(delta, PixelDelta):
        return False
    if not isinstance(delta, LineDelta):
        raise TypeError(f"unhandled scroll delta: {delta!r}")
    if delta.y == 0:
        return False
    state.view.step_zoom(delta.y)
    return state.request_redraw()


def _on_file_dropped(event: FileDropped, state: "AppState", loader) -> bool:
    log(f"[DROP] Dropped file: {event.path}")
    try:
        image = loader.load(event.path)
    except ImageLoadError as e:
        log_error(f"[DROP][ERR] {e}")
        return False

    previous = state.attach_image(image)
    if previous is not None:
        loader.release(previous)
    w, h = image.size
    log(f"[DROP] Showing {image.label} {w:g}x{h:g} zoom={state.view.zoom:.4g}")
    return True

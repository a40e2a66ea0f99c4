"""Input Handler - maps raylib input to window events.

Polls raylib once per frame and returns the events that happened, in a
fixed order: close, resize, keys, scroll, cursor movement, dropped files.
The raylib module is injected so polling works against a stand-in.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .config import MOUSE_BUTTON_LEFT, MOUSE_BUTTON_RIGHT
from .events import (
    Event,
    CloseRequested, WindowResized, FileDropped,
    KeyPressed, MouseScrolled, MouseMoved, LineDelta,
)


def _default_backend() -> Any:
    from .rl_compat import rl
    return rl


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_down: bool = False
    right_down: bool = False
    wheel_x: float = 0.0
    wheel_y: float = 0.0

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class InputHandler:
    """Handles input polling and event generation."""
    backend: Any = field(default_factory=_default_backend)
    _last_position: Optional[Tuple[float, float]] = None

    def poll_mouse(self) -> MouseState:
        """Get current mouse state."""
        rl = self.backend
        pos = rl.GetMousePosition()
        wheel = rl.GetMouseWheelMoveV()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_down=bool(rl.IsMouseButtonDown(MOUSE_BUTTON_LEFT)),
            right_down=bool(rl.IsMouseButtonDown(MOUSE_BUTTON_RIGHT)),
            wheel_x=wheel.x,
            wheel_y=wheel.y,
        )

    def poll_keys(self) -> List[int]:
        """Drain raylib's key-pressed queue."""
        keys = []
        key = self.backend.GetKeyPressed()
        while key:
            keys.append(key)
            key = self.backend.GetKeyPressed()
        return keys

    def dropped_paths(self) -> List[str]:
        rl = self.backend
        if not rl.IsFileDropped():
            return []
        files = rl.LoadDroppedFiles()
        try:
            return [rl.ffi.string(files.paths[i]).decode('utf-8', 'replace')
                    for i in range(files.count)]
        finally:
            rl.UnloadDroppedFiles(files)

    def poll(self) -> List[Event]:
        """Poll all inputs and return the events for this frame."""
        rl = self.backend
        events: List[Event] = []

        if rl.WindowShouldClose():
            events.append(CloseRequested())

        if rl.IsWindowResized():
            events.append(WindowResized(rl.GetScreenWidth(), rl.GetScreenHeight()))

        for key in self.poll_keys():
            events.append(KeyPressed(key))

        mouse = self.poll_mouse()
        if mouse.wheel_x != 0.0 or mouse.wheel_y != 0.0:
            events.append(MouseScrolled(LineDelta(mouse.wheel_x, mouse.wheel_y)))

        previous = self._last_position
        self._last_position = mouse.position
        if previous is not None and previous != mouse.position:
            events.append(MouseMoved(
                previous=previous,
                current=mouse.position,
                left_down=mouse.left_down,
                right_down=mouse.right_down,
            ))

        for path in self.dropped_paths():
            events.append(FileDropped(path))

        return events

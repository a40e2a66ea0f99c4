"""Window events delivered to the handler.

Each event is a small dataclass; :func:`chili.handler.handle` dispatches on
the concrete type. The input poller produces them from raylib each frame,
tests build them directly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union


class Event:
    """Base class for all window events."""


# ═══════════════════════════════════════════════════════════════════════════
# Window
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class WindowResized(Event):
    """Client area changed to ``width`` x ``height`` pixels."""
    width: int
    height: int


@dataclass(frozen=True)
class CloseRequested(Event):
    """The window close button was pressed."""


@dataclass(frozen=True)
class FileDropped(Event):
    """A file was dragged onto the window."""
    path: str


# ═══════════════════════════════════════════════════════════════════════════
# Keyboard and mouse
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class KeyPressed(Event):
    key: int  # raylib key code


@dataclass(frozen=True)
class LineDelta:
    """Scroll measured in discrete lines (mouse wheel notches)."""
    x: float
    y: float


@dataclass(frozen=True)
class PixelDelta:
    """Scroll measured in pixels (precision touchpads)."""
    x: float
    y: float


ScrollDelta = Union[LineDelta, PixelDelta]


@dataclass(frozen=True)
class MouseScrolled(Event):
    delta: ScrollDelta


@dataclass(frozen=True)
class MouseMoved(Event):
    """Cursor moved from ``previous`` to ``current`` (window pixels)."""
    previous: Tuple[float, float]
    current: Tuple[float, float]
    left_down: bool = False
    right_down: bool = False

    @property
    def dragging(self) -> bool:
        return self.left_down or self.right_down

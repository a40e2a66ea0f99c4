"""Window state - current client area dimensions."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import WINDOW_WIDTH, WINDOW_HEIGHT


@dataclass
class WindowState:
    """Window-related state."""
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT

    @property
    def size(self) -> Tuple[int, int]:
        """Get window size as tuple."""
        return (self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

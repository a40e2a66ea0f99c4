"""Composite AppState - everything the event handler mutates."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .window import WindowState
from .view import ViewState
from ..types import ImageBinding


@dataclass
class AppState:
    """
    Application state, passed explicitly to the handler and the batch builder.

    ``image`` is owned here exclusively; replacing it is the only way the
    displayed texture changes.
    """
    window: WindowState = field(default_factory=WindowState)
    view: ViewState = field(default_factory=ViewState)
    image: Optional[ImageBinding] = None
    running: bool = True
    needs_redraw: bool = True

    @property
    def image_size(self) -> Tuple[float, float]:
        if self.image is None:
            return (1.0, 1.0)
        return self.image.size

    @property
    def texture(self):
        return self.image.texture if self.image is not None else None

    def attach_image(self, image: ImageBinding) -> Optional[ImageBinding]:
        """Install ``image``, fit the view to it and return the previous binding."""
        previous = self.image
        self.image = image
        self.view.fit(self.window.size, image.size)
        self.needs_redraw = True
        return previous

    def request_redraw(self) -> bool:
        self.needs_redraw = True
        return True

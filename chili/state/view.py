"""View state - zoom, focus and the zoom range."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..types import CenteredView, ZoomBounds
from ..view_math import compute_view, initial_zoom, zoom_bounds, apply_zoom_delta


@dataclass
class ViewState:
    """State for zoom/pan parameters.

    ``min_zoom <= zoom <= max_zoom`` holds after every mutation except
    :meth:`rebound`, which only moves the range.
    """
    zoom: float = 1.0
    focus: Tuple[float, float] = (0.0, 0.0)
    min_zoom: float = 0.1
    max_zoom: float = 100.0

    @property
    def bounds(self) -> ZoomBounds:
        return ZoomBounds(self.min_zoom, self.max_zoom)

    @bounds.setter
    def bounds(self, value: ZoomBounds) -> None:
        self.min_zoom = value.min_zoom
        self.max_zoom = value.max_zoom

    def view_for(self, window_size: Tuple[float, float]) -> CenteredView:
        return compute_view(window_size, self.zoom, self.focus)

    def fit(self, window_size: Tuple[float, float],
            image_size: Tuple[float, float]) -> None:
        """Reset zoom to the letterboxed fit and derive the range from it."""
        self.zoom = initial_zoom(window_size, image_size)
        self.bounds = ZoomBounds.from_initial(self.zoom)

    def rebound(self, window_size: Tuple[float, float],
                image_size: Tuple[float, float]) -> None:
        """Recompute the zoom range only; the zoom value is left as is."""
        self.bounds = zoom_bounds(window_size, image_size)

    def step_zoom(self, direction: float) -> None:
        self.zoom = apply_zoom_delta(self.zoom, direction, self.bounds)

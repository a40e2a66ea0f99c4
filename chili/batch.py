"""Render batch - the per-frame description of what to draw.

The batch is rebuilt from AppState whenever something changed and handed to
the Renderer; it holds no state across rebuilds.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from .config import FILL_COLOR
from .types import CenteredView

if TYPE_CHECKING:
    from .state import AppState

Color = Tuple[float, float, float, float]


@dataclass(frozen=True)
class DrawRect:
    """One textured (or flat) rectangle in world coordinates."""
    view: CenteredView
    texture: Any
    fill_color: Color
    position: Tuple[float, float]  # top-left corner
    size: Tuple[float, float]


@dataclass
class RenderBatch:
    """Collects draw commands using the current view/texture/color."""
    commands: List[DrawRect] = field(default_factory=list)
    view: Optional[CenteredView] = None
    texture: Any = None
    fill_color: Color = FILL_COLOR

    def clear(self) -> None:
        self.commands.clear()
        self.view = None
        self.texture = None
        self.fill_color = FILL_COLOR

    def set_view(self, view: CenteredView) -> None:
        self.view = view

    def set_texture(self, texture: Any) -> None:
        self.texture = texture

    def set_fill_color(self, color: Color) -> None:
        self.fill_color = color

    def draw_rectangle(self, position: Tuple[float, float],
                       size: Tuple[float, float]) -> None:
        if self.view is None:
            raise RuntimeError("draw_rectangle called before set_view")
        self.commands.append(DrawRect(
            view=self.view,
            texture=self.texture,
            fill_color=self.fill_color,
            position=position,
            size=size,
        ))

    def __len__(self) -> int:
        return len(self.commands)


def build_batch(state: "AppState", batch: Optional[RenderBatch] = None) -> RenderBatch:
    """Describe the current frame: one image-sized quad centered on the origin."""
    if batch is None:
        batch = RenderBatch()
    batch.clear()
    batch.set_view(state.view.view_for(state.window.size))

    w, h = state.image_size
    batch.set_texture(state.texture)
    batch.set_fill_color(FILL_COLOR)
    batch.draw_rectangle((-w / 2.0, -h / 2.0), (w, h))
    return batch

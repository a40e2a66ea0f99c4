"""Renderer - owns the raylib window and presents render batches.

The Renderer only reads the batch; it never touches AppState.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .batch import RenderBatch, DrawRect
from .config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_RESIZABLE,
    CLEAR_COLOR, TARGET_FPS, FLAG_WINDOW_RESIZABLE,
)
from .rl_compat import (
    rl, RL_VERSION, to_bytes,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    make_camera as RL_Camera,
)
from .textures import is_texture_valid
from .logging import log


@dataclass
class Renderer:
    """
    Window lifetime plus batch presentation.

    Usage:
        renderer = Renderer()
        renderer.open_window()
        renderer.present(batch, (w, h))
        renderer.close_window()
    """
    clear_color: Tuple[float, float, float, float] = CLEAR_COLOR
    window_open: bool = False

    def open_window(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT,
                    title: str = WINDOW_TITLE) -> Tuple[int, int]:
        """Create the window and GL context. Returns the actual client size."""
        log(f"[INIT] Creating window: {width}x{height} '{title}'")
        if WINDOW_RESIZABLE:
            rl.SetConfigFlags(FLAG_WINDOW_RESIZABLE)
        rl.InitWindow(width, height, to_bytes(title))
        self.window_open = True
        # Escape is handled as a key event, not by WindowShouldClose
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)
        size = (rl.GetScreenWidth(), rl.GetScreenHeight())
        log(f"[INIT] RL_VER={RL_VERSION} window={size[0]}x{size[1]}")
        return size

    def close_window(self) -> None:
        if self.window_open:
            log("[APP] Closing window")
            rl.CloseWindow()
            self.window_open = False

    def present(self, batch: RenderBatch, window_size: Tuple[int, int]) -> None:
        """Clear and draw every command in ``batch``."""
        rl.BeginDrawing()
        rl.ClearBackground(RL_Color(self.clear_color))
        for cmd in batch.commands:
            self._draw_rect(cmd, window_size)
        rl.EndDrawing()

    def _draw_rect(self, cmd: DrawRect, window_size: Tuple[int, int]) -> None:
        w, h = window_size
        camera = RL_Camera(
            offset=(w / 2.0, h / 2.0),
            target=cmd.view.center,
            zoom=w / cmd.view.size[0],
        )
        x, y = cmd.position
        rw, rh = cmd.size
        dest = RL_Rect(x, y, rw, rh)
        tint = RL_Color(cmd.fill_color)

        rl.BeginMode2D(camera)
        tex = cmd.texture
        if tex is not None and is_texture_valid(tex):
            rl.DrawTexturePro(
                tex,
                RL_Rect(0, 0, tex.width, tex.height),
                dest,
                RL_V2(0, 0), 0.0, tint
            )
        else:
            rl.DrawRectangleRec(dest, tint)
        rl.EndMode2D()

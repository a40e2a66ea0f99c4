"""Application - main loop orchestrator.

The Application class runs the host loop:
- Input → Events (via InputHandler)
- Events → State changes (via handler.handle)
- State → RenderBatch (rebuilt only when something changed)
- RenderBatch → screen (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence
import os
import sys
import traceback

from .state import AppState
from .batch import RenderBatch, build_batch
from .errors import DecodeError
from .handler import handle
from .image_utils import decode_png, placeholder
from .types import ImageSource
from .logging import log, log_error, increment_frame, get_frame


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(state, renderer, input_handler, loader)
        app.run()

    ``renderer`` needs ``present(batch, window_size)`` and ``close_window()``,
    ``input_handler`` needs ``poll()``, ``loader`` is the texture capability
    described in :mod:`chili.handler`.
    """

    state: AppState
    renderer: Any
    input_handler: Any
    loader: Any
    batch: RenderBatch = field(default_factory=RenderBatch)

    def run(self) -> None:
        """Run frames until the state stops running."""
        log("[APP] Starting main loop")
        try:
            while self.state.running:
                self.frame()
        except Exception as e:
            log_error(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log_error(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self.cleanup()

    def frame(self) -> None:
        """Execute a single frame."""
        for event in self.input_handler.poll():
            handle(event, self.state, self.loader)
            if not self.state.running:
                return

        if self.state.needs_redraw:
            build_batch(self.state, self.batch)
            self.state.needs_redraw = False

        self.renderer.present(self.batch, self.state.window.size)
        increment_frame()

    def cleanup(self) -> None:
        """Release the texture and close the window."""
        log(f"[APP] Starting cleanup frames={get_frame()}")
        image = self.state.image
        self.state.image = None
        try:
            if image is not None:
                self.loader.release(image)
        finally:
            self.renderer.close_window()
        log("[APP] Cleanup complete")


def parse_args(argv: Sequence[str]) -> Optional[str]:
    """Return the image path argument, or None for the placeholder."""
    if len(argv) > 1:
        path = os.path.abspath(argv[1])
        log(f"[ARGS] Image argument: {argv[1]} -> {path}")
        return path
    log("[ARGS] No image argument, using placeholder")
    return None


def load_startup_image(path: Optional[str]) -> ImageSource:
    """Decode the startup image. DecodeError is fatal for the caller."""
    if path is None:
        return placeholder()
    return decode_png(path)


def create_app(source: ImageSource, renderer, input_handler, loader,
               window_size=None) -> Application:
    """Bind ``source`` and build an Application with a fitted view."""
    state = AppState()
    if window_size is not None:
        state.window.resize(*window_size)
    state.attach_image(loader.bind(source))
    log(f"[INIT] image={state.image.label} size={state.image_size} "
        f"zoom={state.view.zoom:.4g} range=({state.view.min_zoom:.4g}, "
        f"{state.view.max_zoom:.4g})")
    return Application(state=state, renderer=renderer,
                       input_handler=input_handler, loader=loader)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: ``chili [image.png]``."""
    if argv is None:
        argv = sys.argv
    log("[MAIN] Starting application")

    try:
        source = load_startup_image(parse_args(argv))
    except DecodeError as e:
        log_error(f"[INIT][CRITICAL] Failed to load image: {e}")
        return 1

    from .renderer import Renderer
    from .input_handler import InputHandler
    from .textures import TextureLoader

    renderer = Renderer()
    window_size = renderer.open_window()
    try:
        app = create_app(source, renderer, InputHandler(), TextureLoader(),
                         window_size=window_size)
    except Exception:
        renderer.close_window()
        raise

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

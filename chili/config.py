"""Application configuration constants."""

from __future__ import annotations

# Window
WINDOW_WIDTH = 680
WINDOW_HEIGHT = 680
WINDOW_TITLE = "Chili"
WINDOW_RESIZABLE = True
CLEAR_COLOR = (0.2, 0.2, 0.2, 1.0)
TARGET_FPS = 60

# Zoom
ZOOM_STEP = 1.5
MIN_ZOOM_FRACTION = 0.1
MAX_ZOOM_FRACTION = 100.0

# Placeholder checkerboard (magenta, black / black, magenta)
PLACEHOLDER_PIXELS = (2, 2)
PLACEHOLDER_SIZE = (1.0, 1.0)
PLACEHOLDER_RGBA = bytes([
    255, 0, 255, 255,   0, 0, 0, 255,
    0, 0, 0, 255,       255, 0, 255, 255,
])

# Fill color for textured quads (texture passes through unmodulated)
FILL_COLOR = (1.0, 1.0, 1.0, 1.0)

# Texture filtering (GL enums, applied with rlTextureParameters)
GL_TEXTURE_MAG_FILTER = 0x2800
GL_TEXTURE_MIN_FILTER = 0x2801
GL_NEAREST = 0x2600
GL_LINEAR = 0x2601
TEXTURE_MIN_FILTER = GL_NEAREST
TEXTURE_MAG_FILTER = GL_LINEAR

# Raylib constants
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
PIXELFORMAT_UNCOMPRESSED_R8G8B8A8 = 7
FLAG_WINDOW_RESIZABLE = 0x00000004
KEY_ESCAPE = 256
MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1

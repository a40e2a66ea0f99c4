# tests/conftest.py

from types import SimpleNamespace

import pytest
from PIL import Image

from chili.app import create_app
from chili.image_utils import decode_png, placeholder
from chili.types import ImageBinding


class FakeTexture(SimpleNamespace):
    pass


class FakeLoader:
    """Texture capability that hands out numbered fake textures."""

    def __init__(self):
        self.next_id = 1
        self.bound = []
        self.released = []

    def bind(self, source):
        tex = FakeTexture(id=self.next_id, width=source.width, height=source.height)
        self.next_id += 1
        binding = ImageBinding(texture=tex, size=source.size, source=source)
        self.bound.append(binding)
        return binding

    def load(self, path):
        return self.bind(decode_png(path))

    def release(self, binding):
        self.released.append(binding)


class FakeRenderer:
    def __init__(self):
        self.presented = []
        self.closed = False

    def present(self, batch, window_size):
        self.presented.append((list(batch.commands), window_size))

    def close_window(self):
        self.closed = True


class ScriptedInput:
    """Returns one prepared event list per poll, then nothing."""

    def __init__(self, frames):
        self.frames = list(frames)

    def poll(self):
        return self.frames.pop(0) if self.frames else []


class FakeFFI:
    @staticmethod
    def string(ptr):
        return ptr

    @staticmethod
    def new(ctype, init=None):
        if ctype.endswith("[]"):
            return bytearray(init)
        return [SimpleNamespace()]


class FakeRaylib:
    """Just enough of the raylib module for InputHandler and TextureLoader."""

    def __init__(self):
        self.ffi = FakeFFI()
        self.mouse = (0.0, 0.0)
        self.wheel = (0.0, 0.0)
        self.buttons = set()
        self.keys = []
        self.resized_to = None
        self.should_close = False
        self.dropped = []
        self.unload_calls = 0
        self.upload_ok = True
        self.next_texture_id = 1
        self.uploaded = []
        self.texture_params = []
        self.unloaded = []

    def WindowShouldClose(self):
        return self.should_close

    def IsWindowResized(self):
        return self.resized_to is not None

    def GetScreenWidth(self):
        return self.resized_to[0]

    def GetScreenHeight(self):
        return self.resized_to[1]

    def GetKeyPressed(self):
        return self.keys.pop(0) if self.keys else 0

    def GetMousePosition(self):
        return SimpleNamespace(x=self.mouse[0], y=self.mouse[1])

    def GetMouseWheelMoveV(self):
        return SimpleNamespace(x=self.wheel[0], y=self.wheel[1])

    def IsMouseButtonDown(self, button):
        return button in self.buttons

    def IsFileDropped(self):
        return bool(self.dropped)

    def LoadDroppedFiles(self):
        paths = [p.encode('utf-8') for p in self.dropped]
        return SimpleNamespace(count=len(paths), paths=paths)

    def UnloadDroppedFiles(self, files):
        self.unload_calls += 1
        self.dropped = []

    def LoadTextureFromImage(self, img):
        self.uploaded.append(img)
        if not self.upload_ok:
            return FakeTexture(id=0, width=0, height=0)
        tex = FakeTexture(id=self.next_texture_id, width=img.width, height=img.height)
        self.next_texture_id += 1
        return tex

    def rlTextureParameters(self, tex_id, param, value):
        self.texture_params.append((tex_id, param, value))

    def UnloadTexture(self, tex):
        self.unloaded.append(tex.id)


def write_png(path, size, color=(10, 20, 30, 255), mode="RGBA"):
    Image.new(mode, size, color[:len(mode)]).save(path, format="PNG")
    return str(path)


@pytest.fixture
def loader():
    return FakeLoader()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def app(loader, renderer):
    """Application showing the placeholder in a 680x680 window."""
    return create_app(placeholder(), renderer, ScriptedInput([]), loader)


@pytest.fixture
def state(app):
    return app.state


@pytest.fixture
def png_200x100(tmp_path):
    return write_png(tmp_path / "wide.png", (200, 100))

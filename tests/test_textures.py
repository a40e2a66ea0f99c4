# tests/test_textures.py

import pytest

from chili.config import (
    GL_TEXTURE_MIN_FILTER, GL_TEXTURE_MAG_FILTER, GL_NEAREST, GL_LINEAR,
    PIXELFORMAT_UNCOMPRESSED_R8G8B8A8,
)
from chili.errors import DecodeError, ImageLoadError, TextureUploadError
from chili.events import FileDropped
from chili.handler import handle
from chili.image_utils import placeholder
from chili.textures import TextureLoader, is_texture_valid

from conftest import FakeRaylib


@pytest.fixture
def rl():
    return FakeRaylib()


@pytest.fixture
def textures(rl):
    return TextureLoader(backend=rl)


def test_bind_uploads_rgba_image(rl, textures):
    binding = textures.bind(placeholder())
    (img,) = rl.uploaded
    assert (img.width, img.height, img.mipmaps) == (2, 2, 1)
    assert img.format == PIXELFORMAT_UNCOMPRESSED_R8G8B8A8
    assert bytes(img.data) == placeholder().rgba
    assert is_texture_valid(binding.texture)
    assert binding.size == (1.0, 1.0)
    assert binding.is_placeholder


def test_minify_nearest_magnify_linear(rl, textures):
    binding = textures.bind(placeholder())
    tex_id = binding.texture.id
    assert rl.texture_params == [
        (tex_id, GL_TEXTURE_MIN_FILTER, GL_NEAREST),
        (tex_id, GL_TEXTURE_MAG_FILTER, GL_LINEAR),
    ]


def test_load_decodes_png(rl, textures, png_200x100):
    binding = textures.load(png_200x100)
    assert binding.size == (200.0, 100.0)
    assert binding.label == png_200x100
    assert rl.uploaded[0].width == 200


def test_load_bad_file_uploads_nothing(rl, textures, tmp_path):
    with pytest.raises(DecodeError):
        textures.load(str(tmp_path / "missing.png"))
    assert rl.uploaded == []


def test_release_unloads_texture(rl, textures):
    binding = textures.bind(placeholder())
    textures.release(binding)
    assert rl.unloaded == [binding.texture.id]


def test_upload_failure_raises_load_error(rl, textures, png_200x100):
    rl.upload_ok = False
    with pytest.raises(TextureUploadError) as exc:
        textures.load(png_200x100)
    assert isinstance(exc.value, ImageLoadError)
    assert exc.value.path == png_200x100
    assert rl.texture_params == []


def test_rejected_upload_on_drop_keeps_session(rl, textures, state, capsys, png_200x100):
    image, zoom = state.image, state.view.zoom
    state.needs_redraw = False
    rl.upload_ok = False

    assert handle(FileDropped(png_200x100), state, textures) is False

    assert state.image is image
    assert state.view.zoom == zoom
    assert rl.unloaded == []
    assert not state.needs_redraw
    assert "[DROP][ERR]" in capsys.readouterr().err

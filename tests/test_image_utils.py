# tests/test_image_utils.py

import pytest
from PIL import Image

from chili.errors import DecodeError
from chili.image_utils import (
    decode_png, placeholder, probe_png_dimensions, is_png_signature, PNG_SIGNATURE,
)

from conftest import write_png


def test_decode_rgba_png(tmp_path):
    path = write_png(tmp_path / "red.png", (3, 2), color=(255, 0, 0, 128))
    img = decode_png(path)
    assert img.pixel_size == (3, 2)
    assert img.size == (3.0, 2.0)
    assert img.path == path
    assert len(img.rgba) == 3 * 2 * 4
    assert img.rgba[:4] == bytes([255, 0, 0, 128])


@pytest.mark.parametrize("mode,color", [
    ("RGB", (0, 255, 0)),
    ("L", 200),
    ("P", 5),
])
def test_decode_converts_to_rgba(tmp_path, mode, color):
    path = tmp_path / f"{mode}.png"
    Image.new(mode, (4, 5), color).save(path, format="PNG")
    img = decode_png(str(path))
    assert img.pixel_size == (4, 5)
    assert len(img.rgba) == 4 * 5 * 4
    assert img.rgba[3] == 255


def test_decode_accepts_pathlike(tmp_path):
    path = tmp_path / "p.png"
    write_png(path, (1, 1))
    assert decode_png(path).pixel_size == (1, 1)


def test_missing_file(tmp_path):
    with pytest.raises(DecodeError) as exc:
        decode_png(str(tmp_path / "nope.png"))
    assert exc.value.path.endswith("nope.png")
    assert "cannot read file" in str(exc.value)


def test_directory_is_rejected(tmp_path):
    with pytest.raises(DecodeError):
        decode_png(str(tmp_path))


def test_jpeg_is_rejected(tmp_path):
    path = tmp_path / "photo.png"
    Image.new("RGB", (8, 8)).save(path, format="JPEG")
    with pytest.raises(DecodeError, match="not a PNG file"):
        decode_png(str(path))


def test_truncated_png_is_rejected(tmp_path):
    good = write_png(tmp_path / "good.png", (64, 64), color=(1, 2, 3, 4))
    data = open(good, "rb").read()
    bad = tmp_path / "truncated.png"
    bad.write_bytes(data[:40])
    with pytest.raises(DecodeError, match="invalid PNG data"):
        decode_png(str(bad))


def test_probe_png_dimensions(tmp_path):
    path = write_png(tmp_path / "dims.png", (640, 17))
    header = open(path, "rb").read(24)
    assert is_png_signature(header)
    assert probe_png_dimensions(header) == (640, 17)
    assert probe_png_dimensions(PNG_SIGNATURE) is None
    assert probe_png_dimensions(b"GIF89a" + b"\0" * 30) is None


def test_placeholder_checkerboard():
    ph = placeholder()
    assert ph.pixel_size == (2, 2)
    assert ph.size == (1.0, 1.0)
    magenta, black = bytes([255, 0, 255, 255]), bytes([0, 0, 0, 255])
    assert ph.rgba == magenta + black + black + magenta

import io

import pytest
from PIL import Image

from identicon_server.core.errors import EncodingFailure
from identicon_server.schemas.render import ImageFormat, RenderParameters
from identicon_server.services.encoder import encode
from identicon_server.services.identicon import generate_identicon
from identicon_server.services.renderer import fill_color


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_formats_decode_at_canvas_size(fmt: ImageFormat) -> None:
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    decoded = Image.open(io.BytesIO(encode(img, fmt)))
    assert decoded.format == fmt.value
    assert decoded.size == (64, 64)


def test_jpeg_drops_alpha() -> None:
    img = Image.new("RGBA", (16, 16), (0, 0, 0, 0))
    decoded = Image.open(io.BytesIO(encode(img, ImageFormat.JPEG)))
    assert decoded.mode == "RGB"


def test_unwritable_canvas_is_internal_error() -> None:
    with pytest.raises(EncodingFailure):
        encode(Image.new("CMYK", (8, 8)), ImageFormat.PNG)


@pytest.mark.parametrize(
    "extension, fmt",
    [
        ("png", ImageFormat.PNG),
        ("bmp", ImageFormat.BMP),
        ("jpeg", ImageFormat.JPEG),
        ("ico", ImageFormat.ICO),
        ("jpg", ImageFormat.PNG),
        ("PNG", ImageFormat.PNG),
        ("gif", ImageFormat.PNG),
    ],
)
def test_format_from_extension(extension: str, fmt: ImageFormat) -> None:
    assert ImageFormat.from_extension(extension) is fmt


def test_generate_identicon_colors_from_digest(alice_digest: bytes) -> None:
    data = generate_identicon("alice", RenderParameters())
    img = Image.open(io.BytesIO(data))
    assert img.size == (200, 200)
    colors = {color for _, color in img.getcolors()}
    assert fill_color(alice_digest) in colors


def test_generate_identicon_is_case_sensitive() -> None:
    assert generate_identicon("alice", RenderParameters()) != generate_identicon("Alice", RenderParameters())

"""Identicon rasterisation.

The first three digest bytes give the fill colour. Every remaining byte is
read as eight booleans, least significant bit first, and each boolean decides
whether the next grid cell is painted.
"""
from typing import Iterable, Iterator, Tuple

from PIL import Image, ImageDraw

from ..core.errors import BitStreamExhausted
from ..schemas.render import RenderParameters

Color = Tuple[int, int, int, int]

COLOR_BYTES = 3
TRANSPARENT: Color = (0, 0, 0, 0)


def fill_color(digest: bytes) -> Color:
    r, g, b = digest[:COLOR_BYTES]
    return (r, g, b, 255)


def iter_bits(data: Iterable[int]) -> Iterator[bool]:
    for byte in data:
        for shift in range(8):
            yield (byte >> shift) & 1 == 1


def fill_square(img: Image.Image, x: int, y: int, side: int, color: Color) -> None:
    # Pixels are replaced, not blended; the box is inclusive on both ends
    ImageDraw.Draw(img).rectangle([x, y, x + side - 1, y + side - 1], fill=color)


def render_grid(params: RenderParameters, digest: bytes) -> Image.Image:
    """Paint the identicon for ``digest`` onto a fresh transparent canvas.

    With symmetry on only the left half of the columns consumes bits and each
    painted cell is mirrored about the canvas centre. Both loops start at the
    padding offset but stop at the unpadded resolution, which is what keeps
    existing images stable when padding is added.
    """
    size = params.canvas_size
    cell = params.cell_size
    color = fill_color(digest)
    bits = iter_bits(digest[COLOR_BYTES:])

    if params.symmetrical:
        stop = int(params.resolution - cell * params.grid_size * 0.5)
    else:
        stop = params.resolution

    img = Image.new("RGBA", (size, size), TRANSPARENT)
    for cy in range(params.padding, params.resolution, cell):
        for cx in range(params.padding, stop, cell):
            try:
                bit = next(bits)
            except StopIteration:
                raise BitStreamExhausted(
                    f"{len(digest)}-byte digest ran out of bits for grid size {params.grid_size}"
                ) from None
            if bit:
                fill_square(img, cx, cy, cell, color)
                if params.symmetrical:
                    fill_square(img, size - cx - cell, cy, cell, color)
    return img

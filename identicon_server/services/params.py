"""Query and path handling for identicon requests.

Query values are parsed leniently: anything that is not a valid value counts
as absent and the default is used. Validation then runs in a fixed order so
the most specific problem is the one reported.
"""
import logging
import math
import re
from typing import Optional, Tuple

from ..core.config import get_settings
from ..core.errors import (
    CellSizeZero,
    ContainerSizeExceeded,
    GridSizeOutOfRange,
    MissingIdentifier,
    PaddingTooLarge,
    ResolutionNotDivisible,
    ResolutionTooLarge,
)
from ..schemas.render import ImageFormat, RenderParameters
from .digest import select_digest

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 5
DEFAULT_PADDING = 0
DEFAULT_RESOLUTION = 200
DEFAULT_EXTENSION = "png"
MAX_RESOLUTION = 1000
MAX_ICO_SIZE = 256

_UINT_RE = re.compile(r"\+?[0-9]+")
_UINT_MAX = 2**32 - 1


def parse_int(raw: Optional[str], default: int) -> int:
    if raw is None or not _UINT_RE.fullmatch(raw):
        return default
    value = int(raw)
    if value > _UINT_MAX:
        return default
    return value


def parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return default


def closest_multiple(n: int, m: int) -> int:
    """Multiple of ``m`` nearest to ``n``; halves round away from zero."""
    quotient = n / m
    rounded = math.floor(abs(quotient) + 0.5)
    return int(math.copysign(rounded, quotient)) * m


def split_filename(path: str) -> Tuple[str, str]:
    """Return (stem, extension) of the last path segment.

    The split is at the last dot, so ``alice.`` has an empty extension and
    ``.png`` is a stem with no extension. A missing extension defaults to
    ``png``; a missing name (``/`` or ``..``) gives an empty stem.
    """
    segments = [s for s in path.split("/") if s and s != "."]
    name = segments[-1] if segments else ""
    if name in ("", ".."):
        return "", DEFAULT_EXTENSION
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name, DEFAULT_EXTENSION
    return stem, extension


def resolve_parameters(
    path: str,
    size: Optional[str] = None,
    pad: Optional[str] = None,
    res: Optional[str] = None,
    sym: Optional[str] = None,
) -> Tuple[str, RenderParameters]:
    name, extension = split_filename(path)
    grid_size = parse_int(size, DEFAULT_GRID_SIZE)
    padding = parse_int(pad, DEFAULT_PADDING)
    symmetrical = parse_bool(sym, True)

    if not name:
        raise MissingIdentifier()

    # Without this the default resolution and the divisibility rule divide by zero
    if grid_size == 0:
        raise GridSizeOutOfRange()

    resolution = parse_int(res, closest_multiple(DEFAULT_RESOLUTION, grid_size))
    params = RenderParameters(
        grid_size=grid_size,
        padding=padding,
        resolution=resolution,
        symmetrical=symmetrical,
        extension=extension,
    )

    if resolution % grid_size != 0:
        raise ResolutionNotDivisible(closest_multiple(resolution, grid_size))

    if resolution > MAX_RESOLUTION:
        raise ResolutionTooLarge()

    if params.canvas_size > MAX_ICO_SIZE and params.format is ImageFormat.ICO:
        raise ContainerSizeExceeded()

    max_padding = get_settings().max_padding
    if padding > max_padding:
        raise PaddingTooLarge(max_padding)

    if params.cell_size == 0:
        raise CellSizeZero()

    select_digest(grid_size)

    logger.debug("Resolved %r to %s", name, params)
    return name, params

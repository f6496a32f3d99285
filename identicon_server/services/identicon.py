import logging

from ..schemas.render import RenderParameters
from .digest import select_digest
from .encoder import encode
from .renderer import render_grid

logger = logging.getLogger(__name__)


def generate_identicon(name: str, params: RenderParameters) -> bytes:
    """Render ``name`` with already validated parameters and encode it.

    The name is hashed as UTF-8 exactly as given, so the output is case
    sensitive and identical for identical input.
    """
    algorithm = select_digest(params.grid_size)
    digest = algorithm.digest(name.encode())
    img = render_grid(params, digest)
    data = encode(img, params.format)
    logger.debug("Rendered %r with %s: %d bytes of %s", name, algorithm.value, len(data), params.format.value)
    return data

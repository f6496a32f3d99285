import io

from PIL import Image

from ..core.errors import EncodingFailure
from ..schemas.render import ImageFormat


def encode(img: Image.Image, fmt: ImageFormat) -> bytes:
    options = {}
    if fmt is ImageFormat.JPEG:
        # JPEG has no alpha; transparent pixels come out black
        img = img.convert("RGB")
    elif fmt is ImageFormat.ICO:
        # Pillow otherwise only writes its stock sizes below the canvas size
        options["sizes"] = [img.size]

    buffer = io.BytesIO()
    try:
        img.save(buffer, format=fmt.value, **options)
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"Unable to write {img.size[0]}x{img.size[1]} canvas as {fmt.value}: {e}") from e
    return buffer.getvalue()

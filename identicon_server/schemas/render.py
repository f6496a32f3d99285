from dataclasses import dataclass
from enum import Enum


class ImageFormat(Enum):
    # Values are Pillow format names
    PNG = "PNG"
    BMP = "BMP"
    JPEG = "JPEG"
    ICO = "ICO"

    @classmethod
    def from_extension(cls, extension: str) -> "ImageFormat":
        """Map a literal file extension to a container; anything unknown is PNG.

        Matching is exact: ``jpg`` or ``PNG`` fall back to PNG like any other
        unrecognised extension.
        """
        return _EXTENSIONS.get(extension, cls.PNG)


_EXTENSIONS = {
    "png": ImageFormat.PNG,
    "bmp": ImageFormat.BMP,
    "jpeg": ImageFormat.JPEG,
    "ico": ImageFormat.ICO,
}


@dataclass(frozen=True)
class RenderParameters:
    grid_size: int = 5
    padding: int = 0
    resolution: int = 200
    symmetrical: bool = True
    extension: str = "png"

    @property
    def format(self) -> ImageFormat:
        return ImageFormat.from_extension(self.extension)

    @property
    def cell_size(self) -> int:
        return self.resolution // self.grid_size

    @property
    def canvas_size(self) -> int:
        return self.resolution + self.padding * 2

    @property
    def media_type(self) -> str:
        return f"image/{self.extension}"

import hashlib
from enum import Enum

from ..core.errors import GridSizeOutOfRange


class DigestAlgorithm(Enum):
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.value).digest_size

    def digest(self, data: bytes) -> bytes:
        return hashlib.new(self.value, data).digest()


def select_digest(grid_size: int) -> DigestAlgorithm:
    """Pick the hash whose output covers a grid of ``grid_size`` cells per side.

    Three bytes go to the fill colour and every drawn column needs one bit per
    row. The buckets are fixed: changing them changes every generated image.
    """
    if 1 <= grid_size <= 13:
        return DigestAlgorithm.SHA224
    if grid_size == 14:
        return DigestAlgorithm.SHA256
    if 15 <= grid_size <= 18:
        return DigestAlgorithm.SHA384
    if 19 <= grid_size <= 21:
        return DigestAlgorithm.SHA512
    raise GridSizeOutOfRange()

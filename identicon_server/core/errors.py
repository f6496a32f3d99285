"""Errors raised while turning a request into an identicon.

`RequestError` subclasses describe bad input and are answered with a short
plain-text 4xx response. `InternalError` subclasses mean the service itself is
broken (a bad digest table, an encoder that refuses a valid canvas); they are
never turned into a 4xx and propagate as a 500.
"""
from typing import Dict, Optional


class IdenticonError(Exception):
    pass


class RequestError(IdenticonError):
    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.message
        self.headers = headers or {}
        super().__init__(self.message)


class MissingIdentifier(RequestError):
    status_code = 404
    message = "No name was provided"


class MethodNotAllowed(RequestError):
    status_code = 405
    message = "Only GET requests are supported"


class ResolutionNotDivisible(RequestError):
    message = "The resolution must be evenly divisible by the size"

    def __init__(self, recommended: int):
        self.recommended = recommended
        super().__init__(headers={"X-Recommended-Size": str(recommended)})


class ResolutionTooLarge(RequestError):
    message = "Resolution cannot exceed 1000"


class ContainerSizeExceeded(RequestError):
    message = "ICO size (pad * 2 + res) must be in range 1-256"


class PaddingTooLarge(RequestError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Padding cannot exceed {limit}")


class CellSizeZero(RequestError):
    message = "Grid size cannot be larger than resolution"


class GridSizeOutOfRange(RequestError):
    message = "Grid size must be in range 1-21"


class InternalError(IdenticonError):
    pass


class EncodingFailure(InternalError):
    pass


class BitStreamExhausted(InternalError):
    pass

"""Image conversion exports."""

from .codec import DEFAULT_QUALITY, EncodedImage, WebpImageCodec
from .exceptions import DecodeError

__all__ = [
    "DEFAULT_QUALITY",
    "DecodeError",
    "EncodedImage",
    "WebpImageCodec",
]

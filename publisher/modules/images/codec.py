"""Pillow based conversion of uploaded images to the web format."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from .exceptions import DecodeError

logger = logging.getLogger(__name__)

DEFAULT_QUALITY = 80

# Modes WebP can encode without losing transparency.
_WEBP_MODES = {"RGB", "RGBA"}


@dataclass(frozen=True, slots=True)
class EncodedImage:
    data: bytes
    format: str
    source_format: str
    width: int
    height: int

    @property
    def extension(self) -> str:
        return self.format.lower()


class WebpImageCodec:
    """Converts any raster image Pillow can read into lossy WebP."""

    format = "WEBP"
    extension = "webp"

    def __init__(self, quality: int = DEFAULT_QUALITY) -> None:
        if not 0 <= quality <= 100:
            raise ValueError(f"quality must be between 0 and 100, got {quality}")
        self.quality = quality

    def encode(self, raw: bytes) -> EncodedImage:
        if not raw:
            raise DecodeError("Image data is empty")

        try:
            with io.BytesIO(raw) as buffer:
                img = Image.open(buffer)
                img.load()
                source_format = (img.format or "unknown").lower()
                width, height = img.size
                img = _to_webp_mode(img)

                out_buffer = io.BytesIO()
                img.save(out_buffer, format=self.format, quality=self.quality)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
            raise DecodeError("Image could not be decoded", details=str(exc)) from exc

        data = out_buffer.getvalue()
        logger.debug(
            "Encoded %s %sx%s image to %s (%d -> %d bytes)",
            source_format,
            width,
            height,
            self.format,
            len(raw),
            len(data),
        )
        return EncodedImage(
            data=data,
            format=self.format,
            source_format=source_format,
            width=width,
            height=height,
        )


def _to_webp_mode(img: Image.Image) -> Image.Image:
    if img.mode in _WEBP_MODES:
        return img
    if img.mode in ("P", "LA", "PA") or "transparency" in img.info:
        return img.convert("RGBA")
    return img.convert("RGB")

"""Tests for WebP image conversion."""

import io

import pytest
from PIL import Image

from publisher.modules.images import DecodeError, WebpImageCodec

from .conftest import create_test_image


def _open(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


class TestWebpImageCodec:
    def test_png_to_webp(self) -> None:
        encoded = WebpImageCodec().encode(create_test_image(40, 30))

        assert encoded.data[:4] == b"RIFF"
        assert encoded.data[8:12] == b"WEBP"
        assert encoded.format == "WEBP"
        assert encoded.extension == "webp"
        assert encoded.source_format == "png"
        assert (encoded.width, encoded.height) == (40, 30)
        assert _open(encoded.data).size == (40, 30)

    def test_jpeg_source_detected(self) -> None:
        encoded = WebpImageCodec().encode(create_test_image(fmt="JPEG"))

        assert encoded.source_format == "jpeg"
        assert _open(encoded.data).format == "WEBP"

    def test_alpha_is_kept(self) -> None:
        img = Image.new("RGBA", (10, 10), (255, 0, 0, 128))
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")

        encoded = WebpImageCodec().encode(buffer.getvalue())

        assert _open(encoded.data).mode == "RGBA"

    def test_palette_image(self) -> None:
        img = Image.new("P", (10, 10), 3)
        buffer = io.BytesIO()
        img.save(buffer, format="GIF")

        encoded = WebpImageCodec().encode(buffer.getvalue())

        assert encoded.source_format == "gif"
        assert _open(encoded.data).format == "WEBP"

    def test_lower_quality_is_smaller(self) -> None:
        noise = Image.effect_noise((128, 128), 80).convert("RGB")
        buffer = io.BytesIO()
        noise.save(buffer, format="PNG")
        raw = buffer.getvalue()

        high = WebpImageCodec(quality=95).encode(raw)
        low = WebpImageCodec(quality=10).encode(raw)

        assert len(low.data) < len(high.data)

    def test_default_quality(self) -> None:
        assert WebpImageCodec().quality == 80

    @pytest.mark.parametrize("raw", [b"", b"not an image at all", b"\x89PNG\r\n\x1a\nbroken"])
    def test_undecodable_input(self, raw: bytes) -> None:
        with pytest.raises(DecodeError):
            WebpImageCodec().encode(raw)

    @pytest.mark.parametrize("quality", [-1, 101])
    def test_quality_bounds(self, quality: int) -> None:
        with pytest.raises(ValueError):
            WebpImageCodec(quality=quality)

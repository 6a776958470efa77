"""Image conversion exceptions."""

from publisher.core.exceptions import PublishingError


class DecodeError(PublishingError):
    """Raised when the submitted bytes are not a recognised raster image."""

"""Feature modules and their public exports."""

from . import images, publishing, store

__all__ = [
    "images",
    "publishing",
    "store",
]

"""Remote content store exports."""

from .exceptions import ConflictError, StoreError
from .github import GitHubContentStore
from .models import ContentEntry
from .repository import ContentStore

__all__ = [
    "ConflictError",
    "ContentEntry",
    "ContentStore",
    "GitHubContentStore",
    "StoreError",
]

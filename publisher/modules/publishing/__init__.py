"""Project publishing domain exports."""

from .markdown import build_markdown
from .models import CommitResult, ProjectSubmission, PublishStage, ResolvedImage, ResolvedPaths
from .paths import PathResolver, slugify_category
from .service import PublishingService

__all__ = [
    "CommitResult",
    "PathResolver",
    "ProjectSubmission",
    "PublishStage",
    "PublishingService",
    "ResolvedImage",
    "ResolvedPaths",
    "build_markdown",
    "slugify_category",
]

"""Markdown document generation for published project images."""

from __future__ import annotations

from datetime import date
from typing import Optional

from .models import ProjectSubmission

FRONTMATTER_DELIMITER = "---"


def format_publish_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def build_markdown(submission: ProjectSubmission, index: int, image_url: str) -> str:
    """Build the markdown document for the image at 0-based ``index``.

    Values are written as-is: quotes or delimiter lines inside a field are not
    escaped, so the form must not submit them.
    """
    lines: list[str] = [
        FRONTMATTER_DELIMITER,
        f'title: "{submission.title}"',
    ]
    if submission.subtitle and submission.subtitle.strip():
        lines.append(f'subtitle: "{submission.subtitle}"')
    lines.extend(
        [
            f"category: {submission.category}",
            f"publishDate: {format_publish_date(submission.publish_date)}",
            f"img: {image_url}",
            f'img_alt: "{submission.image_alts[index]}"',
            "tags:",
        ]
    )
    lines.extend(f"  - {tag}" for tag in submission.tags)
    lines.extend([FRONTMATTER_DELIMITER, "", submission.description])
    return "\n".join(lines)

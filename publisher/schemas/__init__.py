"""Pydantic schemas used across the project."""
from __future__ import annotations

import base64
import binascii
import re
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from publisher.core.exceptions import ValidationError
from publisher.modules.publishing import ProjectSubmission, PublishStage

DATA_URI_PREFIX = re.compile(r"^data:[\w/+.-]+;base64,", re.IGNORECASE)
_DATE_PREFIX = re.compile(r"^\s*(\d{4}-\d{2}-\d{2})")


def decode_image(value: str, index: int) -> bytes:
    """Decode a base64 image, dropping an optional data-URI prefix."""
    payload = DATA_URI_PREFIX.sub("", value.strip())
    payload = "".join(payload.split())
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError(
            f"Image {index} is not valid base64",
            details=str(exc),
            stage=PublishStage.VALIDATING.value,
            index=index,
        ) from exc


class CreateMarkdownRequest(BaseModel):
    """Body of ``POST /create-md`` as sent by the admin form."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    subtitle: Optional[str] = None
    category: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    image_names: list[str] = Field(default_factory=list, alias="imageNames")
    img_alts: list[str] = Field(default_factory=list, alias="imgAlts")
    publish_date: Optional[date] = Field(default=None, alias="publishDate")
    images: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Union[str, list, None]) -> list:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]

    @field_validator("publish_date", mode="before")
    @classmethod
    def _strip_time(cls, value: object) -> object:
        if isinstance(value, str):
            if not value.strip():
                return None
            match = _DATE_PREFIX.match(value)
            if match:
                return match.group(1)
        return value

    @field_validator("title", "category", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_submission(self) -> ProjectSubmission:
        return ProjectSubmission(
            title=self.title.strip(),
            subtitle=self.subtitle.strip() if self.subtitle and self.subtitle.strip() else None,
            category=self.category.strip(),
            description=self.description,
            tags=list(self.tags),
            publish_date=self.publish_date,
            images=[decode_image(value, position) for position, value in enumerate(self.images, start=1)],
            image_alts=list(self.img_alts),
            image_names=list(self.image_names),
        )


class CreateMarkdownResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    files: list[str]
    assets_path: str = Field(alias="assetsPath")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    stage: Optional[str] = None
    index: Optional[int] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ConfigStatusResponse(BaseModel):
    github_token: bool
    github_owner: bool
    github_repo: bool
    github_branch: bool

"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from publisher.core.exceptions import ConfigurationError


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class GitHubSettings(BaseSettings):
    """Target repository and credentials for the GitHub contents API.

    Reads ``GITHUB_TOKEN``, ``GITHUB_OWNER``, ``GITHUB_REPO`` and
    ``GITHUB_BRANCH`` directly. Nested ``GITHUB__*`` variables on the parent
    settings override those plain names; fields not given in nested form still
    fall back to them.
    ``repo`` may also be given as ``owner/name``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    token: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    branch: Optional[str] = "main"
    api_url: str = "https://api.github.com"
    api_version: str = "2022-11-28"
    timeout: float = Field(default=30.0, gt=0)

    @property
    def repository_owner(self) -> Optional[str]:
        if self.owner:
            return self.owner
        if self.repo and "/" in self.repo:
            return self.repo.split("/", 1)[0]
        return None

    @property
    def repository_name(self) -> Optional[str]:
        if self.repo and "/" in self.repo:
            return self.repo.split("/", 1)[1]
        return self.repo

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.token:
            missing.append("token")
        if not self.repository_owner:
            missing.append("owner")
        if not self.repository_name:
            missing.append("repo")
        if not self.branch:
            missing.append("branch")
        return missing

    def ensure_complete(self) -> None:
        missing = self.missing_fields()
        if not missing:
            return
        if "token" in missing:
            raise ConfigurationError(
                "GitHub token not configured",
                details=f"missing settings: {', '.join(missing)}",
            )
        raise ConfigurationError(
            "GitHub repository configuration missing",
            details=f"missing settings: {', '.join(missing)}",
        )


class PublishingSettings(BaseModel):
    assets_root: str = "public/assets"
    assets_url_prefix: str = "/assets"
    content_root: str = "src/content"
    content_type: str = "work"
    file_prefix: str = "PG"
    image_format: Literal["webp"] = "webp"
    image_quality: int = Field(default=80, ge=0, le=100)
    create_category_directory: bool = False

    @property
    def markdown_directory(self) -> str:
        return f"{self.content_root.strip('/')}/{self.content_type.strip('/')}"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Portfolio Publisher"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    server: ServerSettings = ServerSettings()
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    publishing: PublishingSettings = PublishingSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()

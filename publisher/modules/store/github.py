"""GitHub contents API implementation of the content store."""

from __future__ import annotations

import base64
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from publisher.core.config import GitHubSettings

from .exceptions import ConflictError, StoreError
from .models import ContentEntry

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    return "/".join(segment for segment in path.strip().split("/") if segment)


class GitHubContentStore:
    """Reads and writes single files on one branch of a GitHub repository.

    Every method performs exactly one HTTP request; nothing is retried.
    """

    def __init__(
        self,
        *,
        owner: str,
        repo: str,
        branch: str,
        token: str,
        api_url: str = "https://api.github.com",
        api_version: str = "2022-11-28",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self._client = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": api_version,
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: GitHubSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GitHubContentStore":
        settings.ensure_complete()
        return cls(
            owner=settings.repository_owner,
            repo=settings.repository_name,
            branch=settings.branch,
            token=settings.token,
            api_url=settings.api_url,
            api_version=settings.api_version,
            timeout=settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubContentStore":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def exists(self, path: str) -> ContentEntry | None:
        path = normalize_path(path)
        response = await self._request("GET", path, params={"ref": self.branch})
        if response.status_code == 404:
            return None
        if response.is_error:
            raise _store_error(response, f"Failed to read {path}", path)

        payload = response.json()
        if isinstance(payload, list):
            return ContentEntry(path=path, kind="dir")
        kind = "dir" if payload.get("type") == "dir" else "file"
        return ContentEntry(path=path, kind=kind, sha=payload.get("sha"))

    async def put_file(
        self,
        path: str,
        content: bytes,
        message: str,
        sha: Optional[str] = None,
    ) -> None:
        path = normalize_path(path)
        body: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
            "branch": self.branch,
        }
        if sha:
            body["sha"] = sha

        response = await self._request("PUT", path, json=body)
        if response.status_code == 409:
            raise _store_error(response, f"Conflicting update for {path}", path, ConflictError)
        if response.is_error:
            raise _store_error(response, f"Failed to write {path}", path)
        logger.debug("Committed %s (%d bytes, %s)", path, len(content), "update" if sha else "create")

    def _contents_url(self, path: str) -> str:
        return f"/repos/{quote(self.owner)}/{quote(self.repo)}/contents/{quote(path)}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._contents_url(path)
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise StoreError(f"GitHub request timed out for {path}", details=str(exc) or None, path=path) from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"GitHub request failed for {path}", details=str(exc) or None, path=path) from exc


def _store_error(
    response: httpx.Response,
    message: str,
    path: str,
    error_cls: type[StoreError] = StoreError,
) -> StoreError:
    detail = _error_detail(response)
    logger.error("GitHub %s %s -> %s: %s", response.request.method, path, response.status_code, detail)
    return error_cls(message, details=detail, status_code=response.status_code, path=path)


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return f"{response.status_code}: {payload['message']}"
    text = response.text.strip()
    return f"{response.status_code}: {text[:200]}" if text else str(response.status_code)

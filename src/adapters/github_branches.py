"""GitHub "get a branch" client.

Uses the official GitHub API
(https://docs.github.com/en/rest/branches/branches#get-a-branch) to read the
head commit of a branch. Pure I/O, hence it lives in adapters.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import DecodeError, FetchError
from core.domain.models import BranchResponse

logger = logging.getLogger(__name__)

GITHUB_HEADERS = {
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
}


class GitHubBranchSource:
    """Revision source backed by the head of a GitHub branch."""

    def __init__(
        self,
        owner: str = "NixOS",
        repo: str = "nixpkgs",
        branch: str = "master",
        *,
        settings: AppSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        base = self._settings.api_base_url.rstrip("/")
        return f"{base}/repos/{self.owner}/{self.repo}/branches/{self.branch}"

    def latest_revision(self) -> str:
        url = self.url
        logger.debug("GET %s", url)
        try:
            with build_client(
                self._settings,
                extra_headers=GITHUB_HEADERS,
                transport=self._transport,
            ) as client:
                resp = client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(f"request to {url} failed: {exc}") from exc

        logger.debug("GitHub answered HTTP %s", resp.status_code)
        if not resp.is_success:
            raise FetchError(
                f"GitHub API responded with HTTP {resp.status_code}: {_error_message(resp)}",
                status_code=resp.status_code,
            )

        try:
            branch = BranchResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"unexpected response from {url}: {exc}") from exc
        return branch.commit.sha


def _error_message(resp: httpx.Response) -> str:
    # GitHub errors carry {"message": "...", "documentation_url": "..."}
    try:
        data = resp.json()
    except ValueError:
        return resp.reason_phrase or "no details"
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return resp.reason_phrase or "no details"


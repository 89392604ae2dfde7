"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- The GitHub response is validated at the edge: a missing `commit.sha` fails
  here instead of surfacing later as an empty string.
- `BumpResult` records what a bump did without the CLI inspecting files.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class BranchCommit(BaseModel):
    """Head commit of a branch as returned by `GET /repos/{owner}/{repo}/branches/{branch}`."""

    model_config = ConfigDict(extra="ignore")

    sha: str = Field(
        ...,
        min_length=1,
        pattern=r"^[0-9a-fA-F]+$",
        description="Commit identifier (hex).",
    )


class BranchResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(
        default=None,
        description="Branch name echoed back by the API.",
    )
    commit: BranchCommit = Field(
        ...,
        description="Head commit of the branch.",
    )


class BumpResult(BaseModel):
    """Outcome of a bump on a single target file."""

    path: Path = Field(..., description="File that was checked.")
    previous: str = Field(..., min_length=1, description="Revision pinned before the bump.")
    latest: str = Field(..., min_length=1, description="Revision pinned after the bump.")
    changed: bool = Field(
        default=False,
        description="True when the file content was rewritten.",
    )

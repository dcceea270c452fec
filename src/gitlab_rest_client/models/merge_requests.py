"""Merge request models."""

from __future__ import annotations

from .base import GitLabModel
from .common import Diff, Milestone, User


class MergeRequest(GitLabModel):
    id: int
    iid: int
    project_id: int | None = None
    title: str = ""
    description: str | None = None
    state: str = ""
    merged_at: str | None = None
    created_at: str = ""
    updated_at: str = ""
    source_branch: str = ""
    target_branch: str = ""
    author: User | None = None
    assignee: User | None = None
    assignees: list[User] = []
    milestone: Milestone | None = None
    merge_status: str = ""
    sha: str | None = None
    merge_commit_sha: str | None = None
    web_url: str = ""


class MergeRequestChanges(MergeRequest):
    changes: list[Diff] = []
    overflow: bool = False

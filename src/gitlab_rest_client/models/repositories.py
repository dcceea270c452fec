"""Repository models: commits and tags."""

from __future__ import annotations

from .base import GitLabModel


class Commit(GitLabModel):
    id: str = ""
    short_id: str = ""
    title: str = ""
    message: str = ""
    author_name: str = ""
    author_email: str = ""
    authored_date: str = ""
    committer_name: str = ""
    committer_email: str = ""
    committed_date: str = ""
    created_at: str = ""
    parent_ids: list[str] = []
    web_url: str = ""


class TagRelease(GitLabModel):
    tag_name: str = ""
    description: str | None = None


class Tag(GitLabModel):
    name: str = ""
    message: str | None = None
    target: str = ""
    commit: Commit | None = None
    release: TagRelease | None = None
    protected: bool = False

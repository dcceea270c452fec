"""Common GitLab models shared across domains."""

from __future__ import annotations

from .base import GitLabModel


class User(GitLabModel):
    id: int
    username: str = ""
    name: str = ""
    state: str = ""
    avatar_url: str | None = None
    web_url: str = ""


class Member(User):
    access_level: int = 0
    expires_at: str | None = None


class Namespace(GitLabModel):
    id: int
    name: str = ""
    path: str = ""
    kind: str = ""
    full_path: str = ""


class Milestone(GitLabModel):
    id: int
    iid: int | None = None
    project_id: int | None = None
    group_id: int | None = None
    title: str = ""
    description: str | None = None
    state: str = ""
    due_date: str | None = None
    start_date: str | None = None
    web_url: str = ""


class Diff(GitLabModel):
    old_path: str = ""
    new_path: str = ""
    a_mode: str | None = None
    b_mode: str | None = None
    diff: str = ""
    new_file: bool = False
    renamed_file: bool = False
    deleted_file: bool = False

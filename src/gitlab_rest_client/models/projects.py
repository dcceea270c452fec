"""Project models."""

from __future__ import annotations

from .base import GitLabModel
from .common import Namespace


class Project(GitLabModel):
    id: int
    name: str = ""
    name_with_namespace: str = ""
    path: str = ""
    path_with_namespace: str = ""
    description: str | None = None
    default_branch: str | None = None
    web_url: str = ""
    namespace: Namespace | None = None
    visibility: str = ""
    archived: bool = False

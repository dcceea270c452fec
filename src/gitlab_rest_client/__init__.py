"""Typed client for a subset of the GitLab REST API v4."""

from .client import GitLabClient
from .config import DEFAULT_BASE_URL, GitLabConfig
from .exceptions import (
    GitLabApiError,
    GitLabConfigurationError,
    GitLabDecodeError,
    GitLabError,
    GitLabNotFoundError,
)
from .models.common import Diff, Member, Milestone, Namespace, User
from .models.issues import Issue
from .models.merge_requests import MergeRequest, MergeRequestChanges
from .models.projects import Project
from .models.repositories import Commit, Tag, TagRelease

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "Commit",
    "Diff",
    "GitLabApiError",
    "GitLabClient",
    "GitLabConfig",
    "GitLabConfigurationError",
    "GitLabDecodeError",
    "GitLabError",
    "GitLabNotFoundError",
    "Issue",
    "Member",
    "MergeRequest",
    "MergeRequestChanges",
    "Milestone",
    "Namespace",
    "Project",
    "Tag",
    "TagRelease",
    "User",
    "__version__",
]

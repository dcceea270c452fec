"""Resource path segments for the GitLab REST API v4.

Each builder returns a path relative to the API root. Builders compose by
plain concatenation, e.g. ``project_path(42) + merge_requests_path(7)`` gives
``projects/42/merge_requests/7/``. Trailing slashes are part of the wire
contract and must not be normalised away.
"""

from __future__ import annotations

from urllib.parse import quote


def encode_id(value: str | int) -> str:
    """Encode an identifier for a path segment. Numeric IDs pass through; paths and names are URL-encoded."""
    if isinstance(value, bool):
        raise TypeError(f"Expected an ID or path, got bool: {value!r}")
    if isinstance(value, int):
        return str(value)
    return quote(value, safe="")


def project_path(project_id: str | int) -> str:
    return f"projects/{encode_id(project_id)}/"


def group_path(group_id: str | int) -> str:
    return f"groups/{encode_id(group_id)}/"


def issues_path() -> str:
    return "issues"


def repository_path() -> str:
    return "repository"


def merge_requests_path(mr_iid: str | int | None = None) -> str:
    if mr_iid is None:
        return "merge_requests"
    return f"merge_requests/{encode_id(mr_iid)}/"


def tags_path(name: str | None = None) -> str:
    segment = f"{repository_path()}/tags"
    if name is None:
        return segment
    return f"{segment}/{encode_id(name)}/"


def members_path() -> str:
    return "members"


def milestones_path() -> str:
    return "milestones"

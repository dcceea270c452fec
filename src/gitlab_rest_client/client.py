"""GitLab API client using httpx."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, GitLabConfig
from .exceptions import (
    GitLabApiError,
    GitLabConfigurationError,
    GitLabDecodeError,
    GitLabNotFoundError,
)
from .models.base import GitLabModel
from .models.common import Member, Milestone
from .models.issues import Issue
from .models.merge_requests import MergeRequest, MergeRequestChanges
from .models.projects import Project
from .models.repositories import Commit, Tag
from .paths import (
    group_path,
    issues_path,
    members_path,
    merge_requests_path,
    milestones_path,
    project_path,
    tags_path,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=GitLabModel)
Params = dict[str, Any] | list[tuple[str, Any]]


def _optional(value: Any) -> Any:
    """Absent optional parameters are still sent, with an empty value."""
    return "" if value is None else value


class GitLabClient:
    """Synchronous HTTP client for a subset of the GitLab REST API v4.

    Each instance owns one ``httpx.Client`` bound to the API root and sending
    ``PRIVATE-TOKEN`` on every request. The httpx connection pool is safe to
    use from several threads and the client keeps no other mutable state, so a
    single instance can be shared across threads.

    Usage::

        with GitLabClient("glpat-...") as gl:
            project = gl.get_project("my-group/my-project")
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        ssl_verify: bool = True,
    ) -> None:
        GitLabConfig(token=token, base_url=base_url, timeout=timeout).validate()

        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise GitLabConfigurationError(f"Invalid GitLab base URL {base_url!r}: {e}") from e
        if not url.host:
            raise GitLabConfigurationError(f"GitLab base URL has no host: {base_url!r}")

        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._client = httpx.Client(
            base_url=self._base_url,
            headers={"PRIVATE-TOKEN": token},
            timeout=timeout,
            verify=ssl_verify,
        )
        logger.debug(f"GitLab client initialized for {self._base_url}")

    @classmethod
    def from_config(cls, config: GitLabConfig) -> GitLabClient:
        return cls(
            config.token,
            config.base_url,
            timeout=config.timeout,
            ssl_verify=config.ssl_verify,
        )

    @classmethod
    def from_env(cls, env_file: str | None = None) -> GitLabClient:
        return cls.from_config(GitLabConfig.from_env(env_file))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_base_url(self) -> str:
        """Return the API root every request path is resolved against."""
        return self._base_url

    # ── HTTP helpers ──────────────────────────────────────────────

    def _request(self, method: str, path: str, *, params: Params | None = None) -> Any:
        """Make an API request and return the parsed JSON body."""
        logger.debug(f"{method} {path} params={params}")
        resp = self._client.request(method, path, params=params)

        if not resp.is_success:
            logger.error(
                f"GitLab API error for {method} {path}: {resp.status_code} - {resp.text[:500]}"
            )
            raise GitLabApiError(resp.status_code, resp.reason_phrase or "", resp.text)

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response, check the base URL and token"
            raise GitLabDecodeError(msg, resp.text[:500])

        try:
            return resp.json()
        except ValueError as e:
            raise GitLabDecodeError(f"JSON parse error for {method} {path}: {e}", resp.text[:500]) from e

    @staticmethod
    def _decode_one(data: Any, model: type[ModelT], path: str) -> ModelT:
        if not isinstance(data, dict):
            msg = f"Expected a JSON object from {path}, got {type(data).__name__}"
            raise GitLabDecodeError(msg, json.dumps(data)[:500])
        try:
            return model.model_validate(data)
        except ValidationError as e:
            msg = f"Unexpected {model.__name__} payload from {path}: {e}"
            raise GitLabDecodeError(msg, json.dumps(data)[:500]) from e

    @classmethod
    def _decode_many(cls, data: Any, model: type[ModelT], path: str) -> list[ModelT]:
        if not isinstance(data, list):
            msg = f"Expected a JSON array from {path}, got {type(data).__name__}"
            raise GitLabDecodeError(msg, json.dumps(data)[:500])
        return [cls._decode_one(item, model, path) for item in data]

    def _get_one(
        self, path: str, model: type[ModelT], params: Params | None = None
    ) -> ModelT:
        return self._decode_one(self._request("GET", path, params=params), model, path)

    def _get_many(
        self, path: str, model: type[ModelT], params: Params | None = None
    ) -> list[ModelT]:
        return self._decode_many(self._request("GET", path, params=params), model, path)

    # ── Projects ──────────────────────────────────────────────────

    def get_project(self, project_id: str | int) -> Project:
        return self._get_one(project_path(project_id), Project)

    def get_project_milestones(
        self, project_id: str | int, active: bool = True, closed: bool = False
    ) -> list[Milestone]:
        """List project milestones.

        ``state=active`` and ``state=closed`` are sent as two separate query
        parameters when both flags are set; with neither flag no state filter
        is sent.
        """
        params: list[tuple[str, str]] = []
        if active:
            params.append(("state", "active"))
        if closed:
            params.append(("state", "closed"))
        path = project_path(project_id) + milestones_path()
        return self._get_many(path, Milestone, params=params or None)

    # ── Members ───────────────────────────────────────────────────

    def get_group_members(self, group_id: str | int) -> list[Member]:
        return self._get_many(group_path(group_id) + members_path(), Member)

    def get_project_members(self, project_id: str | int) -> list[Member]:
        """Return the members of the project's namespace followed by the project's own members.

        Users present in both lists appear twice.
        """
        project = self.get_project(project_id)
        if project.namespace is None:
            raise GitLabDecodeError(f"Project {project_id} payload has no namespace")

        group_members = self.get_group_members(project.namespace.id)
        project_members = self._get_many(project_path(project_id) + members_path(), Member)
        return group_members + project_members

    # ── Issues ────────────────────────────────────────────────────

    def get_issue(self, project_id: str | int, issue_iid: int) -> Issue:
        path = project_path(project_id) + issues_path()
        issues = self._get_many(path, Issue, params={"iids": issue_iid})
        if not issues:
            raise GitLabNotFoundError(f"Issue {issue_iid} not found in project {project_id}")
        return issues[0]

    # ── Merge Requests ────────────────────────────────────────────

    def get_mr(self, project_id: str | int, mr_iid: int) -> MergeRequest:
        return self._get_one(project_path(project_id) + merge_requests_path(mr_iid), MergeRequest)

    def get_mr_commits(self, project_id: str | int, mr_iid: int) -> list[Commit]:
        path = project_path(project_id) + merge_requests_path(mr_iid) + "commits"
        return self._get_many(path, Commit)

    def get_mr_issues(self, project_id: str | int, mr_iid: int) -> list[Issue]:
        """List the issues the merge request closes on merge."""
        path = project_path(project_id) + merge_requests_path(mr_iid) + "closes_issues"
        return self._get_many(path, Issue)

    def get_mr_changes(self, project_id: str | int, mr_iid: int) -> MergeRequestChanges:
        path = project_path(project_id) + merge_requests_path(mr_iid) + "changes"
        return self._get_one(path, MergeRequestChanges)

    def create_mr(
        self,
        project_id: str | int,
        source_branch: str,
        target_branch: str,
        title: str,
        description: str | None = None,
        assignee_id: int | None = None,
        milestone_id: int | None = None,
    ) -> MergeRequest:
        """Open a merge request from ``source_branch`` into ``target_branch``.

        All six parameters are sent as query parameters; the optional ones are
        sent empty when not given.
        """
        path = project_path(project_id) + merge_requests_path()
        params = {
            "source_branch": source_branch,
            "target_branch": target_branch,
            "title": title,
            "description": _optional(description),
            "assignee_id": _optional(assignee_id),
            "milestone_id": _optional(milestone_id),
        }
        logger.info(f"Creating MR from {source_branch} to {target_branch} in project {project_id}")
        return self._decode_one(self._request("POST", path, params=params), MergeRequest, path)

    def accept_mr(
        self,
        project_id: str | int,
        mr_iid: int,
        message: str | None = None,
        remove_source_branch: bool = False,
    ) -> MergeRequest:
        path = project_path(project_id) + merge_requests_path(mr_iid) + "merge/"
        params = {
            "merge_commit_message": _optional(message),
            "should_remove_source_branch": remove_source_branch,
        }
        logger.info(f"Merging MR !{mr_iid} in project {project_id}")
        return self._decode_one(self._request("PUT", path, params=params), MergeRequest, path)

    # ── Tags ──────────────────────────────────────────────────────

    def get_tags(
        self, project_id: str | int, order_by: str = "updated", sort: str = "desc"
    ) -> list[Tag]:
        path = project_path(project_id) + tags_path()
        return self._get_many(path, Tag, params={"order_by": order_by, "sort": sort})

    def create_tag(
        self,
        project_id: str | int,
        tag_name: str,
        ref: str,
        message: str | None = None,
        release_description: str | None = None,
    ) -> Tag:
        path = project_path(project_id) + tags_path()
        params = {
            "tag_name": tag_name,
            "ref": ref,
            "message": _optional(message),
            "release_description": _optional(release_description),
        }
        logger.info(f"Creating tag {tag_name} at {ref} in project {project_id}")
        return self._decode_one(self._request("POST", path, params=params), Tag, path)

"""Shared test fixtures for gitlab-rest-client."""

from __future__ import annotations

from typing import Any

import pytest
import respx

from gitlab_rest_client.client import GitLabClient

TEST_URL = "https://gitlab.example.com/api/v4/"
TEST_TOKEN = "test-token"


@pytest.fixture
def client() -> GitLabClient:
    with GitLabClient(TEST_TOKEN, TEST_URL) as gl:
        yield gl


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(base_url=TEST_URL.rstrip("/")) as router:
        yield router


def _user(user_id: int, username: str) -> dict[str, Any]:
    return {
        "id": user_id,
        "username": username,
        "name": username.title(),
        "state": "active",
        "avatar_url": None,
        "web_url": f"https://gitlab.example.com/{username}",
    }


@pytest.fixture
def project_payload() -> dict[str, Any]:
    return {
        "id": 42,
        "name": "widgets",
        "name_with_namespace": "Acme / widgets",
        "path": "widgets",
        "path_with_namespace": "acme/widgets",
        "description": None,
        "default_branch": "main",
        "web_url": "https://gitlab.example.com/acme/widgets",
        "namespace": {
            "id": 7,
            "name": "Acme",
            "path": "acme",
            "kind": "group",
            "full_path": "acme",
            "parent_id": None,
            "web_url": "https://gitlab.example.com/groups/acme",
        },
        "visibility": "private",
        "archived": False,
        "star_count": 3,
        "topics": ["backend", "tools"],
        "permissions": {"project_access": {"access_level": 40, "notification_level": 3}},
    }


@pytest.fixture
def milestone_payload() -> dict[str, Any]:
    return {
        "id": 12,
        "iid": 3,
        "project_id": 42,
        "title": "v1.2",
        "description": "Second minor release",
        "state": "active",
        "created_at": "2024-02-01T10:00:00.000Z",
        "due_date": "2024-03-01",
        "start_date": None,
        "expired": False,
        "web_url": "https://gitlab.example.com/acme/widgets/-/milestones/3",
    }


@pytest.fixture
def issue_payload(milestone_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": 901,
        "iid": 5,
        "project_id": 42,
        "title": "Crash on empty config",
        "description": "Steps to reproduce...",
        "state": "opened",
        "created_at": "2024-02-10T08:30:00.000Z",
        "updated_at": "2024-02-11T09:00:00.000Z",
        "closed_at": None,
        "author": _user(1, "alice"),
        "assignee": _user(2, "bob"),
        "assignees": [_user(2, "bob")],
        "labels": ["bug", "p1"],
        "milestone": milestone_payload,
        "web_url": "https://gitlab.example.com/acme/widgets/-/issues/5",
        "user_notes_count": 4,
        "time_stats": {"time_estimate": 0, "total_time_spent": 3600},
    }


@pytest.fixture
def mr_payload() -> dict[str, Any]:
    return {
        "id": 3001,
        "iid": 17,
        "project_id": 42,
        "title": "Handle empty config",
        "description": "Closes #5",
        "state": "opened",
        "merged_at": None,
        "created_at": "2024-02-12T12:00:00.000Z",
        "updated_at": "2024-02-12T12:30:00.000Z",
        "source_branch": "fix/empty-config",
        "target_branch": "main",
        "author": _user(2, "bob"),
        "assignee": None,
        "assignees": [],
        "milestone": None,
        "merge_status": "can_be_merged",
        "sha": "a1b2c3d4",
        "merge_commit_sha": None,
        "web_url": "https://gitlab.example.com/acme/widgets/-/merge_requests/17",
        "changes_count": "1",
        "labels": [],
        "draft": False,
    }


@pytest.fixture
def commit_payload() -> dict[str, Any]:
    return {
        "id": "a1b2c3d4e5f6",
        "short_id": "a1b2c3d4",
        "title": "Handle empty config",
        "message": "Handle empty config\n\nCloses #5\n",
        "author_name": "Bob",
        "author_email": "bob@example.com",
        "authored_date": "2024-02-12T11:58:00.000Z",
        "committer_name": "Bob",
        "committer_email": "bob@example.com",
        "committed_date": "2024-02-12T11:58:00.000Z",
        "created_at": "2024-02-12T11:58:00.000Z",
        "parent_ids": ["f0e1d2c3"],
        "web_url": "https://gitlab.example.com/acme/widgets/-/commit/a1b2c3d4e5f6",
    }


@pytest.fixture
def tag_payload(commit_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": "v1.2.0",
        "message": "Release v1.2.0",
        "target": "a1b2c3d4e5f6",
        "commit": commit_payload,
        "release": {"tag_name": "v1.2.0", "description": "Bug fixes"},
        "protected": False,
        "created_at": None,
    }


@pytest.fixture
def member_payloads() -> list[dict[str, Any]]:
    return [
        {**_user(1, "alice"), "access_level": 50, "expires_at": None},
        {**_user(2, "bob"), "access_level": 30, "expires_at": "2025-01-01"},
    ]

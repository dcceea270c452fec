"""GitLab API exceptions."""

from __future__ import annotations

import json
from typing import Any


class GitLabError(Exception):
    """Base exception for GitLab operations."""


class GitLabConfigurationError(GitLabError, ValueError):
    """Raised when the client cannot be built from the given token or base URL."""


class GitLabApiError(GitLabError):
    """Raised when the GitLab API returns a non-success response."""

    def __init__(self, status_code: int, status_text: str, body: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"GitLab API Error {status_code} {status_text}: {body}")

    @property
    def payload(self) -> Any:
        """The response body decoded as JSON, or None when it is not JSON."""
        try:
            return json.loads(self.body)
        except (json.JSONDecodeError, TypeError):
            return None


class GitLabNotFoundError(GitLabError):
    """Raised when a lookup succeeds at the HTTP level but matches nothing."""


class GitLabDecodeError(GitLabError):
    """Raised when a response body is not JSON or not shaped as expected."""

    def __init__(self, message: str, body: str = "") -> None:
        self.body = body
        super().__init__(message)

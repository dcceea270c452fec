"""GitLab client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .exceptions import GitLabConfigurationError

DEFAULT_BASE_URL = "https://gitlab.com/api/v4/"
DEFAULT_TIMEOUT = 30.0

TOKEN_ENV_VARS = (
    "GITLAB_TOKEN",
    "GITLAB_PAT",
    "GITLAB_PERSONAL_ACCESS_TOKEN",
    "GITLAB_API_TOKEN",
)


@dataclass(frozen=True)
class GitLabConfig:
    """Connection settings for a GitLabClient, optionally loaded from environment variables."""

    token: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT
    ssl_verify: bool = True

    @classmethod
    def from_env(cls, env_file: str | os.PathLike[str] | None = None) -> GitLabConfig:
        if env_file is not None:
            load_dotenv(env_file)

        base_url = os.getenv("GITLAB_API_URL", "")
        if not base_url:
            instance_url = os.getenv("GITLAB_URL", "").rstrip("/")
            base_url = f"{instance_url}/api/v4/" if instance_url else DEFAULT_BASE_URL

        token = next((os.environ[name] for name in TOKEN_ENV_VARS if os.getenv(name)), "")

        raw_timeout = os.getenv("GITLAB_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            msg = f"GITLAB_TIMEOUT must be a number of seconds, got: {raw_timeout!r}"
            raise GitLabConfigurationError(msg) from e

        ssl_verify = os.getenv("GITLAB_SSL_VERIFY", "true").lower() not in (
            "false",
            "0",
            "no",
        )

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            ssl_verify=ssl_verify,
        )

    def validate(self) -> None:
        if not self.token:
            msg = "GitLab token is required. Set one of: " + ", ".join(TOKEN_ENV_VARS)
            raise GitLabConfigurationError(msg)
        if not self.base_url.startswith(("http://", "https://")):
            msg = f"GitLab base URL must start with http:// or https://, got: {self.base_url!r}"
            raise GitLabConfigurationError(msg)
        if self.timeout is not None and self.timeout <= 0:
            msg = f"Timeout must be positive, got: {self.timeout}"
            raise GitLabConfigurationError(msg)

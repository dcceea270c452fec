"""Base model for GitLab API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GitLabModel(BaseModel):
    """Base model for GitLab API payloads.

    Only the fields the client relies on are declared. Everything else the
    server sends is kept as an extra attribute, so ``to_dict()`` hands back the
    payload exactly as it was received.
    """

    model_config = {"extra": "allow", "populate_by_name": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)

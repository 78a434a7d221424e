"""Shared Pydantic data models for the GitHub → Discord relay."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Enums ---


class PullRequestAction(str, Enum):
    """Pull request actions that produce a notification."""

    OPENED = "opened"
    REOPENED = "reopened"
    SYNCHRONIZE = "synchronize"


# --- GitHub Models ---


class _GitHubModel(BaseModel):
    """Lenient base: unknown keys are ignored and nulls fall back to defaults."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class GitHubUser(_GitHubModel):
    login: str = ""


class PullRequest(_GitHubModel):
    title: str = ""
    html_url: str = ""
    body: str = ""
    user: GitHubUser = Field(default_factory=GitHubUser)


class Repository(_GitHubModel):
    full_name: str = ""


class PullRequestEvent(_GitHubModel):
    """Subset of the GitHub ``pull_request`` webhook payload."""

    action: str = ""
    number: int = 0
    pull_request: PullRequest = Field(default_factory=PullRequest)
    repository: Repository = Field(default_factory=Repository)


# --- Discord Models ---


class DiscordEmbedAuthor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class DiscordEmbed(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    url: str
    color: int
    author: DiscordEmbedAuthor


class DiscordWebhookPayload(BaseModel):
    """Body of a Discord incoming-webhook execution."""

    model_config = ConfigDict(frozen=True)

    username: str
    avatar_url: str | None = None
    content: str | None = None
    embeds: list[DiscordEmbed] = Field(default_factory=list)

    def to_json_body(self) -> dict[str, Any]:
        """Wire form; unset optional fields are omitted."""
        return self.model_dump(exclude_none=True)

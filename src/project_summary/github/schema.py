"""Pydantic models for the organization project board query response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LabelNode(_Node):
    name: str


class AssigneeNode(_Node):
    login: str


class LabelConnection(_Node):
    nodes: list[LabelNode | None] | None = None


class AssigneeConnection(_Node):
    nodes: list[AssigneeNode | None] | None = None


class RepositoryRef(_Node):
    name_with_owner: str = Field(alias="nameWithOwner")


class IssueContent(_Node):
    """Issue wrapped by a card."""

    number: int | None = None
    url: str
    title: str
    state: str
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")
    closed_at: str | None = Field(default=None, alias="closedAt")
    repository: RepositoryRef | None = None
    labels: LabelConnection
    assignees: AssigneeConnection

    @property
    def is_closed(self) -> bool:
        return self.state == "CLOSED"


class Card(_Node):
    """Board card. Content is None for notes and non-issue items."""

    content: IssueContent | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _empty_fragment_is_note(cls, value: Any) -> Any:
        # Pull requests match no fragment and arrive as an empty object.
        if value == {}:
            return None
        return value


class CardEdge(_Node):
    node: Card


class CardConnection(_Node):
    edges: list[CardEdge]


class Column(_Node):
    name: str | None = None
    cards: CardConnection


class ColumnConnection(_Node):
    nodes: list[Column]


class Project(_Node):
    name: str | None = None
    url: str | None = None
    columns: ColumnConnection


class Organization(_Node):
    name: str | None = None
    project: Project


class OrgProjectResponse(_Node):
    """Root of the organization project board query."""

    organization: Organization

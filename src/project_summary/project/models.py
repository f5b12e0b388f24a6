"""Data models for project references."""

from dataclasses import dataclass
from enum import StrEnum


class OwnerKind(StrEnum):
    """Scope that owns a project board."""

    ORGANIZATION = "org"
    REPOSITORY = "repo"


@dataclass(frozen=True)
class ProjectReference:
    """Identifies a project board.

    Attributes:
        owner_kind: Whether the board belongs to an organization or a repository.
        owner: Org login, or "owner/repo" for repository boards.
        number: Project number as shown in the board URL.
    """

    owner_kind: OwnerKind
    owner: str
    number: int

    @property
    def is_organization(self) -> bool:
        return self.owner_kind is OwnerKind.ORGANIZATION

    def describe(self) -> str:
        """Human-readable summary used in log output."""
        if self.is_organization:
            return (
                f"This project is configured at the org level. "
                f"Org login: {self.owner}, project #{self.number}"
            )
        return (
            f"This project is configured at the repo level. "
            f"Repo: {self.owner}, project #{self.number}"
        )

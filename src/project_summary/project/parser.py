"""Parse GitHub Project board URLs into ProjectReference objects."""

from __future__ import annotations

from project_summary.project.exceptions import InvalidProjectUrlError
from project_summary.project.models import OwnerKind, ProjectReference

# https://github.com/orgs/<login>/projects/<n>
# https://github.com/<owner>/<repo>/projects/<n>
_OWNER_SEGMENT = 3
_NAME_SEGMENT = 4
_PROJECTS_SEGMENT = 5
_NUMBER_SEGMENT = 6


def parse_project_url(project_url: str) -> ProjectReference:
    """Parse a project board URL.

    Args:
        project_url: Board URL, e.g. "https://github.com/orgs/github/projects/910"

    Returns:
        ProjectReference describing the owner and project number.

    Raises:
        InvalidProjectUrlError: If the URL is not a project board URL.
    """
    url = project_url.strip().split("?", 1)[0].split("#", 1)[0]
    segments = url.split("/")

    if len(segments) <= _NUMBER_SEGMENT:
        raise InvalidProjectUrlError(f"Not a GitHub Project URL: {project_url!r}")

    owner = segments[_OWNER_SEGMENT]
    name = segments[_NAME_SEGMENT]
    if not owner or not name:
        raise InvalidProjectUrlError(f"Missing project owner in URL: {project_url!r}")

    if segments[_PROJECTS_SEGMENT] != "projects":
        raise InvalidProjectUrlError(
            f"Expected '/projects/' in URL, got {segments[_PROJECTS_SEGMENT]!r}: {project_url!r}"
        )

    number = _parse_number(segments[_NUMBER_SEGMENT], project_url)

    if owner == "orgs":
        return ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner=name, number=number)
    return ProjectReference(
        owner_kind=OwnerKind.REPOSITORY,
        owner=f"{owner}/{name}",
        number=number,
    )


def _parse_number(segment: str, project_url: str) -> int:
    if not (segment.isascii() and segment.isdigit()):
        raise InvalidProjectUrlError(
            f"Project number must be a positive integer, got {segment!r}: {project_url!r}"
        )
    number = int(segment)
    if number <= 0:
        raise InvalidProjectUrlError(f"Project number must be positive: {project_url!r}")
    return number

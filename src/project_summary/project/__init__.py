"""Project references - parse GitHub Project URLs."""

from project_summary.project.exceptions import InvalidProjectUrlError
from project_summary.project.models import OwnerKind, ProjectReference
from project_summary.project.parser import parse_project_url

__all__ = [
    "InvalidProjectUrlError",
    "OwnerKind",
    "ProjectReference",
    "parse_project_url",
]

"""Exceptions for project URL parsing."""

from project_summary.exceptions import ProjectSummaryError


class InvalidProjectUrlError(ProjectSummaryError):
    """Project URL does not identify a GitHub Project board."""

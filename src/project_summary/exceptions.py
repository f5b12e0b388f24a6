"""Base exception shared by every project-summary component."""


class ProjectSummaryError(Exception):
    """Base exception for project-summary errors."""


class ConfigError(ProjectSummaryError):
    """Configuration is invalid or a required value is missing."""

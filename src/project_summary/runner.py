"""Orchestrator - run one report from URL to Markdown file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from project_summary.exceptions import ConfigError
from project_summary.github import GitHubGraphQLClient, fetch_open_issues
from project_summary.project import parse_project_url
from project_summary.report import flatten_issues, render_report

if TYPE_CHECKING:
    from pathlib import Path

    from project_summary.config import ReportConfig

logger = logging.getLogger(__name__)


def run(config: ReportConfig, client: GitHubGraphQLClient | None = None) -> Path | None:
    """Generate the report described by config and write it to disk.

    Args:
        config: Run inputs.
        client: GraphQL client to use. When omitted one is created from
            config.token and closed afterwards.

    Returns:
        The written report path, or None for repository-level projects.

    Raises:
        ProjectSummaryError: If any step fails. Nothing is written in that case.
        OSError: If the report cannot be written.
    """
    ref = parse_project_url(config.project_url)
    logger.info(ref.describe())

    if not ref.is_organization:
        logger.warning("This tool does not support repo level GitHub projects yet.")
        return None

    owns_client = client is None
    if client is None:
        if not config.token:
            raise ConfigError("A GitHub token is required for organization projects")
        client = GitHubGraphQLClient(token=config.token, base_url=config.api_url)

    try:
        logger.info("Querying for issues ...")
        response = fetch_open_issues(ref, client)
    finally:
        if owns_client:
            client.close()

    issues = flatten_issues(response)
    for issue in issues:
        logger.info("Processing card: %s / %s", issue.url, issue.title)
    logger.info("Found %d open issue(s)", len(issues))

    logger.info("Generating the report Markdown ...")
    report = render_report(
        config.title,
        config.project_url,
        issues,
        config.interesting_labels,
        config.uninteresting_labels,
    )

    output_path = config.output_path
    logger.info("Writing the Markdown to %s ...", output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report, encoding="utf-8")

    logger.info("Done!")
    return output_path

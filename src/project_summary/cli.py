"""CLI entry point for project-summary.

Every option falls back to the matching GitHub Actions ``INPUT_*`` variable,
so the command runs unchanged as an action step.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

import click

from project_summary.config import ReportConfig, load_config_file
from project_summary.exceptions import ProjectSummaryError
from project_summary.logging import sanitize_for_log, setup_logging
from project_summary.runner import run

logger = logging.getLogger("project_summary.cli")


def _env(*names: str) -> str | None:
    # click cannot read names like INPUT_PROJECT-URL, which Actions produces.
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


@click.command()
@click.option("--project-url", "project_url", help="GitHub Project board URL")
@click.option("--title", help="Report title")
@click.option(
    "--output-path",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the Markdown report",
)
@click.option("--token", help="GitHub token with read access to the project")
@click.option(
    "--interesting-labels",
    "interesting_labels",
    help="Comma-separated labels highlighted as noteworthy",
)
@click.option(
    "--uninteresting-labels",
    "uninteresting_labels",
    help="Comma-separated labels highlighted as low priority",
)
@click.option("--api-url", "api_url", help="GitHub GraphQL endpoint")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file supplying any of the options above",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.version_option(package_name="project-summary")
def main(config_path: Path | None, verbose: bool, **options: Any) -> None:
    """Write a Markdown summary of the open issues on a GitHub Project board."""
    setup_logging(level="DEBUG" if verbose else None)

    try:
        config = _build_config(config_path, options)
        run(config)
    except (ProjectSummaryError, OSError) as e:
        message = sanitize_for_log(str(e))
        logger.error(message)
        click.echo(f"::error::{message}", err=True)
        sys.exit(1)


def _build_config(config_path: Path | None, options: dict[str, Any]) -> ReportConfig:
    """Merge YAML values, command-line options and environment inputs."""
    data: dict[str, Any] = load_config_file(config_path) if config_path else {}

    env_fallbacks = {
        "project_url": _env("INPUT_PROJECT-URL", "INPUT_PROJECT_URL"),
        "title": _env("INPUT_TITLE"),
        "output_path": _env("INPUT_OUTPUTPATH", "INPUT_OUTPUT_PATH"),
        "token": _env("INPUT_TOKEN", "GITHUB_TOKEN"),
        "interesting_labels": _env("INPUT_INTERESTINGLABELS", "INPUT_INTERESTING_LABELS"),
        "uninteresting_labels": _env("INPUT_UNINTERESTINGLABELS", "INPUT_UNINTERESTING_LABELS"),
        "api_url": _env("GITHUB_GRAPHQL_URL"),
    }

    for key, env_value in env_fallbacks.items():
        value = options.get(key)
        if value is None:
            value = env_value
        if value is not None:
            data[key] = value

    return ReportConfig.from_dict(data)


if __name__ == "__main__":
    main()

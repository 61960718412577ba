"""Hydrate command implementation.

Populates a repository with the demo content in the configuration
directory, optionally cleaning up existing content first.
"""

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from ghdemo.cli.display import print_cleanup_report, print_hydration_report
from ghdemo.core.cancel import CancellationToken, install_sigint_handler
from ghdemo.core.cleanup import CleanupOptions, cleanup
from ghdemo.core.config import (
    Configuration,
    load_content,
    load_preserve_config,
    load_project_config,
)
from ghdemo.core.errors import ErrorLayer, LayeredError, is_layer, is_partial_failure
from ghdemo.core.hydrate import HydrateOptions, hydrate
from ghdemo.github.client import GhClient, current_repository
from ghdemo.utils.formatting import print_error, print_info, print_success, print_warning
from ghdemo.utils.log import configure_logging

app = typer.Typer(
    help="Create demo issues, discussions and pull requests.",
    invoke_without_command=True,
)


def _resolve_repository(owner: str | None, repo: str | None) -> tuple[str, str]:
    """Fill in owner and repo from the current git checkout when omitted."""
    if owner and repo:
        return owner, repo
    try:
        detected_owner, detected_repo = current_repository()
    except LayeredError as e:
        print_error(f"--owner and --repo are required outside a GitHub repository ({e})")
        raise typer.Exit(code=1) from e
    return owner or detected_owner, repo or detected_repo


def _exit_on_error(error: Exception | None, action: str) -> None:
    """Exit 1 on complete failure; warn and continue on partial failure."""
    if error is None:
        return
    if is_partial_failure(error):
        print_warning(f"{action} completed with some failures.")
        return
    if is_layer(error, ErrorLayer.CONTEXT):
        print_error(f"{action} cancelled.")
    else:
        print_error(f"{action} failed: {error}")
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def hydrate_repository(
    ctx: typer.Context,
    owner: Annotated[
        str | None,
        typer.Option("--owner", help="Repository owner (defaults to the current repository)."),
    ] = None,
    repo: Annotated[
        str | None,
        typer.Option("--repo", help="Repository name (defaults to the current repository)."),
    ] = None,
    config_path: Annotated[
        str | None,
        typer.Option(
            "--config-path",
            help="Configuration directory, relative to the project root.",
        ),
    ] = None,
    issues: Annotated[
        bool,
        typer.Option("--issues/--no-issues", help="Create issues."),
    ] = True,
    discussions: Annotated[
        bool,
        typer.Option("--discussions/--no-discussions", help="Create discussions."),
    ] = True,
    prs: Annotated[
        bool,
        typer.Option("--prs/--no-prs", help="Create pull requests."),
    ] = True,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be done without making changes.",
        ),
    ] = False,
    clean: Annotated[
        bool,
        typer.Option("--clean", help="Remove existing content of every type first."),
    ] = False,
    clean_issues: Annotated[
        bool,
        typer.Option("--clean-issues", help="Remove existing issues first."),
    ] = False,
    clean_discussions: Annotated[
        bool,
        typer.Option("--clean-discussions", help="Remove existing discussions first."),
    ] = False,
    clean_prs: Annotated[
        bool,
        typer.Option("--clean-prs", help="Remove existing pull requests first."),
    ] = False,
    clean_labels: Annotated[
        bool,
        typer.Option("--clean-labels", help="Remove existing labels first."),
    ] = False,
    preserve_config: Annotated[
        str | None,
        typer.Option(
            "--preserve-config",
            help="Preservation rules file (defaults to preserve.json in the config directory).",
        ),
    ] = None,
    create_project: Annotated[
        bool,
        typer.Option("--create-project", help="Create a project board for the new content."),
    ] = False,
    project_config: Annotated[
        str | None,
        typer.Option(
            "--project-config",
            help="Project settings file (defaults to project.json in the config directory).",
        ),
    ] = None,
) -> None:
    """Hydrate a repository with demo content.

    Reads issues.json, discussions.json and prs.json (plus optional
    labels.json) from the configuration directory. Every label used by
    the content is created before the content itself.

    Partial failures are reported but do not fail the command.

    Examples:
        gh-demo hydrate --dry-run                 # Preview
        gh-demo hydrate --no-discussions          # Skip discussions
        gh-demo hydrate --clean --dry-run         # Preview cleanup too
        gh-demo hydrate --clean-issues --preserve-config keep.json
    """
    if ctx.invoked_subcommand is not None:
        return

    configure_logging(debug)
    owner, repo = _resolve_repository(owner, repo)
    config = Configuration.from_path(config_path)

    cleanup_options = CleanupOptions(
        clean_issues=clean or clean_issues,
        clean_discussions=clean or clean_discussions,
        clean_pull_requests=clean or clean_prs,
        clean_labels=clean or clean_labels,
        dry_run=dry_run,
    )

    try:
        content = load_content(
            config,
            include_issues=issues,
            include_discussions=discussions,
            include_pull_requests=prs,
        )
        if cleanup_options.any_selected:
            rules_path = (
                Path(preserve_config).expanduser() if preserve_config else config.preserve_path
            )
            cleanup_options = replace(cleanup_options, preserve=load_preserve_config(rules_path))
        project = None
        if create_project:
            project_path = (
                Path(project_config).expanduser() if project_config else config.project_path
            )
            project = load_project_config(project_path)
    except LayeredError as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(code=1) from e

    print_info(f"Hydrating {owner}/{repo} from {config.root}")
    client = GhClient(owner, repo)
    token = CancellationToken()
    install_sigint_handler(token)

    if cleanup_options.any_selected:
        cleanup_report = cleanup(client, cleanup_options, token)
        print_cleanup_report(cleanup_report.summary, dry_run=dry_run)
        _exit_on_error(cleanup_report.error, "Cleanup")

    report = hydrate(
        client,
        content,
        HydrateOptions(
            include_issues=issues,
            include_discussions=discussions,
            include_pull_requests=prs,
            dry_run=dry_run,
            project=project,
        ),
        token,
    )
    print_hydration_report(report, dry_run=dry_run)
    _exit_on_error(report.error, "Hydration")

    if dry_run:
        print_info("\nDry-run mode: No changes were made.")
    elif report.error is None:
        print_success("Hydration completed successfully.")

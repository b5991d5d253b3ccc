"""Defines the Command Line Interface (CLI) using Typer."""

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_issue_to_branch import __version__
from github_issue_to_branch.branching.exceptions import BranchFromIssuesError
from github_issue_to_branch.branching.workflow import create_git_branch_from_issues
from github_issue_to_branch.commands.executor import SubprocessCommandExecutor
from github_issue_to_branch.configuration.reconcile import reconcile_configuration
from github_issue_to_branch.utils.log import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

EPILOG = """\b
Examples:
  github-issue-to-branch 123 456
  ghib 789 quick-fix  # 'quick-fix' is an optional postfix
  ghib 123 -- -v2     # use '--' before a postfix starting with '-'

\b
Note: The postfix is entirely optional. It can be used for any additional context
you want to add to your branch name, such as 'quick-fix', 'wip', or even your initials.
"""

typer_app = typer.Typer(
    pretty_exceptions_show_locals=False,
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"github-issue-to-branch {__version__}")
        raise typer.Exit()


@typer_app.command(epilog=EPILOG)
def create_branch_cli(
    ctx: typer.Context,
    tokens: Annotated[
        list[str] | None,
        Argument(
            metavar="ISSUE_NUMBER... [POSTFIX]",
            help="One or more GitHub issue numbers, optionally followed by a postfix to add to the branch name.",
            show_default=False,
        ),
    ] = None,
    debug: Annotated[bool | None, Option("--debug/--no-debug", envvar="DEBUG", help="Enable debug logging.", show_default=False)] = None,
    version: Annotated[
        bool,
        Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Create a Git branch from one or more GitHub issue numbers."""
    if not tokens:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    config = reconcile_configuration(cli_debug=debug)
    configure_logging(debug=config.debug)
    logger.debug("Resolved configuration", config=config)

    try:
        result = create_git_branch_from_issues(tokens, SubprocessCommandExecutor())
    except BranchFromIssuesError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    except Exception as exc:
        logger.debug("Unexpected error", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    typer.echo(result.message)


def main() -> None:
    """Entry point for the console scripts."""
    typer_app()


if __name__ == "__main__":
    main()

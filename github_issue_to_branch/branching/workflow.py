"""Runs the complete issues-to-branch workflow."""

from collections.abc import Sequence

import structlog

from github_issue_to_branch.branching.arguments import parse_arguments
from github_issue_to_branch.branching.branches import create_or_switch_branch
from github_issue_to_branch.branching.dependencies import check_dependencies
from github_issue_to_branch.branching.naming import build_branch_name
from github_issue_to_branch.branching.results import BranchResult
from github_issue_to_branch.branching.titles import fetch_issue_titles
from github_issue_to_branch.commands.abc import CommandExecutorBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def create_git_branch_from_issues(tokens: Sequence[str], executor: CommandExecutorBase) -> BranchResult:
    """Create or switch to the branch named after the given issues.

    Dependencies are checked, arguments parsed and every title fetched before
    git is touched, so a failure in any of those steps leaves the repository
    as it was.

    Args:
        tokens: Issue numbers, optionally followed by a postfix.
        executor: Runs the gh and git commands.

    Raises:
        BranchFromIssuesError: Any of its subclasses, when a step fails.

    Returns:
        BranchResult: The branch name and whether it was newly created.
    """
    check_dependencies(executor)
    arguments = parse_arguments(tokens)
    titles = fetch_issue_titles(arguments.issue_numbers, executor)
    branch_name = build_branch_name(arguments.issue_numbers, titles, arguments.postfix)
    created = create_or_switch_branch(branch_name, executor)
    logger.info("Branch ready", branch_name=branch_name, created=created)
    return BranchResult(branch_name=branch_name, created=created)

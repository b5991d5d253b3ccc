"""Creates or switches to a local Git branch."""

import structlog

from github_issue_to_branch.commands.abc import CommandExecutorBase
from github_issue_to_branch.utils.constants import (
    BRANCH_EXISTS_TEMPLATE,
    CREATE_BRANCH_TEMPLATE,
    SWITCH_BRANCH_TEMPLATE,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def branch_exists(branch_name: str, executor: CommandExecutorBase) -> bool:
    """Return True if a local branch with this exact name exists.

    `git show-ref --quiet` prints nothing either way, so only a failed run
    means the branch is absent.
    """
    return executor.execute(BRANCH_EXISTS_TEMPLATE.format(branch_name=branch_name)) is not None


def create_branch(branch_name: str, executor: CommandExecutorBase) -> None:
    """Create the branch and check it out."""
    logger.info("Creating branch", branch_name=branch_name)
    executor.execute(CREATE_BRANCH_TEMPLATE.format(branch_name=branch_name))


def switch_branch(branch_name: str, executor: CommandExecutorBase) -> None:
    """Check out an existing branch."""
    logger.info("Switching to branch", branch_name=branch_name)
    executor.execute(SWITCH_BRANCH_TEMPLATE.format(branch_name=branch_name))


def create_or_switch_branch(branch_name: str, executor: CommandExecutorBase) -> bool:
    """Switch to the branch if it exists, otherwise create it.

    Returns:
        True if a new branch was created, False if an existing one was checked out.
    """
    if branch_exists(branch_name, executor):
        switch_branch(branch_name, executor)
        return False
    create_branch(branch_name, executor)
    return True

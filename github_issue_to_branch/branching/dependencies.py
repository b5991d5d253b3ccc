"""Checks that the external command line tools are installed."""

from collections.abc import Iterable

import structlog

from github_issue_to_branch.branching.exceptions import MissingDependencyError
from github_issue_to_branch.commands.abc import CommandExecutorBase
from github_issue_to_branch.utils.constants import COMMAND_EXISTS_TEMPLATE, REQUIRED_COMMANDS

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def command_exists(name: str, executor: CommandExecutorBase) -> bool:
    """Return True if the shell can resolve `name` to a command."""
    return bool(executor.execute(COMMAND_EXISTS_TEMPLATE.format(name=name)))


def check_dependencies(executor: CommandExecutorBase, required: Iterable[str] = REQUIRED_COMMANDS) -> None:
    """Ensure every required command is available.

    Every name is probed, so the error lists all missing commands at once.

    Raises:
        MissingDependencyError: If at least one command is missing.
    """
    missing = [name for name in required if not command_exists(name, executor)]
    if missing:
        logger.debug("Required commands are missing", missing=missing)
        raise MissingDependencyError(missing)
    logger.debug("All required commands are available")

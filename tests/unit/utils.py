"""Utility functions for unit tests."""

from typing import Callable
from unittest.mock import MagicMock

from github_issue_to_branch.commands.abc import CommandExecutorBase

ExecutorFactory = Callable[..., MagicMock]


def build_executor(routes: dict[str, str | None] | None = None, default: str | None = None) -> MagicMock:
    """Build a mock executor that answers commands by prefix.

    Routes are checked in insertion order, so more specific prefixes must come
    first. Commands matching no route return `default`.
    """
    routes = routes or {}

    def route(command: str) -> str | None:
        for prefix, output in routes.items():
            if command.startswith(prefix):
                return output
        return default

    executor = MagicMock(spec=CommandExecutorBase)
    executor.execute.side_effect = route
    return executor

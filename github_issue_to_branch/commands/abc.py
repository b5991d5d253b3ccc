"""Base ABC for shell command executors."""

from abc import ABC, abstractmethod


class CommandExecutorBase(ABC):
    """Base ABC for shell command executors.

    Every interaction with an external tool goes through `execute`, so the
    branching workflow can be driven by a test double instead of real
    processes.
    """

    @abstractmethod
    def execute(self, command: str) -> str | None:
        """Run a shell command.

        Returns:
            The command's standard output with surrounding whitespace removed,
            or None if the command could not be run or exited non-zero.
        """
        pass

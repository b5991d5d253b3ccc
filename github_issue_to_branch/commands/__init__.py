"""Shell command execution used to talk to the gh and git command line tools."""

from .abc import CommandExecutorBase
from .executor import SubprocessCommandExecutor

__all__ = ["CommandExecutorBase", "SubprocessCommandExecutor"]

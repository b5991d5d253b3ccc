"""Executes shell commands with the subprocess module."""

import subprocess
from pathlib import Path

import structlog

from github_issue_to_branch.commands.abc import CommandExecutorBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SubprocessCommandExecutor(CommandExecutorBase):
    """Runs commands through the system shell and collapses every failure to None."""

    def __init__(self, cwd: Path | None = None) -> None:
        """Initialize the executor with an optional working directory."""
        self.cwd = cwd

    def execute(self, command: str) -> str | None:
        """Run the command and return its trimmed stdout, or None if it failed."""
        logger.debug("Running command", command=command, cwd=str(self.cwd) if self.cwd else None)
        try:
            # Shell builtins such as `command -v` require a shell.
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                cwd=self.cwd,
            )
        except subprocess.CalledProcessError as exc:
            logger.debug(
                "Command exited with non-zero status",
                command=command,
                returncode=exc.returncode,
                stderr=exc.stderr.strip() if exc.stderr else "",
            )
            return None
        except OSError as exc:
            logger.debug("Command could not be started", command=command, error=str(exc))
            return None
        output = result.stdout.strip()
        logger.debug("Command succeeded", command=command, output=output)
        return output

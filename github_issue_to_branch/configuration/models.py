"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass


@dataclass
class BranchFromIssuesConfig:
    """Configuration class for the GitHub Issue to Branch CLI."""

    debug: bool

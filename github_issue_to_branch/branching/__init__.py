"""Turns GitHub issue numbers into a Git branch."""

from .exceptions import (
    BranchFromIssuesError,
    IssueNotFoundError,
    MissingDependencyError,
    NoIssueNumbersError,
    NoValidIssueNumbersError,
)
from .results import BranchResult, ParsedArguments
from .workflow import create_git_branch_from_issues

__all__ = [
    "BranchFromIssuesError",
    "BranchResult",
    "IssueNotFoundError",
    "MissingDependencyError",
    "NoIssueNumbersError",
    "NoValidIssueNumbersError",
    "ParsedArguments",
    "create_git_branch_from_issues",
]

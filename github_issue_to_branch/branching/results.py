"""Contains results of application execution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedArguments:
    """Issue numbers in ascending numeric order and the optional postfix."""

    issue_numbers: list[str]
    postfix: str = ""


@dataclass(frozen=True)
class BranchResult:
    """Contains the outcome of the create-or-switch workflow."""

    branch_name: str
    created: bool

    @property
    def message(self) -> str:
        """Human-readable summary printed by the CLI."""
        if self.created:
            return f"Created new branch: {self.branch_name}"
        return f"Switched to branch: {self.branch_name}"

"""Contains exceptions raised while turning issues into a branch."""


class BranchFromIssuesError(Exception):
    """Base class for every error that aborts a run."""

    pass


class MissingDependencyError(BranchFromIssuesError):
    """Raised when one or more required commands cannot be found on PATH."""

    def __init__(self, missing: list[str]) -> None:
        """Initializes the exception with the names of all missing commands."""
        super().__init__(f"The following required commands are missing: {', '.join(missing)}")
        self.missing = missing


class NoIssueNumbersError(BranchFromIssuesError):
    """Raised when no arguments were given at all."""

    def __init__(self) -> None:
        """Initializes the exception with a fixed message."""
        super().__init__("No issue numbers provided.")


class NoValidIssueNumbersError(BranchFromIssuesError):
    """Raised when none of the arguments is an issue number."""

    def __init__(self) -> None:
        """Initializes the exception with a fixed message."""
        super().__init__("No valid issue numbers provided.")


class IssueNotFoundError(BranchFromIssuesError):
    """Raised when the title of an issue cannot be fetched."""

    def __init__(self, issue_number: str) -> None:
        """Initializes the exception with the issue number that could not be resolved."""
        super().__init__(f"Issue {issue_number} not found.")
        self.issue_number = issue_number

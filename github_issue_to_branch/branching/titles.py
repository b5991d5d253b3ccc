"""Fetches issue titles through the GitHub CLI."""

import structlog
from pydantic import BaseModel, ValidationError

from github_issue_to_branch.branching.exceptions import IssueNotFoundError
from github_issue_to_branch.commands.abc import CommandExecutorBase
from github_issue_to_branch.utils.constants import ISSUE_TITLE_SEPARATOR, ISSUE_VIEW_TEMPLATE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class IssueTitleModel(BaseModel):
    """Pydantic model for the JSON printed by `gh issue view --json title`."""

    title: str


def fetch_issue_title(issue_number: str, executor: CommandExecutorBase) -> str | None:
    """Fetch the title of a single issue.

    Returns:
        The title, or None if the command failed, printed nothing, or printed
        something without a non-empty string `title` field.
    """
    output = executor.execute(ISSUE_VIEW_TEMPLATE.format(issue_number=issue_number))
    if not output:
        logger.debug("No output received for issue", issue_number=issue_number)
        return None
    try:
        issue = IssueTitleModel.model_validate_json(output)
    except ValidationError as exc:
        logger.debug("Could not parse issue title", issue_number=issue_number, error=str(exc))
        return None
    if not issue.title:
        logger.debug("Issue has an empty title", issue_number=issue_number)
        return None
    logger.info("Fetched issue title", issue_number=issue_number, title=issue.title)
    return issue.title


def fetch_issue_titles(issue_numbers: list[str], executor: CommandExecutorBase) -> list[str]:
    """Fetch titles one issue at a time, in the order given.

    Fetching stops at the first issue whose title is unavailable, so the
    error always names the lowest missing issue number of a sorted list.

    Raises:
        IssueNotFoundError: If any title cannot be fetched.
    """
    titles: list[str] = []
    for issue_number in issue_numbers:
        title = fetch_issue_title(issue_number, executor)
        if title is None:
            raise IssueNotFoundError(issue_number)
        titles.append(title)
    return titles


def join_issue_titles(titles: list[str]) -> str:
    """Join titles with " and "."""
    return ISSUE_TITLE_SEPARATOR.join(titles)

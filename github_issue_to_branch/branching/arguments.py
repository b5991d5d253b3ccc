"""Splits command line tokens into issue numbers and an optional postfix."""

from collections.abc import Sequence

import structlog

from github_issue_to_branch.branching.exceptions import NoIssueNumbersError, NoValidIssueNumbersError
from github_issue_to_branch.branching.results import ParsedArguments
from github_issue_to_branch.utils.constants import ISSUE_NUMBER_PATTERN

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def is_issue_number(token: str) -> bool:
    """Return True if the token consists only of ASCII decimal digits."""
    return ISSUE_NUMBER_PATTERN.fullmatch(token) is not None


def parse_arguments(tokens: Sequence[str]) -> ParsedArguments:
    """Parse raw tokens into sorted issue numbers and a postfix.

    When every token is an issue number there is no postfix. Otherwise the
    last token is taken as the postfix, whatever it looks like, and any other
    token that is not an issue number is dropped.

    Args:
        tokens: Tokens in the order they were given on the command line.

    Raises:
        NoIssueNumbersError: If no tokens were given.
        NoValidIssueNumbersError: If no issue numbers remain after removing the postfix.

    Returns:
        ParsedArguments: Issue numbers sorted by numeric value, duplicates kept.
    """
    if not tokens:
        raise NoIssueNumbersError()

    remaining = list(tokens)
    postfix = ""
    if not all(is_issue_number(token) for token in remaining):
        postfix = remaining.pop()

    issue_numbers = [token for token in remaining if is_issue_number(token)]
    if len(issue_numbers) < len(remaining):
        logger.warning(
            "Ignoring arguments that are not issue numbers",
            ignored=[token for token in remaining if not is_issue_number(token)],
        )
    if not issue_numbers:
        raise NoValidIssueNumbersError()

    issue_numbers.sort(key=int)
    logger.debug("Parsed arguments", issue_numbers=issue_numbers, postfix=postfix)
    return ParsedArguments(issue_numbers=issue_numbers, postfix=postfix)

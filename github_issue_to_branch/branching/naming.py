"""Builds the branch name from issue numbers, titles and postfix."""

import structlog

from github_issue_to_branch.branching.titles import join_issue_titles
from github_issue_to_branch.utils.helpers import slugify

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def build_branch_name(issue_numbers: list[str], titles: list[str], postfix: str = "") -> str:
    """Generate a branch name like '123-456-first-issue-and-second-issue-wip'.

    Args:
        issue_numbers: Issue numbers, already sorted.
        titles: Issue titles in the same order as the issue numbers.
        postfix: Optional free text slugified on its own and appended.

    Returns:
        The branch name.
    """
    branch_name = slugify(f"{'-'.join(issue_numbers)} {join_issue_titles(titles)}")
    if postfix:
        branch_name += f"-{slugify(postfix)}"
    # A postfix with no alphanumerics leaves a dangling hyphen behind.
    branch_name = branch_name.removesuffix("-")
    logger.debug("Built branch name", branch_name=branch_name)
    return branch_name

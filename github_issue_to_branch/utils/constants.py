"""Shared constants used across the application."""

import re

# Argument Parsing Constants
# --------------------------

ISSUE_NUMBER_PATTERN = re.compile(r"[0-9]+")
"""Pattern a token must fully match to be treated as an issue number (ASCII digits only)."""

# Issue Title Constants
# ---------------------

ISSUE_TITLE_SEPARATOR = " and "
"""Separator placed between issue titles when several issues share a branch."""

# External Command Constants
# --------------------------

REQUIRED_COMMANDS: tuple[str, ...] = ("gh", "git")
"""Commands that must be resolvable on PATH before anything else runs."""

COMMAND_EXISTS_TEMPLATE = "command -v {name}"
"""Shell probe that prints the resolved path of a command, or nothing."""

ISSUE_VIEW_TEMPLATE = "gh issue view {issue_number} --json title"
"""GitHub CLI invocation returning an issue's title as JSON."""

BRANCH_EXISTS_TEMPLATE = "git show-ref --verify --quiet refs/heads/{branch_name}"
"""Succeeds (with empty output) only when the local branch exists."""

CREATE_BRANCH_TEMPLATE = "git checkout -b {branch_name}"
"""Creates a new branch and checks it out in one step."""

SWITCH_BRANCH_TEMPLATE = "git checkout {branch_name}"
"""Switches the working tree to an existing branch."""

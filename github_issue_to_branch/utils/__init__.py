"""Utility modules for shared functionality."""

from .constants import (
    ISSUE_NUMBER_PATTERN,
    ISSUE_TITLE_SEPARATOR,
    REQUIRED_COMMANDS,
)
from .helpers import slugify

__all__ = [
    "ISSUE_NUMBER_PATTERN",
    "ISSUE_TITLE_SEPARATOR",
    "REQUIRED_COMMANDS",
    "slugify",
]

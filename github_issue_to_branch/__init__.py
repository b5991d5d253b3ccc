"""Create or switch to a Git branch named after one or more GitHub issues."""

__version__ = "1.0.0"

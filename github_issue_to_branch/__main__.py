"""Allows running the CLI with `python -m github_issue_to_branch`."""

from github_issue_to_branch.configuration.cli import main

if __name__ == "__main__":
    main()

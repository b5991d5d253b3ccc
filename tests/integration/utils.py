"""Utility functions for integration tests."""

import os
import stat
import subprocess
from pathlib import Path

STUB_GH_SCRIPT = """#!/bin/sh
# Stub of `gh issue view <number> --json title` serving canned titles.
if [ "$1" != "issue" ] || [ "$2" != "view" ]; then
    echo "unsupported gh invocation: $*" >&2
    exit 2
fi
case "$3" in
{cases}
    *)
        echo "GraphQL: Could not resolve to an issue or pull request with the number of $3." >&2
        exit 1
        ;;
esac
"""


def write_stub_gh(bin_dir: Path, titles: dict[str, str]) -> Path:
    """Write an executable `gh` stub that knows the given issue titles."""
    cases = "\n".join(f"    {number}) echo '{{\"title\": \"{title}\"}}' ;;" for number, title in titles.items())
    gh_path = bin_dir / "gh"
    gh_path.write_text(STUB_GH_SCRIPT.format(cases=cases), encoding="utf-8")
    gh_path.chmod(gh_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return gh_path


def git(repo: Path, *args: str) -> str:
    """Run git in the repository and return its trimmed stdout."""
    env = os.environ.copy()
    env.update(
        {
            "GIT_AUTHOR_NAME": "Integration Test",
            "GIT_AUTHOR_EMAIL": "integration@example.com",
            "GIT_COMMITTER_NAME": "Integration Test",
            "GIT_COMMITTER_EMAIL": "integration@example.com",
        }
    )
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
        env=env,
    )
    return result.stdout.strip()


def init_repository(repo: Path) -> str:
    """Create a repository with one commit and return the name of its initial branch."""
    repo.mkdir(parents=True, exist_ok=True)
    git(repo, "init", "-q")
    git(repo, "commit", "-q", "--allow-empty", "-m", "Initial commit")
    return git(repo, "symbolic-ref", "--short", "HEAD")


def current_branch(repo: Path) -> str:
    """Return the branch checked out in the repository."""
    return git(repo, "symbolic-ref", "--short", "HEAD")


def local_branches(repo: Path) -> list[str]:
    """Return the names of all local branches."""
    output = git(repo, "for-each-ref", "--format=%(refname:short)", "refs/heads/")
    return sorted(line for line in output.splitlines() if line)

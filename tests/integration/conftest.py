"""Pytest configuration for integration tests."""

import os
import shutil
from pathlib import Path

import pytest

from .utils import init_repository, write_stub_gh

ISSUE_TITLES = {
    "123": "Test Issue",
    "456": "Second Issue",
    "9": "Spécial Chàracters",
}


@pytest.fixture(autouse=True, scope="session")
def require_tools() -> None:
    """Skip integration tests when git or a POSIX shell is not available."""
    missing = [tool for tool in ("git", "sh") if shutil.which(tool) is None]
    if missing:
        pytest.skip(f"Integration tests require: {', '.join(missing)}")


@pytest.fixture
def stub_bin(tmp_path: Path) -> Path:
    """Directory holding the stub gh executable."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    write_stub_gh(bin_dir, ISSUE_TITLES)
    return bin_dir


@pytest.fixture
def repository(tmp_path: Path, stub_bin: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Git repository used as the working directory, with the stub gh first on PATH."""
    repo = tmp_path / "repo"
    init_repository(repo)
    monkeypatch.setenv("PATH", f"{stub_bin}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.chdir(repo)
    monkeypatch.delenv("DEBUG", raising=False)
    return repo

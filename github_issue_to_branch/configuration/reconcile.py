"""Reconciles configuration between CLI arguments and environment variables."""

from github_issue_to_branch.configuration.env import Settings, settings
from github_issue_to_branch.configuration.models import BranchFromIssuesConfig


def reconcile_configuration(cli_debug: bool | None = None, env_settings: Settings | None = None) -> BranchFromIssuesConfig:
    """Combine CLI arguments with environment settings.

    Args:
        cli_debug (bool | None): Value of the --debug flag, or None if it was not given.
        env_settings (Settings | None): Settings to fall back on. Defaults to the
            settings loaded from the environment and the .env file.

    Returns:
        BranchFromIssuesConfig: The resolved configuration. A CLI value always wins.
    """
    env_settings = env_settings if env_settings is not None else settings
    debug = cli_debug if cli_debug is not None else env_settings.DEBUG
    return BranchFromIssuesConfig(debug=debug)

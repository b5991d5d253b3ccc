"""Fixtures for unit tests."""

from typing import Generator

import pytest
import structlog

from .utils import ExecutorFactory, build_executor


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def executor_factory() -> ExecutorFactory:
    """Factory for mock executors routed by command prefix."""
    return build_executor


@pytest.fixture
def installed_tools() -> dict[str, str | None]:
    """Routes reporting that gh and git are installed."""
    return {
        "command -v gh": "/usr/bin/gh",
        "command -v git": "/usr/bin/git",
    }

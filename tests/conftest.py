"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from nette_hooks.logging import configure_logging


@pytest.fixture(autouse=True)
def hook_log(tmp_path_factory: pytest.TempPathFactory) -> Generator[Path, None, None]:
    """Send hook logs to a per-test file so stdout and stderr stay clean."""
    log_file = tmp_path_factory.mktemp("log") / "hooks.log"
    configure_logging("debug", "json", log_file)
    yield log_file

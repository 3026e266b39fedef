"""Tests for the hook registry."""

import shlex
import sys

import pytest

from nette_hooks.hooks import lint_neon
from nette_hooks.hooks.registry import HOOKS, get_hook, hook_command


def test_hook_names() -> None:
    assert list(HOOKS) == ["fix-php-style", "lint-latte", "lint-neon"]


def test_get_hook() -> None:
    assert get_hook("lint-neon") is lint_neon.HOOK
    with pytest.raises(KeyError):
        get_hook("lint-yaml")


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell quoting")
def test_hook_command_uses_current_interpreter() -> None:
    """Test the registered command does not depend on python being on PATH."""
    assert hook_command("lint-neon") == (
        f"{shlex.quote(sys.executable)} -m nette_hooks.hooks.lint_neon"
    )

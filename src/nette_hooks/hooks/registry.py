"""Registry of the available editor hooks."""

from __future__ import annotations

import os
import shlex
import subprocess
import sys

from nette_hooks.hooks import fix_php_style, lint_latte, lint_neon
from nette_hooks.hooks.runner import EditorHook

HOOK_MODULES = {
    fix_php_style.HOOK.name: fix_php_style.__name__,
    lint_latte.HOOK.name: lint_latte.__name__,
    lint_neon.HOOK.name: lint_neon.__name__,
}

HOOKS: dict[str, EditorHook] = {
    hook.name: hook
    for hook in (fix_php_style.HOOK, lint_latte.HOOK, lint_neon.HOOK)
}


def get_hook(name: str) -> EditorHook:
    """Get a hook by name.

    Raises:
        KeyError: If no hook has this name
    """
    return HOOKS[name]


def python_command() -> str:
    """Get this interpreter quoted for the agent's shell."""
    if os.name == "nt":
        return subprocess.list2cmdline([sys.executable])
    return shlex.quote(sys.executable)


def hook_command(name: str) -> str:
    """Get the shell command that runs a hook as a module.

    Uses the interpreter nette-hooks is installed in rather than whatever
    python is first on the agent's PATH.
    """
    return f"{python_command()} -m {HOOK_MODULES[name]}"

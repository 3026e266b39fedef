"""Integration tests for Nette hooks: standalone invocation.

Verifies that:
1. Each hook can be invoked standalone via `python -m nette_hooks.hooks.<module>`
2. Malformed input exits 0 with no output
3. Helper failures surface on stderr with exit code 2
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[3] / "src"

HOOK_MODULES = [
    "nette_hooks.hooks.fix_php_style",
    "nette_hooks.hooks.lint_latte",
    "nette_hooks.hooks.lint_neon",
]

posix_only = pytest.mark.skipif(
    sys.platform == "win32",
    reason="fake helpers are POSIX shell scripts",
)


@pytest.fixture
def hook_env(tmp_path: Path) -> dict[str, str]:
    """Create isolated environment for hook subprocess tests.

    Returns env dict with the hook home, HOME and Composer home pointing
    to temp dirs.
    """
    home = tmp_path / "home"
    home.mkdir()

    env = os.environ.copy()
    env["NETTE_HOOKS_HOME"] = str(tmp_path / ".nette-hooks")
    env["NETTE_HOOKS_LOG_LEVEL"] = "debug"
    env["HOME"] = str(home)
    env["COMPOSER_HOME"] = str(tmp_path / "composer")
    env.pop("XDG_CONFIG_HOME", None)
    env.pop("NETTE_HOOKS_HELPER_TIMEOUT", None)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(SRC_DIR), env.get("PYTHONPATH", "")) if p
    )
    return env


def run_module(module: str, stdin: str, env: dict[str, str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", module],
        input=stdin,
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )


class TestHookStandaloneInvocation:
    """Each hook can be invoked standalone and skips quietly."""

    @pytest.mark.parametrize("module", HOOK_MODULES)
    def test_unrelated_file(self, module: str, hook_env: dict[str, str], tmp_path: Path) -> None:
        target = tmp_path / "notes.txt"
        target.write_text("hello")
        stdin = json.dumps({"tool_input": {"file_path": str(target)}, "cwd": str(tmp_path)})

        proc = run_module(module, stdin, hook_env)

        assert proc.returncode == 0, f"stderr: {proc.stderr}"
        assert proc.stdout == ""
        assert proc.stderr == ""

    @pytest.mark.parametrize("module", HOOK_MODULES)
    @pytest.mark.parametrize("stdin", ["", "this is not json {{{garbage>>>", "[1, 2]", "null"])
    def test_malformed_input(self, module: str, stdin: str, hook_env: dict[str, str]) -> None:
        proc = run_module(module, stdin, hook_env)

        assert proc.returncode == 0, f"stderr: {proc.stderr}"
        assert proc.stdout == ""
        assert proc.stderr == ""

    def test_helper_not_installed(self, hook_env: dict[str, str], tmp_path: Path) -> None:
        target = tmp_path / "Model.php"
        target.write_text("<?php")
        stdin = json.dumps({"tool_input": {"file_path": str(target)}, "cwd": str(tmp_path)})

        proc = run_module("nette_hooks.hooks.fix_php_style", stdin, hook_env)

        assert proc.returncode == 0, f"stderr: {proc.stderr}"
        assert proc.stderr == ""


@posix_only
class TestHookReports:
    """Helper verdicts are relayed through the exit code and stderr."""

    def test_neon_error_reported(
        self,
        hook_env: dict[str, str],
        project: Path,
        make_helper: Callable[[Path, str], Path],
    ) -> None:
        make_helper(
            project / "vendor" / "bin" / "neon-lint",
            'echo "line 4: unexpected token"\nexit 1',
        )
        target = project / "my config.neon"
        target.write_text("services: [")
        stdin = json.dumps({"tool_input": {"file_path": str(target)}, "cwd": str(project)})

        proc = run_module("nette_hooks.hooks.lint_neon", stdin, hook_env)

        assert proc.returncode == 2
        assert proc.stdout == ""
        assert f"NEON syntax error in {target}:" in proc.stderr
        assert "line 4: unexpected token" in proc.stderr

    def test_php_fixed_silently(
        self,
        hook_env: dict[str, str],
        project: Path,
        make_helper: Callable[[Path, str], Path],
    ) -> None:
        composer_home = Path(hook_env["COMPOSER_HOME"])
        make_helper(composer_home / "vendor" / "bin" / "ecs", 'echo "[OK] fixed"\nexit 0')
        target = project / "Model.php"
        target.write_text("<?php")
        stdin = json.dumps({"tool_input": {"file_path": str(target)}, "cwd": str(project)})

        proc = run_module("nette_hooks.hooks.fix_php_style", stdin, hook_env)

        assert proc.returncode == 0, f"stderr: {proc.stderr}"
        assert proc.stdout == ""
        assert proc.stderr == ""

    def test_timeout_from_settings(
        self,
        hook_env: dict[str, str],
        project: Path,
        make_helper: Callable[[Path, str], Path],
        tmp_path: Path,
    ) -> None:
        make_helper(project / "latte-lint", "exec sleep 10")
        target = project / "app.latte"
        target.write_text("{block}")
        stdin = json.dumps({"tool_input": {"file_path": str(target)}, "cwd": str(project)})
        hook_env["NETTE_HOOKS_HELPER_TIMEOUT"] = "0.5"

        proc = run_module("nette_hooks.hooks.lint_latte", stdin, hook_env)

        assert proc.returncode == 0
        assert proc.stderr == ""
        log_file = tmp_path / ".nette-hooks" / "hooks.log"
        assert "hook.helper_timeout" in log_file.read_text()


def test_invalid_settings_skip(hook_env: dict[str, str], tmp_path: Path) -> None:
    """Test a broken NETTE_HOOKS_ variable does not block the agent."""
    target = tmp_path / "common.neon"
    target.write_text("a: b")
    stdin = json.dumps({"tool_input": {"file_path": str(target)}, "cwd": str(tmp_path)})
    hook_env["NETTE_HOOKS_HELPER_TIMEOUT"] = "soon"

    proc = run_module("nette_hooks.hooks.lint_neon", stdin, hook_env)

    assert proc.returncode == 0
    assert proc.stderr == ""

"""Editor hook runner.

Every Nette hook follows the same pass: decode the hook input, check that the
edited file is one the hook handles, find the helper, run it on the file and
relay a failure back to the agent. The hooks differ only in their EditorHook
configuration.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from nette_hooks.hooks.common import (
    EXIT_OK,
    EXIT_REPORTED,
    HookInput,
    file_extension,
    get_cwd,
    get_file_path,
    read_json_input,
    write_report,
)
from nette_hooks.hooks.discovery import WINDOWS, HelperLocator, current_os_family

if TYPE_CHECKING:
    from nette_hooks.config import HookSettings

logger = structlog.get_logger(__name__)

# cmd.exe expands or splits on these even inside double quotes
CMD_UNSAFE_CHARS = frozenset('"%\r\n\x00')


class UnsafeArgumentError(ValueError):
    """Argument cannot be passed to a batch helper as one literal word."""


def cmd_command_line(argv: list[str]) -> str:
    """Build a cmd.exe command line that runs a batch helper.

    Windows always starts .bat files through cmd.exe, which does not follow
    the quoting rules subprocess applies to argv. Every argument is wrapped
    in double quotes, which makes &, |, <, >, ^ and spaces literal. Delayed
    expansion is turned off so ! is literal too.

    Args:
        argv: Helper path followed by its arguments

    Returns:
        Command line for CreateProcess

    Raises:
        UnsafeArgumentError: If an argument holds a character cmd.exe
            interprets inside quotes
    """
    for arg in argv:
        if CMD_UNSAFE_CHARS.intersection(arg):
            raise UnsafeArgumentError(f"cannot quote {arg!r} for cmd.exe")
    quoted = " ".join(f'"{arg}"' for arg in argv)
    # /s strips only the outermost quote pair
    return f'cmd.exe /d /v:off /s /c "{quoted}"'


@dataclass(frozen=True)
class EditorHook:
    """Configuration of one editor hook.

    Attributes:
        name: Hook name used by the CLI and installer
        extension: File extension the hook handles, without the dot
        locate: Builds the helper location for a cwd, OS family and environment
        header: Report header; "{file_path}" is replaced with the edited file
        subcommand: Arguments placed between the helper and the file path
        description: One-line summary for listings
    """

    name: str
    extension: str
    locate: HelperLocator
    header: str
    subcommand: tuple[str, ...] = ()
    description: str = ""

    def applies_to(self, file_path: str) -> bool:
        """Check whether the hook handles this file path."""
        return bool(file_path) and file_extension(file_path) == self.extension

    def build_command(
        self,
        helper: Path,
        file_path: str,
        os_family: str = "",
    ) -> list[str] | str:
        """Build the helper command; each argument reaches the helper verbatim.

        Returns an argv list, or a complete cmd.exe command line on Windows,
        where helpers are batch files.

        Raises:
            UnsafeArgumentError: If a Windows argument cannot be quoted
        """
        argv = [str(helper), *self.subcommand, file_path]
        if os_family == WINDOWS:
            return cmd_command_line(argv)
        return argv

    def format_header(self, file_path: str) -> str:
        return self.header.format(file_path=file_path)


@dataclass(frozen=True)
class HelperResult:
    """Outcome of a helper run."""

    exit_code: int
    output: str

    @property
    def passed(self) -> bool:
        return self.exit_code == 0


def run_helper(command: list[str] | str, timeout: float | None = None) -> HelperResult:
    """Run a helper with stderr merged into stdout.

    No shell is involved on POSIX, so file paths with spaces or shell
    metacharacters stay single arguments. A string command is a Windows
    command line built by cmd_command_line and is passed through unchanged.

    Args:
        command: Helper argv, or a prepared Windows command line
        timeout: Seconds to wait, or None to wait until it exits

    Returns:
        Exit code and combined output

    Raises:
        OSError: If the helper cannot be started
        subprocess.TimeoutExpired: If the helper outlives the timeout
    """
    proc = subprocess.run(
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        timeout=timeout,
    )
    return HelperResult(exit_code=proc.returncode, output=proc.stdout or "")


def run_hook(
    hook: EditorHook,
    input_data: HookInput | dict[str, Any],
    os_family: str | None = None,
    environ: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> int:
    """Run one hook pass.

    Args:
        hook: Hook configuration
        input_data: Decoded hook input
        os_family: OS family for helper discovery (defaults to the current one)
        environ: Environment for helper discovery (defaults to os.environ)
        timeout: Seconds to wait for the helper

    Returns:
        EXIT_OK when there is nothing to report, EXIT_REPORTED when the
        helper failed (its report is already on stderr)
    """
    file_path = get_file_path(input_data)
    log = logger.bind(hook=hook.name, file_path=file_path)

    if not hook.applies_to(file_path):
        log.debug("hook.skipped", reason="extension")
        return EXIT_OK
    if not os.path.exists(file_path):
        log.debug("hook.skipped", reason="missing_file")
        return EXIT_OK

    if os_family is None:
        os_family = current_os_family()
    if environ is None:
        environ = os.environ

    location = hook.locate(get_cwd(input_data), os_family, environ)
    helper = location.resolve()
    if helper is None:
        log.debug(
            "hook.skipped",
            reason="helper_not_installed",
            roots=[str(r) for r in location.roots],
        )
        return EXIT_OK

    try:
        command = hook.build_command(helper, file_path, os_family)
    except UnsafeArgumentError as e:
        log.warning("hook.unsafe_argument", helper=str(helper), error=str(e))
        return EXIT_OK

    try:
        result = run_helper(command, timeout=timeout)
    except subprocess.TimeoutExpired:
        log.warning("hook.helper_timeout", helper=str(helper), timeout=timeout)
        return EXIT_OK
    except OSError as e:
        log.warning("hook.helper_failed", helper=str(helper), error=str(e))
        return EXIT_OK

    if result.passed:
        log.debug("hook.passed", helper=str(helper))
        return EXIT_OK

    log.info("hook.reported", helper=str(helper), exit_code=result.exit_code)
    write_report(hook.format_header(file_path), result.output)
    return EXIT_REPORTED


def load_settings() -> HookSettings | None:
    """Get the settings singleton.

    Returns:
        Settings, or None when NETTE_HOOKS_* variables are invalid
    """
    from pydantic import ValidationError

    try:
        from nette_hooks.config import settings
    except ValidationError:
        return None
    return settings


def main(hook: EditorHook) -> None:
    """Entry point shared by all hook scripts."""
    settings = load_settings()
    if settings is None:
        # Invalid NETTE_HOOKS_* variables must not block the agent
        sys.exit(EXIT_OK)

    from nette_hooks.logging import configure_logging

    configure_logging(settings.log_level, settings.log_format, settings.log_file)

    input_data = read_json_input()
    exit_code = run_hook(hook, input_data, timeout=settings.helper_timeout)
    sys.exit(exit_code)

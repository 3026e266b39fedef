"""Helper discovery for Nette hooks.

A helper is an external fixer or linter. Hooks look for it under an ordered
list of candidate root directories: the first root that exists wins, and the
helper must then exist under that root. A missing helper is not an error;
the hook simply has nothing to run.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

WINDOWS = "Windows"


def current_os_family() -> str:
    """Get the OS family of the running interpreter (e.g. "Windows", "Linux")."""
    return platform.system()


def helper_suffix(os_family: str) -> str:
    """Get the filename suffix of helper scripts on an OS family."""
    return ".bat" if os_family == WINDOWS else ""


@dataclass(frozen=True)
class HelperLocation:
    """Where to look for a helper.

    Attributes:
        roots: Candidate root directories in priority order
        relative: Helper path under the chosen root, without suffix
        suffix: Filename suffix appended to the helper name
    """

    roots: tuple[Path, ...]
    relative: str
    suffix: str = ""

    def find_root(self) -> Path | None:
        """Get the first candidate root that is an existing directory."""
        for root in self.roots:
            if root.is_dir():
                return root
        return None

    def resolve(self) -> Path | None:
        """Resolve the helper path.

        Returns:
            Path to the helper, or None when it is not installed
        """
        root = self.find_root()
        if root is None:
            return None
        helper = root / f"{self.relative}{self.suffix}"
        if not helper.exists():
            return None
        return helper


# (cwd, os_family, environ) -> HelperLocation
HelperLocator = Callable[[str, str, Mapping[str, str]], HelperLocation]


def composer_home_candidates(
    os_family: str,
    environ: Mapping[str, str],
) -> list[Path]:
    """Get candidate Composer home directories in priority order.

    Args:
        os_family: OS family name as returned by platform.system()
        environ: Environment variables to consult

    Returns:
        Candidate directories; unset variables contribute nothing
    """
    composer_home = environ.get("COMPOSER_HOME")

    if os_family == WINDOWS:
        appdata = environ.get("APPDATA")
        dirs = [
            composer_home or None,
            f"{appdata}/Composer" if appdata else None,
        ]
    else:
        home = environ.get("HOME")
        xdg_config = environ.get("XDG_CONFIG_HOME") or (
            f"{home}/.config" if home else None
        )
        dirs = [
            composer_home or None,
            f"{xdg_config}/composer" if xdg_config else None,
            f"{home}/.composer" if home else None,
        ]

    return [Path(d) for d in dirs if d]


def composer_global_helper(name: str) -> HelperLocator:
    """Locate a helper installed with `composer global require`.

    Args:
        name: Helper name under the Composer home's vendor/bin

    Returns:
        Locator that ignores cwd
    """

    def locate(cwd: str, os_family: str, environ: Mapping[str, str]) -> HelperLocation:
        return HelperLocation(
            roots=tuple(composer_home_candidates(os_family, environ)),
            relative=f"vendor/bin/{name}",
            suffix=helper_suffix(os_family),
        )

    return locate


def project_helper(relative: str) -> HelperLocator:
    """Locate a helper inside the agent's project directory.

    Args:
        relative: Helper path relative to cwd (e.g. "vendor/bin/neon-lint")

    Returns:
        Locator rooted at cwd, or at this process's directory when cwd is empty
    """

    def locate(cwd: str, os_family: str, environ: Mapping[str, str]) -> HelperLocation:
        root = Path(cwd) if cwd else Path(os.getcwd())
        return HelperLocation(
            roots=(root,),
            relative=relative,
            suffix=helper_suffix(os_family),
        )

    return locate

"""Nette hooks install commands.

Registers the editor hooks in the agent's settings.json.
"""

from __future__ import annotations

from pathlib import Path

import click

from nette_hooks.hooks.registry import HOOKS
from nette_hooks.install.config_merge import (
    ConfigError,
    register_hooks,
    unregister_hooks,
)


def _default_settings_path() -> Path:
    from nette_hooks.hooks.runner import load_settings

    settings = load_settings()
    if settings is None:
        raise click.ClickException("Invalid NETTE_HOOKS_* environment variables")
    return settings.claude_settings


@click.command("install")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="settings.json to update (default: ~/.claude/settings.json)",
)
@click.option(
    "--hook",
    "names",
    type=click.Choice(sorted(HOOKS)),
    multiple=True,
    help="Hook to register; repeat for several (default: all)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show what would be done without making changes",
)
def install_cmd(settings_path: Path | None, names: tuple[str, ...], dry_run: bool) -> None:
    """Register the hooks as PostToolUse hooks.

    Re-running replaces previously registered Nette hooks and leaves
    other hooks untouched.

    Examples:

        nette-hooks install

        nette-hooks install --hook lint-latte --hook lint-neon
    """
    target = settings_path or _default_settings_path()
    try:
        message = register_hooks(target, names or None, dry_run=dry_run)
    except ConfigError as e:
        raise click.ClickException(str(e))
    click.echo(message)


@click.command("uninstall")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="settings.json to update (default: ~/.claude/settings.json)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show what would be done without making changes",
)
def uninstall_cmd(settings_path: Path | None, dry_run: bool) -> None:
    """Remove the hooks from settings.json."""
    target = settings_path or _default_settings_path()
    try:
        message = unregister_hooks(target, dry_run=dry_run)
    except ConfigError as e:
        raise click.ClickException(str(e))
    click.echo(message)

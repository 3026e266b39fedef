"""Nette hooks run and inspection commands."""

from __future__ import annotations

import os

import click

from nette_hooks.hooks.registry import HOOKS, get_hook

HOOK_NAME = click.Choice(sorted(HOOKS))


@click.command()
@click.argument("name", type=HOOK_NAME)
def run(name: str) -> None:
    """Run a hook on hook input read from stdin.

    NAME is the hook name (e.g., lint-neon). Exits 0 when there is nothing
    to report and 2 when the helper reported problems.
    """
    from nette_hooks.hooks.common import EXIT_OK, read_json_input
    from nette_hooks.hooks.runner import load_settings, run_hook
    from nette_hooks.logging import configure_logging

    settings = load_settings()
    if settings is None:
        # Same fail-open exit as the hook scripts
        raise SystemExit(EXIT_OK)

    # Hook output belongs to the agent; log to the file like the scripts do
    configure_logging(settings.log_level, settings.log_format, settings.log_file)

    exit_code = run_hook(
        get_hook(name),
        read_json_input(),
        timeout=settings.helper_timeout,
    )
    raise SystemExit(exit_code)


@click.command("list")
def list_cmd() -> None:
    """List available hooks."""
    from nette_hooks.hooks.registry import hook_command

    click.echo("Available Hooks")
    click.echo("=" * 60)
    click.echo("")

    for name, hook in sorted(HOOKS.items()):
        click.echo(f"{name}:")
        click.echo(f"  Files: *.{hook.extension}")
        if hook.description:
            click.echo(f"  {hook.description}")
        click.echo(f"  Command: {hook_command(name)}")
        click.echo("")


@click.command()
@click.argument("name", type=HOOK_NAME)
@click.option(
    "--cwd",
    "cwd",
    default="",
    help="Project directory the agent runs in (default: current directory)",
)
def locate(name: str, cwd: str) -> None:
    """Show where a hook looks for its helper.

    NAME is the hook name (e.g., fix-php-style).
    """
    from nette_hooks.hooks.discovery import current_os_family

    hook = get_hook(name)
    location = hook.locate(cwd, current_os_family(), os.environ)

    click.echo(f"Hook: {name}")
    click.echo(f"Helper: {location.relative}{location.suffix}")
    click.echo("Candidate roots:")
    if not location.roots:
        click.echo("  (none)")
    for root in location.roots:
        status = "[found]" if root.is_dir() else "[missing]"
        click.echo(f"  {status} {root}")

    helper = location.resolve()
    if helper is None:
        click.echo("Resolved: not installed (hook will skip)")
    else:
        click.echo(f"Resolved: {helper}")

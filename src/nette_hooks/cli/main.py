"""Nette hooks CLI main entry point.

This module provides the main CLI interface for managing the editor hooks.
"""

import click

from nette_hooks import __version__


@click.group()
@click.version_option(version=__version__, prog_name="nette-hooks")
def cli() -> None:
    """nette-hooks - Nette fixers and linters as agent editor hooks.

    Run, inspect, and register the PostToolUse hooks.
    """
    from nette_hooks.hooks.runner import load_settings
    from nette_hooks.logging import configure_logging

    # Subcommands report invalid settings themselves
    settings = load_settings()
    if settings is not None:
        configure_logging(settings.log_level, "console")


# Import and register subcommands
from nette_hooks.cli.hooks import list_cmd, locate, run  # noqa: E402
from nette_hooks.cli.install_cmd import install_cmd, uninstall_cmd  # noqa: E402

cli.add_command(run)
cli.add_command(list_cmd)
cli.add_command(locate)
cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)

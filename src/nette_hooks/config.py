"""Nette hooks configuration module.

Provides centralized configuration for hooks and the management CLI.
All settings support environment variable overrides with NETTE_HOOKS_ prefix.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default paths
NETTE_HOOKS_HOME = Path.home() / ".nette-hooks"
CLAUDE_SETTINGS = Path.home() / ".claude" / "settings.json"


class HookSettings(BaseSettings):
    """Hook configuration.

    All settings can be overridden via environment variables with NETTE_HOOKS_
    prefix. For example, NETTE_HOOKS_HELPER_TIMEOUT=30 bounds helper runs to
    thirty seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="NETTE_HOOKS_",
    )

    home: Path = Field(
        default=NETTE_HOOKS_HOME,
        description="Base directory for hook logs",
    )
    log_level: str = Field(
        default="warning",
        description="Logging level (debug, info, warning, error)",
    )
    log_format: str = Field(
        default="json",
        description="Log output format (json, console)",
    )
    helper_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for a helper; unset waits indefinitely",
    )
    claude_settings: Path = Field(
        default=CLAUDE_SETTINGS,
        description="Agent settings.json that install/uninstall edit",
    )

    @property
    def log_file(self) -> Path:
        """Rotated log file written by hooks."""
        return self.home / "hooks.log"


# Module-level singleton
settings = HookSettings()

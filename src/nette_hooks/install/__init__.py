"""Nette hooks install module.

Registers the editor hooks in the agent's settings.json.
"""

from nette_hooks.install.config_merge import (
    ConfigError,
    atomic_write_json,
    merge_hooks,
    read_json_config,
    register_hooks,
    remove_hooks,
    unregister_hooks,
)

__all__ = [
    "ConfigError",
    "atomic_write_json",
    "merge_hooks",
    "read_json_config",
    "register_hooks",
    "remove_hooks",
    "unregister_hooks",
]

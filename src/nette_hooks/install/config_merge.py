"""JSON configuration merging utilities.

Provides safe JSON config reading, hook merging, and atomic writing.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from nette_hooks.hooks.registry import HOOKS, hook_command

logger = structlog.get_logger(__name__)

HOOK_EVENT = "PostToolUse"
EDIT_MATCHER = "Edit|Write|MultiEdit"


class ConfigError(Exception):
    """Error during config manipulation."""

    pass


def read_json_config(path: Path) -> dict[str, Any]:
    """Load a settings file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed object; empty dict when the file is missing or blank

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if not content.strip():
        return {}
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid JSON in {path}: expected object, got {type(data).__name__}"
        )
    return data


def atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    """Replace a settings file in one rename.

    The agent may read settings.json at any moment, so the content goes to
    a sibling temp file first.

    Args:
        path: Target path
        data: Object to serialize

    Raises:
        ConfigError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
    except OSError as e:
        raise ConfigError(f"Cannot write to {path.parent}: {e}") from e

    temp_path = Path(temp_name)
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except (OSError, TypeError, ValueError) as e:
        temp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to write {path}: {e}") from e


def _is_nette_command(command: Any) -> bool:
    """Check if a single hook command runs one of our hooks."""
    if not isinstance(command, dict):
        return False
    cmd = command.get("command", "")
    return isinstance(cmd, str) and "nette_hooks.hooks." in cmd


def _strip_nette_commands(entries: list[Any]) -> list[Any]:
    """Remove our commands from PostToolUse entries.

    Other commands sharing an entry with ours are kept; an entry is dropped
    only when nothing else is left in it.
    """
    result: list[Any] = []
    for entry in entries:
        commands = entry.get("hooks") if isinstance(entry, dict) else None
        if not isinstance(commands, list):
            result.append(entry)
            continue
        kept = [c for c in commands if not _is_nette_command(c)]
        if len(kept) == len(commands):
            result.append(entry)
        elif kept:
            result.append({**entry, "hooks": kept})
    return result


def merge_hooks(
    settings: dict[str, Any],
    names: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Merge Nette hooks into settings.

    Existing Nette hook commands are replaced, so merging twice is a no-op.

    Args:
        settings: Existing settings.json content
        names: Hooks to register (all hooks when None)

    Returns:
        Updated settings dict (original not mutated)

    Raises:
        ConfigError: If a hook name is unknown
    """
    selected = list(HOOKS) if names is None else list(names)
    unknown = [name for name in selected if name not in HOOKS]
    if unknown:
        raise ConfigError(f"Unknown hook(s): {', '.join(unknown)}")

    result = settings.copy()

    existing_hooks = result.get("hooks", {})
    if not isinstance(existing_hooks, dict):
        existing_hooks = {}
    result["hooks"] = dict(existing_hooks)

    entries = result["hooks"].get(HOOK_EVENT, [])
    if not isinstance(entries, list):
        entries = []
    entries = _strip_nette_commands(entries)

    if selected:
        entries.append(
            {
                "matcher": EDIT_MATCHER,
                "hooks": [
                    {"type": "command", "command": hook_command(name)}
                    for name in selected
                ],
            }
        )

    result["hooks"][HOOK_EVENT] = entries
    return result


def remove_hooks(settings: dict[str, Any]) -> dict[str, Any]:
    """Remove Nette hooks from settings.

    Args:
        settings: Existing settings.json content

    Returns:
        Updated settings dict (original not mutated)
    """
    result = settings.copy()
    existing_hooks = result.get("hooks")
    if not isinstance(existing_hooks, dict):
        return result

    result["hooks"] = dict(existing_hooks)
    entries = result["hooks"].get(HOOK_EVENT)
    if not isinstance(entries, list):
        return result

    remaining = _strip_nette_commands(entries)
    if remaining:
        result["hooks"][HOOK_EVENT] = remaining
    else:
        del result["hooks"][HOOK_EVENT]
    return result


def register_hooks(
    settings_path: Path,
    names: Iterable[str] | None = None,
    dry_run: bool = False,
) -> str:
    """Register Nette hooks in settings.json.

    Args:
        settings_path: Path to the agent's settings.json
        names: Hooks to register (all hooks when None)
        dry_run: If True, don't write changes

    Returns:
        Description of what was done

    Raises:
        ConfigError: If registration fails
    """
    settings = read_json_config(settings_path)
    updated = merge_hooks(settings, names)

    if dry_run:
        return f"Would update {settings_path} with Nette hooks"

    atomic_write_json(settings_path, updated)
    logger.info("install.registered", path=str(settings_path))

    return f"Registered Nette hooks in {settings_path}"


def unregister_hooks(
    settings_path: Path,
    dry_run: bool = False,
) -> str:
    """Remove Nette hooks from settings.json.

    Args:
        settings_path: Path to the agent's settings.json
        dry_run: If True, don't write changes

    Returns:
        Description of what was done

    Raises:
        ConfigError: If the file cannot be read or written
    """
    if not settings_path.exists():
        return f"Nothing to remove: {settings_path} does not exist"

    settings = read_json_config(settings_path)
    updated = remove_hooks(settings)

    if updated == settings:
        return f"No Nette hooks registered in {settings_path}"
    if dry_run:
        return f"Would remove Nette hooks from {settings_path}"

    atomic_write_json(settings_path, updated)
    logger.info("install.unregistered", path=str(settings_path))

    return f"Removed Nette hooks from {settings_path}"

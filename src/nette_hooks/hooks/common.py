"""Shared utilities for Nette hooks.

Hooks communicate via stdin, stderr and the exit code:
- Input: JSON object describing the edited file
- Output: nothing on success, a report on stderr when the helper complains
- Exit: 0 for nothing to report, 2 for a reported problem
"""

from __future__ import annotations

import json
import sys
from typing import Any, TypedDict

# Exit codes understood by the invoking agent
EXIT_OK = 0
EXIT_REPORTED = 2


class ToolInput(TypedDict, total=False):
    """Tool arguments of the edit that triggered the hook."""

    file_path: str


class HookInput(TypedDict, total=False):
    """Input for PostToolUse editor hooks."""

    tool_input: ToolInput
    cwd: str


def read_json_input() -> dict[str, Any]:
    """Read JSON from stdin.

    Returns:
        Parsed JSON object, or empty dict on error
    """
    try:
        raw = sys.stdin.read()
        if not raw.strip():
            return {}
        result = json.loads(raw)
        if not isinstance(result, dict):
            return {}
        return result
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        return {}


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def get_file_path(input_data: HookInput | dict[str, Any]) -> str:
    """Get the edited file path, or empty string when absent."""
    tool_input = input_data.get("tool_input")
    if not isinstance(tool_input, dict):
        return ""
    return _as_str(tool_input.get("file_path"))


def get_cwd(input_data: HookInput | dict[str, Any]) -> str:
    """Get the agent's working directory, or empty string when absent."""
    return _as_str(input_data.get("cwd"))


def file_extension(file_path: str) -> str:
    """Get the extension of a path: the text after the last dot of its name.

    Args:
        file_path: Path as given by the agent

    Returns:
        Extension without the dot, or empty string
    """
    name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def write_report(header: str, output: str) -> None:
    """Write a helper report to stderr.

    Args:
        header: One-line context naming the file
        output: Combined helper output
    """
    lines = [line.rstrip() for line in output.splitlines()]
    sys.stderr.write(f"{header}\n")
    sys.stderr.write("\n".join(lines) + "\n")
    sys.stderr.flush()

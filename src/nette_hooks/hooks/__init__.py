"""Nette editor hooks for agent integration.

Each hook runs after the agent edits a file, picks the files it handles by
extension, and runs an optional external helper on them:
- fix-php-style: ecs fix from the global Composer home (*.php)
- lint-latte: the project's latte-lint script (*.latte)
- lint-neon: the project's vendor/bin/neon-lint (*.neon)

Hooks communicate via stdin, stderr and the exit code (see common).
"""

from nette_hooks.hooks.common import (
    EXIT_OK,
    EXIT_REPORTED,
    HookInput,
    ToolInput,
    file_extension,
    get_cwd,
    get_file_path,
    read_json_input,
    write_report,
)
from nette_hooks.hooks.discovery import (
    HelperLocation,
    composer_global_helper,
    composer_home_candidates,
    current_os_family,
    helper_suffix,
    project_helper,
)
from nette_hooks.hooks.runner import EditorHook, HelperResult, run_helper, run_hook

__all__ = [
    "EXIT_OK",
    "EXIT_REPORTED",
    "EditorHook",
    "HelperLocation",
    "HelperResult",
    "HookInput",
    "ToolInput",
    "composer_global_helper",
    "composer_home_candidates",
    "current_os_family",
    "file_extension",
    "get_cwd",
    "get_file_path",
    "helper_suffix",
    "project_helper",
    "read_json_input",
    "run_helper",
    "run_hook",
    "write_report",
]

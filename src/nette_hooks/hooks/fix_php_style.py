"""PostToolUse hook: fix PHP coding standards after editing PHP files.

Runs `ecs fix` from nette/coding-standard installed with
`composer global require`. Silently skips when it is not installed.

Input (stdin): {"tool_input": {"file_path": "..."}, "cwd": "..."}
Output (stderr): remaining coding standard issues, with exit code 2
"""

from __future__ import annotations

from nette_hooks.hooks.discovery import composer_global_helper
from nette_hooks.hooks.runner import EditorHook, main as run_main

HOOK = EditorHook(
    name="fix-php-style",
    extension="php",
    locate=composer_global_helper("ecs"),
    subcommand=("fix",),
    header="Could not fix all coding standard issues in {file_path}:",
    description="Fix PHP coding standards with the global ecs",
)


def main() -> None:
    """Main entry point for the PHP style fixer hook."""
    run_main(HOOK)


if __name__ == "__main__":
    main()

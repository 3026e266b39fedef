"""PostToolUse hook: validate NEON files after editing."""

from __future__ import annotations

from nette_hooks.hooks.discovery import project_helper
from nette_hooks.hooks.runner import EditorHook, main as run_main

HOOK = EditorHook(
    name="lint-neon",
    extension="neon",
    locate=project_helper("vendor/bin/neon-lint"),
    header="NEON syntax error in {file_path}:",
    description="Validate NEON files with vendor/bin/neon-lint",
)


def main() -> None:
    """Main entry point for the NEON linter hook."""
    run_main(HOOK)


if __name__ == "__main__":
    main()

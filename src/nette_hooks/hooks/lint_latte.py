"""PostToolUse hook: validate Latte templates after editing.

Only runs if the project has a custom latte-lint script in its root.
"""

from __future__ import annotations

from nette_hooks.hooks.discovery import project_helper
from nette_hooks.hooks.runner import EditorHook, main as run_main

HOOK = EditorHook(
    name="lint-latte",
    extension="latte",
    locate=project_helper("latte-lint"),
    header="Latte template error in {file_path}:",
    description="Validate Latte templates with the project's latte-lint",
)


def main() -> None:
    """Main entry point for the Latte linter hook."""
    run_main(HOOK)


if __name__ == "__main__":
    main()

"""Nette editor hooks.

PostToolUse hooks that run Nette coding-standard and syntax helpers on files
edited by an agent.
"""

__version__ = "0.1.0"

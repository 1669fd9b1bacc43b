"""
Project context — which project the editor is working on.

The root is set ONCE at startup by the entry point that launches the app:

    - Web server:   server.py → context.set_project_root(root)
    - CLI:          main.py  → context.set_project_root(root)

get_project_root() returns None when unset; callers that need a root
fall back to the current working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_project_root: Optional[Path] = None


def set_project_root(root: Path) -> None:
    """Register the project root for the current process."""
    global _project_root
    _project_root = root


def get_project_root() -> Optional[Path]:
    """Return the current project root, or None if not yet set."""
    return _project_root


def resolve_project_root() -> Path:
    """Registered project root, else the working directory."""
    return _project_root or Path.cwd()

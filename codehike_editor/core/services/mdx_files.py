"""
MDX documents — list, read and write files under the project.

Channel-independent: no Flask or HTTP dependency. Errors come back as
``{"error": ..., "_status": ...}`` dicts for the route layer.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve_safe_path(project_root: Path, relative: str) -> Path | None:
    """Resolve a relative path safely, preventing directory traversal."""
    try:
        resolved = (project_root / relative).resolve()
        resolved.relative_to(project_root.resolve())
        return resolved
    except (ValueError, RuntimeError):
        return None


def list_mdx_files(project_root: Path, content_dir: str = "app") -> dict:
    """All .mdx files under the content directory, sorted by name.

    Returns:
        {"files": [{"path": "app/page.mdx", "name": "page.mdx"}, ...]}
        plus "error" when the content directory does not exist.
    """
    base = project_root / content_dir
    if not base.is_dir():
        return {"files": [], "error": f"No /{content_dir} directory found"}

    files = [
        {
            "path": f.relative_to(project_root).as_posix(),
            "name": f.relative_to(base).as_posix(),
        }
        for f in base.rglob("*.mdx")
        if f.is_file()
    ]
    files.sort(key=lambda f: f["name"])
    return {"files": files}


def read_document(project_root: Path, rel_path: str) -> dict:
    """Read a project file as text."""
    if not rel_path:
        return {"error": "File path required", "_status": 400}

    target = resolve_safe_path(project_root, rel_path)
    if target is None:
        return {"error": "Access denied", "_status": 403}

    if not target.is_file():
        return {"error": f"File not found: {rel_path}", "_status": 404}

    return {"content": target.read_text(encoding="utf-8"), "path": rel_path}


def write_document(project_root: Path, rel_path: str, content: object) -> dict:
    """Write text to a project file, creating parent directories."""
    if not rel_path:
        return {"error": "File path required", "_status": 400}

    if not isinstance(content, str):
        return {"error": "Content required", "_status": 400}

    target = resolve_safe_path(project_root, rel_path)
    if target is None:
        return {"error": "Access denied", "_status": 403}

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Saved %s (%d chars)", rel_path, len(content))
    return {"success": True, "path": rel_path}

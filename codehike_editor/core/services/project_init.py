"""
Project init — prepare a Code Hike project's package.json for the editor.

Checks that Code Hike is a dependency, then adds the editor as a dev
dependency and an ``editor`` script. Package installation is left to
the user's own package manager.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

EDITOR_PACKAGE = "codehike-editor"
EDITOR_VERSION_RANGE = "^0.1.0"
EDITOR_SCRIPT = "codehike-editor start"


class InitError(Exception):
    """Raised when a project cannot be initialized."""


def _load_package_json(path: Path) -> dict:
    if not path.is_file():
        raise InitError(
            "No package.json found in current directory. "
            "Run this command from the root of your project."
        )
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InitError(f"Could not parse package.json: {e}") from e
    if not isinstance(data, dict):
        raise InitError("package.json must contain a JSON object")
    return data


def init_project(project_root: Path) -> dict:
    """Add the editor dev dependency and script to package.json.

    Returns:
        {"dependency_added": bool, "script_added": bool}

    Raises:
        InitError: If package.json is missing, invalid, or Code Hike
            is not installed.
    """
    path = project_root / "package.json"
    package = _load_package_json(path)

    deps = package.get("dependencies") or {}
    dev_deps = package.get("devDependencies") or {}
    if "codehike" not in deps and "codehike" not in dev_deps:
        raise InitError(
            "Code Hike is not installed in this project. "
            "Install it first: https://codehike.org/docs"
        )

    result = {"dependency_added": False, "script_added": False}

    if EDITOR_PACKAGE not in dev_deps:
        package["devDependencies"] = {**dev_deps, EDITOR_PACKAGE: EDITOR_VERSION_RANGE}
        result["dependency_added"] = True

    scripts = package.get("scripts") or {}
    if "editor" not in scripts:
        package["scripts"] = {**scripts, "editor": EDITOR_SCRIPT}
        result["script_added"] = True

    if result["dependency_added"] or result["script_added"]:
        path.write_text(json.dumps(package, indent=2) + "\n", encoding="utf-8")
        logger.info("Updated %s: %s", path, result)

    return result

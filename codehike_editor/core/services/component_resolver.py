"""
User component discovery — which Code Hike components has the user
already got (or overridden) in their project?
"""

from __future__ import annotations

import logging
from pathlib import Path

from codehike_editor.core.services.component_detector import is_known_component
from codehike_editor.core.services.names import to_component_name, to_file_key

logger = logging.getLogger(__name__)

# Injected components land in the first existing directory
COMPONENT_SEARCH_PATHS = (
    "components/annotations",
    "app/components",
    "components",
    "src/components",
)

COMPONENT_EXTS = (".tsx", ".jsx")


def find_user_components(project_root: Path) -> list[dict]:
    """List every .tsx/.jsx file under the known component directories.

    Returns:
        [{"name": "CopyButton", "path": "...", "is_codehike_override": True}, ...]
    """
    components: list[dict] = []

    for search_path in COMPONENT_SEARCH_PATHS:
        directory = project_root / search_path
        if not directory.is_dir():
            continue

        for file in sorted(directory.rglob("*")):
            if not file.is_file() or file.suffix not in COMPONENT_EXTS:
                continue
            name = to_component_name(file.stem)
            components.append({
                "name": name,
                "path": str(file),
                "is_codehike_override": is_known_component(name),
            })

    logger.debug("Found %d user components", len(components))
    return components


def has_user_component(project_root: Path, component_name: str) -> Path | None:
    """Path of the user's own file for ``component_name``, if any."""
    file_key = to_file_key(component_name)
    for search_path in COMPONENT_SEARCH_PATHS:
        for ext in COMPONENT_EXTS:
            candidate = project_root / search_path / f"{file_key}{ext}"
            if candidate.is_file():
                return candidate
    return None

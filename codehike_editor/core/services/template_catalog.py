"""
Template catalog — read-only access to the starter component templates.

Templates ship with the editor's npm package as ``<file-key>.tsx``
files. Some have companion files (client components) that must be
copied along, and a few depend on other templates.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from codehike_editor.core.services.file_store import FileStore
from codehike_editor.core.services.injection.registries import (
    COMPANION_FILES,
    LAYOUT_TEMPLATES,
    TEMPLATE_DEPENDENCIES,
)
from codehike_editor.core.services.names import to_file_key

logger = logging.getLogger(__name__)

TEMPLATE_EXT = ".tsx"

_SNIPPET = re.compile(r"/\*\s*MDX Snippet:\s*([\s\S]*?)\*/")
_WHITESPACE = re.compile(r"\s+")


class TemplateCatalog:
    """Lookup from file key to template text."""

    def __init__(self, root: Path) -> None:
        self.store = FileStore(root)

    @property
    def root(self) -> Path:
        return self.store.root

    def filename(self, file_key: str) -> str:
        return f"{file_key}{TEMPLATE_EXT}"

    def exists(self, file_key: str) -> bool:
        return self.store.exists(self.filename(file_key))

    def read(self, file_key: str) -> str | None:
        """Template body, or None when it cannot be read."""
        return self.store.read(self.filename(file_key))

    def read_file(self, name: str) -> str | None:
        """Any file in the catalog directory (companions)."""
        return self.store.read(name)

    def companions(self, file_key: str) -> tuple[str, ...]:
        return COMPANION_FILES.get(file_key, ())

    def dependencies(self, file_key: str) -> tuple[str, ...]:
        return TEMPLATE_DEPENDENCIES.get(file_key, ())

    def resolve_key(self, name: str) -> str:
        """Normalize a requested name (``CopyButton``, ``copy button``) to a key.

        Prefers the hyphenated form; falls back to plain lower-casing when
        only that exists (``TypeScript`` → ``typescript``).
        """
        cleaned = _WHITESPACE.sub("-", name.strip())
        key = to_file_key(cleaned)
        if self.exists(key):
            return key
        lowered = cleaned.lower()
        if lowered != key and self.exists(lowered):
            return lowered
        return key

    def list_templates(self) -> dict[str, list[str]]:
        """Split templates into code templates and layouts."""
        if not self.root.is_dir():
            logger.debug("Template directory missing: %s", self.root)
            return {"code": [], "layouts": []}

        # focus.client.tsx and friends are companions, not templates
        names = sorted(
            p.name[: -len(TEMPLATE_EXT)]
            for p in self.root.iterdir()
            if p.is_file() and p.name.endswith(TEMPLATE_EXT) and p.name.count(".") == 1
        )
        return {
            "code": [n for n in names if n not in LAYOUT_TEMPLATES],
            "layouts": [n for n in names if n in LAYOUT_TEMPLATES],
        }


def extract_snippet(content: str) -> str:
    """The ``/* MDX Snippet: ... */`` usage example at the top of a template."""
    m = _SNIPPET.search(content)
    return m.group(1).strip() if m else ""

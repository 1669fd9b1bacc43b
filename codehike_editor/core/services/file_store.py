"""
File store — text read/write rooted at a project directory.

The injection engine only needs ``read`` (text or None) and ``write``.
Reads never raise for a missing or unreadable file; writes propagate
OSError to the caller.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStore:
    """A directory handle with UTF-8 text helpers."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"FileStore({str(self.root)!r})"

    def path(self, relative: str) -> Path:
        return self.root / relative

    def child(self, relative: str) -> FileStore:
        """Handle for a sub-directory (not created)."""
        return FileStore(self.root / relative)

    def exists(self, relative: str) -> bool:
        return self.path(relative).is_file()

    def read(self, relative: str) -> str | None:
        """Read a file as text. None when absent or unreadable."""
        target = self.path(relative)
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", target, e)
            return None

    def write(self, relative: str, content: str) -> None:
        """Write text, creating parent directories. Raises OSError."""
        target = self.path(relative)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d chars to %s", len(content), target)

    def relative_to(self, other: FileStore) -> str:
        """POSIX path of this store relative to ``other`` ('' when equal)."""
        rel = os.path.relpath(self.root.resolve(), other.root.resolve())
        return "" if rel == "." else rel.replace(os.sep, "/")

"""
Hover styles for code-mentions — appended once to the global stylesheet.

The marker comment makes the append idempotent.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

HOVER_CSS_MARKER = "/* codehike:code-mentions */"

HOVER_CSS = f"""
{HOVER_CSS_MARKER}
.hover-container [data-line] {{
  transition: opacity 0.2s;
}}
.hover-container:has([data-hover]:hover) [data-line] {{
  opacity: 0.3;
}}
.hover-container:has([data-hover]:hover) [data-line=""] {{
  opacity: 0.3;
}}
"""

DEFAULT_HOVER_NAMES = (
    "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
)

# First existing file wins; otherwise the first one is created
GLOBAL_CSS_CANDIDATES = (
    "app/globals.css",
    "styles/globals.css",
    "app/global.css",
)


def hover_match_rules(names: tuple[str, ...] | list[str]) -> str:
    """One :has() rule per hover name restoring full opacity on its lines."""
    return "\n".join(
        f'.hover-container:has([data-hover="{n}"]:hover) [data-line="{n}"] {{ opacity: 1; }}'
        for n in names
    )


def find_global_css(project_root: Path) -> Path | None:
    for candidate in GLOBAL_CSS_CANDIDATES:
        path = project_root / candidate
        if path.is_file():
            return path
    return None


def ensure_hover_styles(project_root: Path) -> bool:
    """Append hover CSS to the global stylesheet.

    Returns:
        True if the stylesheet was changed, False if already present.

    Raises:
        OSError: If the stylesheet cannot be read or written.
    """
    css_path = find_global_css(project_root)
    if css_path is None:
        css_path = project_root / GLOBAL_CSS_CANDIDATES[0]
        css_path.parent.mkdir(parents=True, exist_ok=True)
        css_path.write_text("", encoding="utf-8")
        logger.info("Created %s", css_path)

    content = css_path.read_text(encoding="utf-8")
    if HOVER_CSS_MARKER in content:
        return False

    css_path.write_text(
        content + HOVER_CSS + hover_match_rules(DEFAULT_HOVER_NAMES) + "\n",
        encoding="utf-8",
    )
    logger.info("Added code-mentions hover styles to %s", css_path)
    return True

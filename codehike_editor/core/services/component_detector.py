"""
Component detector — which Code Hike components does a document use?

A pattern scan over MDX text: JSX tags plus named imports from
``codehike`` packages. Only names in the known catalog are reported.
"""

from __future__ import annotations

import re

CODE_HIKE_COMPONENTS: tuple[str, ...] = (
    "Callout",
    "ClassName",
    "CodeMentions",
    "Collapse",
    "CopyButton",
    "Diff",
    "FileName",
    "Focus",
    "Fold",
    "Footnotes",
    "LanguageSwitcher",
    "LineNumbers",
    "Link",
    "Mark",
    "Tabs",
    "TokenTransitions",
    "Tooltip",
    "Transpile",
    "TypeScript",
    "WordWrap",
)

CODE_HIKE_LAYOUTS: tuple[str, ...] = (
    "Scrollycoding",
    "Slideshow",
    "Spotlight",
)

ALL_CODE_HIKE_NAMES = frozenset(CODE_HIKE_COMPONENTS + CODE_HIKE_LAYOUTS)

_JSX_TAG = re.compile(r"<([A-Z][a-zA-Z0-9]*)")
_CODEHIKE_IMPORT = re.compile(r"import\s+\{([^}]+)\}\s+from\s+['\"]@?codehike")
_ALIAS = re.compile(r"\s+as\s+")


def detect_components(content: str) -> list[str]:
    """Return the sorted, de-duplicated Code Hike names used in ``content``."""
    detected: set[str] = set()

    for m in _JSX_TAG.finditer(content):
        if m.group(1) in ALL_CODE_HIKE_NAMES:
            detected.add(m.group(1))

    for m in _CODEHIKE_IMPORT.finditer(content):
        for item in m.group(1).split(","):
            # "Focus as MyFocus" → Focus
            name = _ALIAS.split(item.strip())[0].strip()
            if name in ALL_CODE_HIKE_NAMES:
                detected.add(name)

    return sorted(detected)


def is_known_component(name: str) -> bool:
    return name in ALL_CODE_HIKE_NAMES


def is_layout(name: str) -> bool:
    return name in CODE_HIKE_LAYOUTS

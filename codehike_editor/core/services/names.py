"""
Name normalizer — ComponentName <-> FileKey.

    CopyButton   <->  copy-button
    LineNumbers  <->  line-numbers

Round-trips for capitalized words without acronyms. ``HTMLBlock``
becomes ``htmlblock`` and comes back as ``Htmlblock``.
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def to_file_key(name: str) -> str:
    """PascalCase component name → kebab-case file key."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def to_component_name(key: str) -> str:
    """kebab-case file key → PascalCase component name."""
    return "".join(part[:1].upper() + part[1:] for part in key.split("-"))
